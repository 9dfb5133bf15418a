"""
Classification of the previously administered question.
"""

from ..models.question_state import AnswerOutcome
from ..services.interfaces import QuestionLedger


def was_answered(ledger: QuestionLedger, slot: int) -> bool:
    """
    Whether the learner submitted an answer to `slot`.

    Graded right, partially right, wrong or gave up count as answered; any
    other state (not started, still in progress) means not yet answered.
    """
    return ledger.state_of(slot).is_finished


def is_correct(mark) -> bool:
    """A positive mark is the sole correctness test; a missing mark counts as zero."""
    return (mark or 0) > 0


def classify(ledger: QuestionLedger, slot: int) -> AnswerOutcome:
    if not was_answered(ledger, slot):
        return AnswerOutcome.UNANSWERED
    if is_correct(ledger.mark_of(slot)):
        return AnswerOutcome.ANSWERED_CORRECT
    return AnswerOutcome.ANSWERED_INCORRECT
