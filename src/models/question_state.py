"""
Grading states of a question attempt and the answer outcomes derived from them.
"""

from enum import Enum


class QuestionState(str, Enum):
    """State of one slot in a question usage ledger."""

    NOT_STARTED = "notstarted"
    TODO = "todo"
    COMPLETE = "complete"
    GRADED_RIGHT = "gradedright"
    GRADED_PARTIAL = "gradedpartial"
    GRADED_WRONG = "gradedwrong"
    GAVE_UP = "gaveup"

    @property
    def is_finished(self) -> bool:
        """True for the four states in which a learner has submitted (or abandoned) an answer."""
        return self in ANSWERED_STATES


ANSWERED_STATES = frozenset(
    {
        QuestionState.GRADED_RIGHT,
        QuestionState.GRADED_PARTIAL,
        QuestionState.GRADED_WRONG,
        QuestionState.GAVE_UP,
    }
)


class AnswerOutcome(str, Enum):
    """How the previous slot affects the next difficulty level."""

    UNANSWERED = "unanswered"
    ANSWERED_CORRECT = "answered_correct"
    ANSWERED_INCORRECT = "answered_incorrect"
