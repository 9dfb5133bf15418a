"""
Adaptive quiz session - the step-based difficulty ladder.

Each call to `start_attempt` performs one administration step:

1. Reject a requested level outside the quiz bounds.
2. Stop once the maximum number of questions has been attempted.
3. Look at the last slot of the question usage ledger:
   - no slot on a fresh attempt: start at the quiz's starting level
   - answered slot: move the level up or down and fetch a new question
   - no slot although questions were attempted: inconsistent, stop
   - unanswered slot: that question is still pending, nothing to do
4. Fetch candidates (excluding questions already used), pick one at random,
   attach it to a new slot and save the ledger.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..messages import get_string
from ..models.attempt import Attempt, AttemptData
from ..models.evaluation import ItemAdministrationEvaluation, NextItem
from ..models.quiz_configuration import QuizConfiguration
from ..services.event_logger import LoggingEventLogger, log_event
from ..services.interfaces import (
    EventLogger,
    QuestionCatalog,
    QuestionLedger,
    UsedQuestionsLookup,
)
from .administration import ItemAdministration
from .answer_outcome import was_answered
from .bounds import level_in_bounds
from .difficulty import DifficultyState, advance
from .question_pool import QuestionPool
from .selector import NextItemSelector

logger = logging.getLogger(__name__)


class AdaptiveQuizSession:
    """
    Runs administration steps for one attempt.

    Args:
        ledger: The attempt's question usage ledger
        catalog: Question catalog to draw from
        used_questions: Lookup of questions already used by the attempt
        level: Difficulty level the attempt is currently set at
        selector: Random selector (default: seeded from config)
        event_logger: Diagnostic event sink (default: logging-backed)
    """

    def __init__(
        self,
        ledger: QuestionLedger,
        catalog: QuestionCatalog,
        used_questions: UsedQuestionsLookup,
        level: int,
        selector: Optional[NextItemSelector] = None,
        event_logger: Optional[EventLogger] = None,
    ):
        self.ledger = ledger
        self.catalog = catalog
        self.used_questions = used_questions
        self.selector = selector or NextItemSelector()
        self.event_logger = event_logger or LoggingEventLogger()

        self._level = level
        self._slot = 0
        self._stop_criteria: Optional[str] = None
        self._pool: Optional[QuestionPool] = None

    def level(self) -> int:
        """The difficulty level the attempt is currently set at."""
        return self._level

    def question_slot_number(self) -> int:
        """Slot of the question ready to be attempted (0 when none)."""
        return self._slot

    def attempt_stop_criteria(self) -> Optional[str]:
        return self._stop_criteria

    def start_attempt(
        self,
        attempt: Attempt,
        quiz: QuizConfiguration,
        last_difficulty_level: Optional[int] = None,
    ) -> bool:
        """
        Prepare the next question of the attempt.

        Args:
            attempt: The attempt being taken
            quiz: Configuration of the quiz
            last_difficulty_level: Level of the previously administered
                question; looked up in the catalog when omitted

        Returns:
            True when a question slot is ready, False when the attempt must
            stop (see `attempt_stop_criteria()`)
        """
        self._stop_criteria = None

        if not level_in_bounds(self._level, quiz.lowestlevel, quiz.highestlevel):
            return self._stop(attempt, get_string("leveloutofbounds", level=self._level))

        attempt_data = attempt.read_attempt_data()
        if attempt_data.questionsattempted >= quiz.maximumquestions:
            return self._stop(attempt, get_string("maxquestattempted"))

        # The last slot is the question last shown to, or answered by, the learner
        slots = self.ledger.slots()
        self._slot = slots[-1] if slots else 0

        state: Optional[DifficultyState] = None
        if not self._slot and attempt_data.questionsattempted == 0:
            state = DifficultyState.start(quiz.startinglevel)
        elif self._slot and was_answered(self.ledger, self._slot):
            if last_difficulty_level is None:
                question_id = self.ledger.question_id_of(self._slot)
                last_difficulty_level = self.catalog.load(question_id).level
            state = advance(
                DifficultyState(level=self._level),
                previous_level=last_difficulty_level,
                mark=self.ledger.mark_of(self._slot),
                lowest=quiz.lowestlevel,
                highest=quiz.highestlevel,
            )
            self._slot = 0
        elif not self._slot and attempt_data.questionsattempted > 0:
            logger.warning(
                f"Attempt {attempt_data.id} has {attempt_data.questionsattempted} questions "
                f"attempted but an empty question usage"
            )
            return self._stop(attempt, get_string("errorattemptstate"))

        if self._slot:
            log_event(
                self.event_logger, attempt_data.id, f"Slot {self._slot} still awaiting an answer"
            )
            return True

        self._level = state.level
        if not self._get_question_ready(attempt, attempt_data, quiz, state):
            return self._stop(attempt, get_string("errorfetchingquest", level=self._level))

        return True

    def _get_question_ready(
        self,
        attempt: Attempt,
        attempt_data: AttemptData,
        quiz: QuizConfiguration,
        state: DifficultyState,
    ) -> bool:
        """Fetch, pick and attach a new question. Returns False when none is available."""
        exclude = self.used_questions.used_ids(attempt_data.uniqueid)
        result = self._pool_for(quiz).fetch(
            exclude,
            level=state.level,
            floor=state.minimum_level,
            ceiling=state.maximum_level,
            rebuild=state.rebuild,
        )
        if not result:
            return False

        question_id = self.selector.pick(result.question_ids)
        question = self.catalog.load(question_id)

        self._slot = self.ledger.add_question(question)
        self.ledger.start(self._slot)
        self.ledger.save()
        attempt.set_attempt_uniqueid(self.ledger.id)

        self._level = result.level
        log_event(
            self.event_logger,
            attempt_data.id,
            f"Question {question_id} at level {result.level} attached to slot {self._slot}",
        )
        return True

    def _pool_for(self, quiz: QuizConfiguration) -> QuestionPool:
        """Pool kept across steps so per-level catalog answers are cached; rebuilt when bounds change."""
        if self._pool is None or (self._pool.lowest, self._pool.highest) != (
            quiz.lowestlevel,
            quiz.highestlevel,
        ):
            self._pool = QuestionPool(self.catalog, quiz.lowestlevel, quiz.highestlevel)
        return self._pool

    def _stop(self, attempt: Attempt, reason: str) -> bool:
        self._stop_criteria = reason
        log_event(self.event_logger, attempt.attempt_id, f"Stopping: {reason}")
        return False


class AdaptiveItemAdministration(ItemAdministration):
    """
    Exposes an AdaptiveQuizSession through the ItemAdministration interface.

    The ledger is the source of truth for the pending slot, so the previous
    slot handed in by the host is only recorded as a diagnostic event.
    """

    def __init__(
        self,
        session: AdaptiveQuizSession,
        attempt: Attempt,
        quiz: QuizConfiguration,
        last_difficulty_level: Optional[int] = None,
    ):
        self.session = session
        self.attempt = attempt
        self.quiz = quiz
        self.last_difficulty_level = last_difficulty_level

    def evaluate_ability_to_administer_next_item(
        self, previous_question_slot: Optional[int]
    ) -> ItemAdministrationEvaluation:
        log_event(
            self.session.event_logger,
            self.attempt.attempt_id,
            f"Previous question slot is {previous_question_slot}",
        )
        if self.session.start_attempt(self.attempt, self.quiz, self.last_difficulty_level):
            return ItemAdministrationEvaluation.with_next_item(
                NextItem.from_slot(self.session.question_slot_number())
            )
        return ItemAdministrationEvaluation.with_stoppage_reason(
            self.session.attempt_stop_criteria()
        )
