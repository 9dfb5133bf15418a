"""
Minimal item administration delegating the choice to an external handler.

The handler returns `(question_id, error_message)`; a question id of 0
means no further question can be administered and the message becomes the
stoppage reason. No difficulty adjustment or exclusion happens here.
"""

import logging
from typing import Callable, Optional, Tuple

from ..models.attempt import Attempt, AttemptData
from ..models.evaluation import ItemAdministrationEvaluation, NextItem
from ..models.quiz_configuration import QuizConfiguration
from ..services.event_logger import LoggingEventLogger, log_event
from ..services.interfaces import EventLogger
from .administration import ItemAdministration

logger = logging.getLogger(__name__)

COMPONENT = "adaptivequiz"

FetchQuestionId = Callable[[int, str, AttemptData], Tuple[int, str]]


class CatalogItemAdministration(ItemAdministration):
    """
    Args:
        fetch_question_id: Handler called as (quiz_id, component, attempt_data)
        quiz: Configuration of the quiz
        attempt: The attempt being taken
        event_logger: Diagnostic event sink (default: logging-backed)
    """

    def __init__(
        self,
        fetch_question_id: FetchQuestionId,
        quiz: QuizConfiguration,
        attempt: Attempt,
        event_logger: Optional[EventLogger] = None,
    ):
        self.fetch_question_id = fetch_question_id
        self.quiz = quiz
        self.attempt = attempt
        self.event_logger = event_logger or LoggingEventLogger()

    def evaluate_ability_to_administer_next_item(
        self, previous_question_slot: Optional[int]
    ) -> ItemAdministrationEvaluation:
        attempt_data = self.attempt.read_attempt_data()
        question_id, error_message = self.fetch_question_id(self.quiz.id, COMPONENT, attempt_data)

        if previous_question_slot is None:
            log_event(self.event_logger, attempt_data.id, "Previous question slot is null")

        if question_id == 0:
            log_event(self.event_logger, attempt_data.id, "Stopping because questionid is 0")
            return ItemAdministrationEvaluation.with_stoppage_reason(error_message)

        log_event(self.event_logger, attempt_data.id, f"Fetched question with ID {question_id}")
        return ItemAdministrationEvaluation.with_next_item(NextItem.from_question_id(question_id))
