"""
Data models for adaptive item administration.

This module contains core data models:
- QuizConfiguration: Level ladder and question limits of a quiz
- Attempt / AttemptData: One learner's run through a quiz
- QuestionState / AnswerOutcome: Grading states and their classification
- NextItem / ItemAdministrationEvaluation: Result of an administration step
"""

from .attempt import ATTEMPT_COMPLETE, ATTEMPT_IN_PROGRESS, Attempt, AttemptData
from .evaluation import ItemAdministrationEvaluation, NextItem
from .question_state import ANSWERED_STATES, AnswerOutcome, QuestionState
from .quiz_configuration import QuizConfiguration

__all__ = [
    "ATTEMPT_COMPLETE",
    "ATTEMPT_IN_PROGRESS",
    "Attempt",
    "AttemptData",
    "ItemAdministrationEvaluation",
    "NextItem",
    "ANSWERED_STATES",
    "AnswerOutcome",
    "QuestionState",
    "QuizConfiguration",
]
