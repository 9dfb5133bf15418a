"""
Utility modules for the adaptive item-administration engine.

- validation: JSON Schema validation with auto-repair for quiz, catalog and attempt records
"""

from .validation import (
    AttemptValidator,
    QuestionCatalogValidator,
    QuizConfigurationValidator,
    SchemaValidator,
    ValidationResult,
    validate_question_catalog,
    validate_quiz_configuration,
)

__all__ = [
    "AttemptValidator",
    "QuestionCatalogValidator",
    "QuizConfigurationValidator",
    "SchemaValidator",
    "ValidationResult",
    "validate_question_catalog",
    "validate_quiz_configuration",
]
