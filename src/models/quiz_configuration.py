"""
Quiz configuration - the read-only settings an attempt inherits from its quiz.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from ..errors import ConfigurationError
from ..utils.validation import validate_quiz_configuration


@dataclass(frozen=True)
class QuizConfiguration:
    """
    Level ladder and question limits for one adaptive quiz.

    Attributes:
        id: Quiz identifier
        lowestlevel: Easiest difficulty level questions may be drawn from
        highestlevel: Hardest difficulty level questions may be drawn from
        startinglevel: Level of the first question of every attempt
        maximumquestions: Attempt stops once this many questions were attempted
        minimumquestions: Questions a learner must attempt before stopping voluntarily
        name: Optional display name
    """

    id: int
    lowestlevel: int
    highestlevel: int
    startinglevel: int
    maximumquestions: int
    minimumquestions: int = 1
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QuizConfiguration:
        """
        Build a configuration from a record, validating it first.

        Numeric strings (as delivered by form posts and some database
        drivers) are coerced; unknown keys are dropped.

        Raises:
            ConfigurationError: If the record is invalid
        """
        result = validate_quiz_configuration(data, auto_repair=True)
        if not result.valid:
            raise ConfigurationError(result.errors)
        return cls(**result.data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
