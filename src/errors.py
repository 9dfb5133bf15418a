"""Exceptions raised by the item-administration engine and its reference services."""


class EngineError(Exception):
    """Base class for engine errors."""


class ConfigurationError(EngineError, ValueError):
    """A quiz configuration record failed validation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid quiz configuration: " + "; ".join(self.errors))


class UnknownAttemptError(EngineError, KeyError):
    """No attempt is stored under the requested id."""

    def __init__(self, attempt_id: int):
        self.attempt_id = attempt_id
        super().__init__(f"Attempt {attempt_id} not found")


class UnknownSlotError(EngineError, KeyError):
    """A ledger was asked about a slot it never allocated."""

    def __init__(self, slot: int):
        self.slot = slot
        super().__init__(f"Slot {slot} does not exist in this question usage")


class UnknownQuestionError(EngineError, KeyError):
    """The question catalog holds no question with the requested id."""

    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(f"Question {question_id} not found in catalog")
