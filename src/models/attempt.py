"""
Attempt model - one learner's run through an adaptive quiz.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from ..services.interfaces import AttemptStore


ATTEMPT_IN_PROGRESS = "inprogress"
ATTEMPT_COMPLETE = "complete"


@dataclass
class AttemptData:
    """
    Persisted attempt record.

    Attributes:
        id: Attempt identifier
        uniqueid: Reference to the question usage ledger (0 until first saved)
        questionsattempted: Number of questions answered so far
        attemptstate: "inprogress" or "complete"
    """

    id: int
    uniqueid: int = 0
    questionsattempted: int = 0
    attemptstate: str = ATTEMPT_IN_PROGRESS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AttemptData:
        return cls(
            id=data["id"],
            uniqueid=data.get("uniqueid", 0),
            questionsattempted=data.get("questionsattempted", 0),
            attemptstate=data.get("attemptstate", ATTEMPT_IN_PROGRESS),
        )


class Attempt:
    """
    Handle on an attempt living in an AttemptStore.

    Reads always go to the store so that the engine sees what the host
    persisted between administration steps.
    """

    def __init__(self, attempt_id: int, store: AttemptStore):
        self.attempt_id = attempt_id
        self.store = store

    def read_attempt_data(self) -> AttemptData:
        return self.store.read(self.attempt_id)

    def set_attempt_uniqueid(self, uniqueid: int) -> None:
        """Point the attempt at its question usage ledger."""
        self.store.set_ledger_ref(self.attempt_id, uniqueid)

    def __repr__(self) -> str:
        return f"Attempt(id={self.attempt_id})"
