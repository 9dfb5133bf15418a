"""
Collaborator contracts consumed by the item-administration engine.

The engine never talks to a database directly; hosts inject objects
implementing these interfaces. Reference implementations live next to this
module (in-memory ledger and catalog, in-memory and JSON attempt stores,
a logging-backed event logger).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from ..models.attempt import AttemptData
from ..models.question_state import QuestionState


@dataclass(frozen=True)
class QuestionDefinition:
    """A question as loaded from the catalog."""

    id: int
    level: int
    name: str = ""
    text: str = ""
    max_mark: float = 1.0


class QuestionLedger(ABC):
    """Per-attempt record of administered questions and their grading states."""

    @property
    @abstractmethod
    def id(self) -> int:
        """Ledger reference; 0 until the ledger has been saved once."""

    @abstractmethod
    def slots(self) -> List[int]:
        """All slots in administration order."""

    @abstractmethod
    def state_of(self, slot: int) -> QuestionState:
        pass

    @abstractmethod
    def mark_of(self, slot: int) -> Optional[float]:
        pass

    @abstractmethod
    def question_id_of(self, slot: int) -> int:
        pass

    @abstractmethod
    def add_question(self, question: QuestionDefinition) -> int:
        """Attach a question and return its freshly allocated slot."""

    @abstractmethod
    def start(self, slot: int) -> None:
        pass

    @abstractmethod
    def save(self) -> None:
        pass


class AttemptStore(ABC):
    """Persists attempt records between administration steps."""

    @abstractmethod
    def read(self, attempt_id: int) -> AttemptData:
        pass

    @abstractmethod
    def set_ledger_ref(self, attempt_id: int, ledger_ref: int) -> None:
        pass


class QuestionCatalog(ABC):
    """Source of questions, grouped by difficulty level."""

    @abstractmethod
    def questions_at_level(self, level: int, exclude: Set[int] = frozenset()) -> Set[int]:
        """Ids of questions tagged with `level`, minus `exclude`."""

    @abstractmethod
    def load(self, question_id: int) -> QuestionDefinition:
        pass


class UsedQuestionsLookup(ABC):
    """Which questions an attempt's ledger already holds."""

    @abstractmethod
    def used_ids(self, ledger_ref: int) -> Sequence[int]:
        """Question ids ordered by administration (ascending slot)."""


class EventLogger(ABC):
    """Fire-and-forget diagnostics; must never affect control flow."""

    @abstractmethod
    def log(self, attempt_id: int, message: str) -> None:
        pass
