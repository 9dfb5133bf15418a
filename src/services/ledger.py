"""
In-memory question usage ledger and the registry that saves ledgers.

The ledger mirrors how a quiz engine tracks question attempts: each
administered question gets a fresh slot, the slot is started, and grading
moves it into one of the finished states.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..errors import UnknownSlotError
from ..models.question_state import QuestionState
from .interfaces import QuestionDefinition, QuestionLedger, UsedQuestionsLookup

logger = logging.getLogger(__name__)


@dataclass
class SlotRecord:
    """One administered question instance."""

    question_id: int
    max_mark: float
    state: QuestionState = QuestionState.NOT_STARTED
    mark: Optional[float] = None


class InMemoryQuestionLedger(QuestionLedger):
    """
    Question usage ledger held in memory.

    Args:
        registry: Registry that assigns the ledger reference on save
    """

    def __init__(self, registry: Optional[LedgerRegistry] = None):
        self._id = 0
        self._registry = registry
        self._slots: Dict[int, SlotRecord] = {}

    @property
    def id(self) -> int:
        return self._id

    def slots(self) -> List[int]:
        return sorted(self._slots)

    def _record(self, slot: int) -> SlotRecord:
        try:
            return self._slots[slot]
        except KeyError:
            raise UnknownSlotError(slot) from None

    def state_of(self, slot: int) -> QuestionState:
        return self._record(slot).state

    def mark_of(self, slot: int) -> Optional[float]:
        return self._record(slot).mark

    def question_id_of(self, slot: int) -> int:
        return self._record(slot).question_id

    def add_question(self, question: QuestionDefinition) -> int:
        slot = len(self._slots) + 1
        self._slots[slot] = SlotRecord(question_id=question.id, max_mark=question.max_mark)
        return slot

    def start(self, slot: int) -> None:
        record = self._record(slot)
        if record.state is not QuestionState.NOT_STARTED:
            raise ValueError(f"Slot {slot} already started (state={record.state.value})")
        record.state = QuestionState.TODO

    def process_answer(self, slot: int, mark: float) -> QuestionState:
        """
        Grade the answer given in a started slot.

        Full marks grade right, a positive fraction grades partial and
        anything else grades wrong.

        Returns:
            The resulting grading state
        """
        record = self._record(slot)
        if record.state is not QuestionState.TODO:
            raise ValueError(f"Slot {slot} is not awaiting an answer (state={record.state.value})")
        if mark > record.max_mark:
            raise ValueError(f"Mark {mark} exceeds max mark {record.max_mark} for slot {slot}")

        record.mark = mark
        if mark >= record.max_mark:
            record.state = QuestionState.GRADED_RIGHT
        elif mark > 0:
            record.state = QuestionState.GRADED_PARTIAL
        else:
            record.state = QuestionState.GRADED_WRONG
        return record.state

    def give_up(self, slot: int) -> None:
        """Close a started slot without an answer; it keeps no mark."""
        record = self._record(slot)
        if record.state is not QuestionState.TODO:
            raise ValueError(f"Slot {slot} is not awaiting an answer (state={record.state.value})")
        record.state = QuestionState.GAVE_UP
        record.mark = None

    def save(self) -> None:
        if self._registry is None:
            raise RuntimeError("Ledger has no registry to save into")
        self._id = self._registry.save(self)

    def _assign_id(self, ledger_id: int) -> None:
        self._id = ledger_id

    def __repr__(self) -> str:
        return f"InMemoryQuestionLedger(id={self._id}, slots={len(self._slots)})"


class LedgerRegistry(UsedQuestionsLookup):
    """
    Stores saved ledgers by reference and answers used-question lookups.

    A ledger is registered on its first save; later saves keep its id.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._ledgers: Dict[int, InMemoryQuestionLedger] = {}
        self._next_id = 1

    def create(self) -> InMemoryQuestionLedger:
        return InMemoryQuestionLedger(registry=self)

    def save(self, ledger: InMemoryQuestionLedger) -> int:
        with self._lock:
            if ledger.id == 0:
                ledger._assign_id(self._next_id)
                self._next_id += 1
                logger.debug(f"Registered question usage {ledger.id}")
            self._ledgers[ledger.id] = ledger
            return ledger.id

    def get(self, ledger_ref: int) -> Optional[InMemoryQuestionLedger]:
        with self._lock:
            return self._ledgers.get(ledger_ref)

    def load_or_create(self, ledger_ref: int) -> InMemoryQuestionLedger:
        """Ledger saved under `ledger_ref`, or a fresh one when the ref is 0 or unknown."""
        return self.get(ledger_ref) or self.create()

    def used_ids(self, ledger_ref: int) -> Sequence[int]:
        ledger = self.get(ledger_ref)
        if ledger is None:
            return []
        return [ledger.question_id_of(slot) for slot in ledger.slots()]
