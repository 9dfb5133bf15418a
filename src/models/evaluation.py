"""
Result of one item-administration step.

A step either yields the next item to present or a reason why the attempt
must stop - never both. Stop reasons are returned as data so hosts can
render them without special-casing exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NextItem:
    """The item to present next: a ledger slot, or a bare question id."""

    slot: Optional[int] = None
    question_id: Optional[int] = None

    def __post_init__(self):
        if (self.slot is None) == (self.question_id is None):
            raise ValueError("NextItem needs exactly one of slot or question_id")

    @classmethod
    def from_slot(cls, slot: int) -> NextItem:
        return cls(slot=slot)

    @classmethod
    def from_question_id(cls, question_id: int) -> NextItem:
        return cls(question_id=question_id)


@dataclass(frozen=True)
class ItemAdministrationEvaluation:
    """Tagged result: `next_item` when ready, `stoppage_reason` when stopped."""

    next_item: Optional[NextItem] = None
    stoppage_reason: Optional[str] = None

    def __post_init__(self):
        if (self.next_item is None) == (self.stoppage_reason is None):
            raise ValueError("Evaluation is either a next item or a stoppage reason")

    @classmethod
    def with_next_item(cls, next_item: NextItem) -> ItemAdministrationEvaluation:
        return cls(next_item=next_item)

    @classmethod
    def with_stoppage_reason(cls, reason: str) -> ItemAdministrationEvaluation:
        return cls(stoppage_reason=reason)

    @property
    def is_stopped(self) -> bool:
        return self.stoppage_reason is not None
