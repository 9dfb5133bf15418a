"""
Difficulty adjustment between administration steps.

The level moves one step up after a correct answer and one step down after
an incorrect one. A correct answer also raises the floor of the next
question search to just above the previous question's level, an incorrect
one lowers its ceiling to just below it. Floor and ceiling are search hints
for the question pool, not clamps on the level itself.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .answer_outcome import is_correct


@dataclass(frozen=True)
class DifficultyState:
    """
    Request-scoped adjustment state.

    Attributes:
        level: Level the next question is requested at
        minimum_level: Optional floor for the question search
        maximum_level: Optional ceiling for the question search
        rebuild: Whether the pool must discard cached per-level results
    """

    level: int
    minimum_level: Optional[int] = None
    maximum_level: Optional[int] = None
    rebuild: bool = False

    @classmethod
    def start(cls, startinglevel: int) -> DifficultyState:
        """State for the first step of a fresh attempt."""
        return cls(level=startinglevel, rebuild=True)


def advance(
    state: DifficultyState,
    previous_level: int,
    mark: Optional[float],
    lowest: int,
    highest: int,
) -> DifficultyState:
    """
    Compute the state for the next question request.

    Args:
        state: Current state (its `level` is the attempt's current level)
        previous_level: Level of the question just answered
        mark: Mark obtained on that question (None counts as zero)
        lowest: Lowest level of the quiz
        highest: Highest level of the quiz

    Returns:
        New state; `state` itself is left untouched
    """
    if is_correct(mark):
        if previous_level < highest:
            level = state.level + 1 if previous_level == state.level else state.level
            return replace(state, level=level, minimum_level=previous_level + 1)
        return state

    if previous_level > lowest:
        level = state.level - 1 if previous_level == state.level else state.level
        return replace(state, level=level, maximum_level=previous_level - 1)
    return state
