"""
Question pool - eligible questions for a requested difficulty level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Set

from ..services.interfaces import QuestionCatalog
from .bounds import level_in_bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Candidate question ids and the level they were found at."""

    question_ids: Set[int] = field(default_factory=set)
    level: Optional[int] = None

    def __bool__(self) -> bool:
        return bool(self.question_ids)


class QuestionPool:
    """
    Finds unused questions at, or as close as possible to, a requested level.

    The requested level is searched first. When it has nothing left the
    search widens one level at a time, trying the harder neighbour before
    the easier one, without leaving the window formed by the quiz bounds and
    the optional floor/ceiling hints.

    Args:
        catalog: Question catalog to draw from
        lowest: Lowest level of the quiz
        highest: Highest level of the quiz
    """

    def __init__(self, catalog: QuestionCatalog, lowest: int, highest: int):
        self.catalog = catalog
        self.lowest = lowest
        self.highest = highest
        self._cache: Dict[int, Set[int]] = {}

    def rebuild(self) -> None:
        """Forget cached per-level results."""
        self._cache.clear()

    def _questions_at(self, level: int) -> Set[int]:
        if level not in self._cache:
            self._cache[level] = set(self.catalog.questions_at_level(level))
        return self._cache[level]

    def search_window(self, floor: Optional[int] = None, ceiling: Optional[int] = None):
        """Inclusive (low, high) range the search may visit."""
        low = self.lowest if floor is None else max(self.lowest, floor)
        high = self.highest if ceiling is None else min(self.highest, ceiling)
        return low, high

    def _search_order(self, level: int, low: int, high: int) -> Iterator[int]:
        start = min(max(level, low), high)
        yield start
        distance = 1
        while start + distance <= high or start - distance >= low:
            if start + distance <= high:
                yield start + distance
            if start - distance >= low:
                yield start - distance
            distance += 1

    def fetch(
        self,
        exclude: Iterable[int],
        level: int,
        floor: Optional[int] = None,
        ceiling: Optional[int] = None,
        rebuild: bool = False,
    ) -> FetchResult:
        """
        Fetch eligible question ids.

        Args:
            exclude: Question ids already used in the attempt
            level: Requested difficulty level
            floor: Optional minimum level hint
            ceiling: Optional maximum level hint
            rebuild: Drop cached catalog answers before searching

        Returns:
            FetchResult; empty when nothing qualifies
        """
        if rebuild:
            self.rebuild()

        if not level_in_bounds(level, self.lowest, self.highest):
            logger.debug(f"Level {level} outside [{self.lowest}, {self.highest}]")
            return FetchResult()

        low, high = self.search_window(floor, ceiling)
        if low > high:
            logger.debug(f"Empty search window: floor={floor}, ceiling={ceiling}")
            return FetchResult()

        excluded = set(exclude)
        for candidate_level in self._search_order(level, low, high):
            candidates = self._questions_at(candidate_level) - excluded
            if candidates:
                if candidate_level != level:
                    logger.debug(f"No questions left at level {level}, using level {candidate_level}")
                return FetchResult(question_ids=candidates, level=candidate_level)

        return FetchResult()
