"""Uniform random choice of the next question."""

import random
from typing import Iterable, Optional

from ..config import config


class NextItemSelector:
    """
    Picks one candidate uniformly at random.

    Args:
        rng: Random source (default: seeded from config.engine.random_seed)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(config.engine.random_seed)

    def pick(self, candidates: Iterable[int]) -> int:
        """
        Raises:
            ValueError: If there are no candidates
        """
        ordered = sorted(candidates)
        if not ordered:
            raise ValueError("Cannot pick a question from an empty candidate set")
        return self.rng.choice(ordered)
