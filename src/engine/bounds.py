"""Difficulty level bounds."""


def level_in_bounds(level: int, lowest: int, highest: int) -> bool:
    """True iff `level` lies within [lowest, highest] (inclusive)."""
    return lowest <= level <= highest
