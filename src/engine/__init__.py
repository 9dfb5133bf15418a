"""
Adaptive item-administration engine.

- bounds: Level bounds check
- answer_outcome: Classification of the previous slot
- difficulty: Pure difficulty adjustment over DifficultyState
- question_pool: Candidate search with exclusions and nearest-level fallback
- selector: Uniform random choice among candidates
- session: AdaptiveQuizSession orchestrator and its interface adapter
- catalog_strategy: Minimal strategy delegating to an external handler
- factory: Strategy selection by configuration
"""

from .administration import ItemAdministration
from .answer_outcome import classify, is_correct, was_answered
from .bounds import level_in_bounds
from .catalog_strategy import CatalogItemAdministration
from .difficulty import DifficultyState, advance
from .factory import STRATEGIES, build_item_administration
from .question_pool import FetchResult, QuestionPool
from .selector import NextItemSelector
from .session import AdaptiveItemAdministration, AdaptiveQuizSession

__all__ = [
    "ItemAdministration",
    "classify",
    "is_correct",
    "was_answered",
    "level_in_bounds",
    "CatalogItemAdministration",
    "DifficultyState",
    "advance",
    "STRATEGIES",
    "build_item_administration",
    "FetchResult",
    "QuestionPool",
    "NextItemSelector",
    "AdaptiveItemAdministration",
    "AdaptiveQuizSession",
]
