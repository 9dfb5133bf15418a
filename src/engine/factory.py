"""
Strategy registry - selects the item administration implementation by name.

Usage:
    administration = build_item_administration(
        "adaptive",
        attempt=attempt,
        quiz=quiz,
        ledger=ledger,
        catalog=catalog,
        used_questions=registry,
        level=quiz.startinglevel,
    )
    evaluation = administration.evaluate_ability_to_administer_next_item(None)

Without a name the configured default (`ITEM_ADMINISTRATION_STRATEGY`) is used.
"""

import logging
from typing import Callable, Dict, Optional

from ..config import config
from .administration import ItemAdministration
from .catalog_strategy import CatalogItemAdministration
from .session import AdaptiveItemAdministration, AdaptiveQuizSession

logger = logging.getLogger(__name__)


def _build_adaptive(
    *,
    attempt,
    quiz,
    ledger,
    catalog,
    used_questions,
    level,
    last_difficulty_level=None,
    selector=None,
    event_logger=None,
    **_unused,
) -> ItemAdministration:
    session = AdaptiveQuizSession(
        ledger=ledger,
        catalog=catalog,
        used_questions=used_questions,
        level=level,
        selector=selector,
        event_logger=event_logger,
    )
    return AdaptiveItemAdministration(session, attempt, quiz, last_difficulty_level)


def _build_catalog(*, attempt, quiz, fetch_question_id, event_logger=None, **_unused) -> ItemAdministration:
    return CatalogItemAdministration(fetch_question_id, quiz, attempt, event_logger=event_logger)


STRATEGIES: Dict[str, Callable[..., ItemAdministration]] = {
    "adaptive": _build_adaptive,
    "catalog": _build_catalog,
}


def build_item_administration(name: Optional[str] = None, **collaborators) -> ItemAdministration:
    """
    Build the named strategy from keyword collaborators.

    Raises:
        ValueError: If the strategy name is unknown
        TypeError: If a collaborator the strategy needs is missing
    """
    name = name or config.engine.strategy
    try:
        builder = STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown item administration strategy {name!r}; expected one of {sorted(STRATEGIES)}"
        ) from None
    logger.debug(f"Building item administration strategy {name!r}")
    return builder(**collaborators)
