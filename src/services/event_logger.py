"""
Diagnostic event logging for attempts.
"""

import logging
from typing import List, Optional, Tuple

from .interfaces import EventLogger

logger = logging.getLogger(__name__)


class LoggingEventLogger(EventLogger):
    """
    Writes attempt events to a stdlib logger.

    Failures while emitting are reported to the module logger and otherwise
    ignored; an event must never change the outcome of an administration step.
    """

    def __init__(self, target: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.target = target or logging.getLogger("src.events")
        self.level = level

    def log(self, attempt_id: int, message: str) -> None:
        try:
            self.target.log(self.level, "[attempt %s] %s", attempt_id, message)
        except Exception:
            logger.exception(f"Failed to log event for attempt {attempt_id}")


class RecordingEventLogger(EventLogger):
    """Keeps events in memory; used by simulations and tests."""

    def __init__(self):
        self.events: List[Tuple[int, str]] = []

    def log(self, attempt_id: int, message: str) -> None:
        self.events.append((attempt_id, message))

    def messages(self, attempt_id: Optional[int] = None) -> List[str]:
        return [m for aid, m in self.events if attempt_id is None or aid == attempt_id]


def log_event(event_logger: EventLogger, attempt_id: int, message: str) -> None:
    """Send an event through any EventLogger; a failing sink is reported and ignored."""
    try:
        event_logger.log(attempt_id, message)
    except Exception:
        logger.exception(f"Event logger {type(event_logger).__name__} failed for attempt {attempt_id}")
