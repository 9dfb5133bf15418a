"""
Collaborators of the item-administration engine.

- interfaces: Abstract contracts (ledger, attempt store, catalog, lookups, event logger)
- ledger: In-memory question usage ledger and registry
- catalog: In-memory question catalog and JSON loader
- attempt_store: In-memory and JSON-file attempt persistence
- event_logger: Logging-backed and recording event loggers
"""

from .attempt_store import InMemoryAttemptStore, JsonAttemptStore
from .catalog import InMemoryQuestionCatalog, load_catalog
from .event_logger import LoggingEventLogger, RecordingEventLogger, log_event
from .interfaces import (
    AttemptStore,
    EventLogger,
    QuestionCatalog,
    QuestionDefinition,
    QuestionLedger,
    UsedQuestionsLookup,
)
from .ledger import InMemoryQuestionLedger, LedgerRegistry, SlotRecord

__all__ = [
    # Interfaces
    "AttemptStore",
    "EventLogger",
    "QuestionCatalog",
    "QuestionDefinition",
    "QuestionLedger",
    "UsedQuestionsLookup",
    # Reference implementations
    "InMemoryAttemptStore",
    "JsonAttemptStore",
    "InMemoryQuestionCatalog",
    "load_catalog",
    "LoggingEventLogger",
    "RecordingEventLogger",
    "log_event",
    "InMemoryQuestionLedger",
    "LedgerRegistry",
    "SlotRecord",
]
