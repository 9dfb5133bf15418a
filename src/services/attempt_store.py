"""
Attempt persistence: an in-memory store and a JSON-file store with validation.

Both stores guard read/modify/write with a lock so a single process never
interleaves two updates of one attempt. Cross-process exclusion is the
host's responsibility.
"""

from __future__ import annotations

import json
import logging
import threading
from abc import abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from ..config import config
from ..errors import UnknownAttemptError
from ..models.attempt import ATTEMPT_COMPLETE, AttemptData
from ..utils.validation import AttemptValidator
from .interfaces import AttemptStore

logger = logging.getLogger(__name__)


class _BaseAttemptStore(AttemptStore):
    """Shared bookkeeping on top of `_load` / `_store`."""

    def __init__(self):
        self._lock = threading.Lock()

    @abstractmethod
    def _load(self, attempt_id: int) -> Optional[AttemptData]:
        pass

    @abstractmethod
    def _store(self, data: AttemptData) -> None:
        pass

    @abstractmethod
    def _next_id(self) -> int:
        pass

    def read(self, attempt_id: int) -> AttemptData:
        with self._lock:
            data = self._load(attempt_id)
        if data is None:
            raise UnknownAttemptError(attempt_id)
        return data

    def create(self, attempt_id: Optional[int] = None) -> AttemptData:
        """Create a fresh in-progress attempt."""
        with self._lock:
            if attempt_id is None:
                attempt_id = self._next_id()
            elif self._load(attempt_id) is not None:
                raise ValueError(f"Attempt {attempt_id} already exists")
            data = AttemptData(id=attempt_id)
            self._store(data)
        logger.info(f"Created attempt {attempt_id}")
        return data

    def _update(self, attempt_id: int, **changes) -> AttemptData:
        with self._lock:
            data = self._load(attempt_id)
            if data is None:
                raise UnknownAttemptError(attempt_id)
            for key, value in changes.items():
                setattr(data, key, value)
            self._store(data)
            return data

    def set_ledger_ref(self, attempt_id: int, ledger_ref: int) -> None:
        self._update(attempt_id, uniqueid=ledger_ref)

    def record_question_attempted(self, attempt_id: int) -> AttemptData:
        """Count one more answered question for the attempt."""
        with self._lock:
            data = self._load(attempt_id)
            if data is None:
                raise UnknownAttemptError(attempt_id)
            data.questionsattempted += 1
            self._store(data)
            return data

    def complete(self, attempt_id: int) -> AttemptData:
        return self._update(attempt_id, attemptstate=ATTEMPT_COMPLETE)


class InMemoryAttemptStore(_BaseAttemptStore):
    """Attempt store backed by a dict; handy for tests and simulations."""

    def __init__(self):
        super().__init__()
        self._attempts: Dict[int, AttemptData] = {}

    def _load(self, attempt_id: int) -> Optional[AttemptData]:
        data = self._attempts.get(attempt_id)
        return AttemptData.from_dict(data.to_dict()) if data else None

    def _store(self, data: AttemptData) -> None:
        self._attempts[data.id] = AttemptData.from_dict(data.to_dict())

    def _next_id(self) -> int:
        return max(self._attempts, default=0) + 1


class JsonAttemptStore(_BaseAttemptStore):
    """
    Stores each attempt as data/attempts/at-<id>.json.

    Features:
    - Validate records against attempt.schema.json before writing
    - Timestamp every write (updated_at)
    - List attempts by state
    """

    def __init__(self, attempts_dir: Optional[Path | str] = None):
        """
        Initialize the store.

        Args:
            attempts_dir: Directory to store attempts (default: config.paths.attempts_dir)
        """
        super().__init__()
        self.attempts_dir = Path(attempts_dir) if attempts_dir else config.paths.attempts_dir
        self.attempts_dir.mkdir(parents=True, exist_ok=True)
        self.validator = AttemptValidator()

    def _path(self, attempt_id: int) -> Path:
        return self.attempts_dir / f"at-{attempt_id}.json"

    def _load(self, attempt_id: int) -> Optional[AttemptData]:
        filepath = self._path(attempt_id)
        if not filepath.exists():
            return None
        with open(filepath, "r", encoding="utf-8") as f:
            return AttemptData.from_dict(json.load(f))

    def _store(self, data: AttemptData) -> None:
        record = data.to_dict()
        record["updated_at"] = datetime.now(timezone.utc).isoformat()

        result = self.validator.validate(record)
        if not result.valid:
            raise ValueError(f"Refusing to save invalid attempt {data.id}: " + "; ".join(result.errors))

        with open(self._path(data.id), "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2)

    def _next_id(self) -> int:
        ids = [int(p.stem[len("at-"):]) for p in self.attempts_dir.glob("at-*.json")]
        return max(ids, default=0) + 1

    def list_attempts(self, attemptstate: Optional[str] = None) -> List[AttemptData]:
        """
        List stored attempts, optionally filtered by state.

        Args:
            attemptstate: "inprogress" or "complete" (None for all)

        Returns:
            Attempts sorted by id
        """
        attempts = []
        with self._lock:
            for filepath in self.attempts_dir.glob("at-*.json"):
                with open(filepath, "r", encoding="utf-8") as f:
                    data = AttemptData.from_dict(json.load(f))
                if attemptstate is None or data.attemptstate == attemptstate:
                    attempts.append(data)
        attempts.sort(key=lambda a: a.id)
        return attempts
