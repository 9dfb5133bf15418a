"""
Unit tests for attempt persistence (in-memory and JSON file stores).
"""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

import pytest

from src.errors import UnknownAttemptError
from src.models.attempt import ATTEMPT_COMPLETE, ATTEMPT_IN_PROGRESS, Attempt
from src.services.attempt_store import InMemoryAttemptStore, JsonAttemptStore


class TestInMemoryAttemptStore:
    def test_create_and_read(self):
        store = InMemoryAttemptStore()
        data = store.create()
        assert data.id == 1
        assert store.read(1).questionsattempted == 0
        assert store.read(1).attemptstate == ATTEMPT_IN_PROGRESS

    def test_ids_increment(self):
        store = InMemoryAttemptStore()
        assert [store.create().id for _ in range(3)] == [1, 2, 3]

    def test_explicit_duplicate_id_raises(self):
        store = InMemoryAttemptStore()
        store.create(7)
        with pytest.raises(ValueError):
            store.create(7)

    def test_unknown_attempt(self):
        with pytest.raises(UnknownAttemptError):
            InMemoryAttemptStore().read(5)

    def test_reads_are_copies(self):
        store = InMemoryAttemptStore()
        store.create()
        data = store.read(1)
        data.questionsattempted = 99
        assert store.read(1).questionsattempted == 0

    def test_attempt_handle(self):
        store = InMemoryAttemptStore()
        store.create()
        attempt = Attempt(1, store)
        attempt.set_attempt_uniqueid(12)
        store.record_question_attempted(1)
        data = attempt.read_attempt_data()
        assert data.uniqueid == 12
        assert data.questionsattempted == 1


class TestJsonAttemptStore(unittest.TestCase):
    """Test JSON file persistence."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.store = JsonAttemptStore(attempts_dir=self.temp_dir)

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def test_create_writes_file(self):
        data = self.store.create()
        filepath = self.temp_dir / f"at-{data.id}.json"
        self.assertTrue(filepath.exists())

        with open(filepath, "r", encoding="utf-8") as f:
            record = json.load(f)
        self.assertEqual(record["id"], data.id)
        self.assertEqual(record["questionsattempted"], 0)
        self.assertIn("updated_at", record)

    def test_round_trip_through_new_store(self):
        self.store.create()
        self.store.set_ledger_ref(1, 3)
        self.store.record_question_attempted(1)

        reopened = JsonAttemptStore(attempts_dir=self.temp_dir)
        data = reopened.read(1)
        self.assertEqual(data.uniqueid, 3)
        self.assertEqual(data.questionsattempted, 1)

    def test_next_id_follows_existing_files(self):
        self.store.create(5)
        self.assertEqual(self.store.create().id, 6)

    def test_list_attempts_by_state(self):
        for _ in range(3):
            self.store.create()
        self.store.complete(2)

        self.assertEqual([a.id for a in self.store.list_attempts()], [1, 2, 3])
        self.assertEqual([a.id for a in self.store.list_attempts(ATTEMPT_COMPLETE)], [2])
        self.assertEqual([a.id for a in self.store.list_attempts(ATTEMPT_IN_PROGRESS)], [1, 3])

    def test_invalid_record_is_not_saved(self):
        self.store.create()
        with self.assertRaises(ValueError):
            self.store.set_ledger_ref(1, -4)
        self.assertEqual(self.store.read(1).uniqueid, 0)

    def test_unknown_attempt(self):
        with self.assertRaises(UnknownAttemptError):
            self.store.read(404)


def test_base_store_requires_storage_hooks():
    from src.services.attempt_store import _BaseAttemptStore

    with pytest.raises(TypeError):
        _BaseAttemptStore()
