"""
Shared pytest fixtures and configuration for engine tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Make the `src` package importable without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.engine.selector import NextItemSelector  # noqa: E402
from src.engine.session import AdaptiveQuizSession  # noqa: E402
from src.models.attempt import Attempt  # noqa: E402
from src.models.quiz_configuration import QuizConfiguration  # noqa: E402
from src.services.attempt_store import InMemoryAttemptStore  # noqa: E402
from src.services.catalog import InMemoryQuestionCatalog  # noqa: E402
from src.services.event_logger import RecordingEventLogger  # noqa: E402
from src.services.ledger import LedgerRegistry  # noqa: E402


@pytest.fixture
def quiz():
    """
    Fixture providing a quiz with levels 1-10, starting at 3, 20 questions max.

    Returns:
        QuizConfiguration
    """
    return QuizConfiguration(
        id=1,
        lowestlevel=1,
        highestlevel=10,
        startinglevel=3,
        maximumquestions=20,
        name="Fractions placement",
    )


@pytest.fixture
def catalog():
    """
    Fixture providing three questions on every level 1-10.

    Question ids encode the level: level * 100 + n.
    """
    return InMemoryQuestionCatalog.from_levels(
        {level * 100 + n: level for level in range(1, 11) for n in range(1, 4)}
    )


@pytest.fixture
def registry():
    """Fixture providing an empty ledger registry."""
    return LedgerRegistry()


@pytest.fixture
def ledger(registry):
    """Fixture providing a fresh, unsaved ledger bound to `registry`."""
    return registry.create()


@pytest.fixture
def attempt_store():
    """Fixture providing an in-memory attempt store."""
    return InMemoryAttemptStore()


@pytest.fixture
def attempt(attempt_store):
    """Fixture providing a fresh attempt with no questions attempted."""
    data = attempt_store.create()
    return Attempt(data.id, attempt_store)


@pytest.fixture
def events():
    """Fixture providing an event logger that records events."""
    return RecordingEventLogger()


@pytest.fixture
def make_session(ledger, catalog, registry, events):
    """
    Factory fixture building an AdaptiveQuizSession on the shared collaborators.

    Usage:
        session = make_session(level=3)
    """

    def _make(level, **overrides):
        kwargs = dict(
            ledger=ledger,
            catalog=catalog,
            used_questions=registry,
            level=level,
            selector=NextItemSelector(random.Random(7)),
            event_logger=events,
        )
        kwargs.update(overrides)
        return AdaptiveQuizSession(**kwargs)

    return _make


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
