"""
Unit tests for the minimal catalog-driven item administration.
"""

from unittest.mock import Mock

import pytest

from src.engine.catalog_strategy import COMPONENT, CatalogItemAdministration
from src.models.evaluation import NextItem


@pytest.fixture
def make_strategy(quiz, attempt, events):
    def _make(question_id, error_message=""):
        handler = Mock(return_value=(question_id, error_message))
        strategy = CatalogItemAdministration(handler, quiz, attempt, event_logger=events)
        return strategy, handler

    return _make


class TestCatalogItemAdministration:
    def test_fresh_attempt_gets_fetched_question(self, make_strategy, events, attempt):
        strategy, _ = make_strategy(4711)

        evaluation = strategy.evaluate_ability_to_administer_next_item(None)

        assert evaluation.next_item == NextItem.from_question_id(4711)
        assert not evaluation.is_stopped
        assert "Previous question slot is null" in events.messages(attempt.attempt_id)
        assert "Fetched question with ID 4711" in events.messages(attempt.attempt_id)

    def test_fresh_attempt_stops_on_zero_id(self, make_strategy):
        strategy, _ = make_strategy(0, "No questions left in the pool")

        evaluation = strategy.evaluate_ability_to_administer_next_item(None)

        assert evaluation.is_stopped
        assert evaluation.stoppage_reason == "No questions left in the pool"

    def test_continuing_attempt_gets_fetched_question(self, make_strategy):
        strategy, _ = make_strategy(12)
        evaluation = strategy.evaluate_ability_to_administer_next_item(3)
        assert evaluation.next_item.question_id == 12

    def test_continuing_attempt_stops_on_zero_id(self, make_strategy, events, attempt):
        strategy, _ = make_strategy(0, "Test finished")

        evaluation = strategy.evaluate_ability_to_administer_next_item(3)

        assert evaluation.stoppage_reason == "Test finished"
        assert "Previous question slot is null" not in events.messages(attempt.attempt_id)

    def test_handler_receives_quiz_and_attempt(self, make_strategy, quiz, attempt):
        strategy, handler = make_strategy(5)
        strategy.evaluate_ability_to_administer_next_item(None)

        quiz_id, component, attempt_data = handler.call_args.args
        assert quiz_id == quiz.id
        assert component == COMPONENT
        assert attempt_data.id == attempt.attempt_id

    def test_handler_failure_propagates(self, quiz, attempt):
        handler = Mock(side_effect=RuntimeError("handler crashed"))
        strategy = CatalogItemAdministration(handler, quiz, attempt)

        with pytest.raises(RuntimeError):
            strategy.evaluate_ability_to_administer_next_item(None)

    @pytest.mark.parametrize("question_id, error_message", [(7, ""), (0, "Test finished")])
    def test_failing_event_logger_does_not_change_result(self, quiz, attempt, question_id, error_message):
        event_logger = Mock()
        event_logger.log.side_effect = RuntimeError("log sink down")
        handler = Mock(return_value=(question_id, error_message))
        strategy = CatalogItemAdministration(handler, quiz, attempt, event_logger=event_logger)

        evaluation = strategy.evaluate_ability_to_administer_next_item(None)

        assert evaluation.is_stopped is (question_id == 0)
        assert event_logger.log.call_count == 2
