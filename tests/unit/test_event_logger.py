"""
Unit tests for attempt event loggers.
"""

import logging
from unittest.mock import Mock

from src.services.event_logger import LoggingEventLogger, RecordingEventLogger, log_event


def test_logging_event_logger_writes_to_target(caplog):
    target = logging.getLogger("tests.events")
    with caplog.at_level(logging.DEBUG, logger="tests.events"):
        LoggingEventLogger(target).log(3, "Fetched question with ID 12")

    assert "[attempt 3] Fetched question with ID 12" in caplog.text


def test_logging_event_logger_never_raises():
    target = Mock()
    target.log.side_effect = RuntimeError("handler broke")

    LoggingEventLogger(target).log(1, "ignored")

    target.log.assert_called_once()


def test_recording_event_logger_filters_by_attempt():
    events = RecordingEventLogger()
    events.log(1, "a")
    events.log(2, "b")
    events.log(1, "c")

    assert events.messages(1) == ["a", "c"]
    assert events.messages() == ["a", "b", "c"]


def test_log_event_swallows_sink_failures(caplog):
    sink = Mock()
    sink.log.side_effect = RuntimeError("log sink down")

    with caplog.at_level(logging.ERROR):
        log_event(sink, 4, "Stopping: done")

    sink.log.assert_called_once_with(4, "Stopping: done")
    assert "attempt 4" in caplog.text


def test_log_event_forwards_to_sink():
    events = RecordingEventLogger()
    log_event(events, 2, "hello")
    assert events.events == [(2, "hello")]
