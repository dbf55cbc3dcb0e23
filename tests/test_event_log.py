"""Tests for the event feed buffer and logging setup."""

import io
import logging

import pytest

from rogueboard.utils.event_log import EventLog, GameEvent
from rogueboard.utils.logging import setup_logging


def _event(turn: int, category: str = "food") -> GameEvent:
    return GameEvent(turn=turn, category=category, message=f"turn {turn}")


class TestEventLog:
    def test_since_turn_is_inclusive(self):
        log = EventLog()
        for t in (1, 2, 2, 5):
            log.append(_event(t))
        assert [e.turn for e in log.since_turn(2)] == [2, 2, 5]
        assert log.since_turn(6) == []

    def test_capacity_evicts_oldest_and_counts_drops(self):
        log = EventLog(capacity=3)
        for t in range(1, 6):
            log.append(_event(t))
        assert len(log) == 3
        assert [e.turn for e in log.latest()] == [3, 4, 5]
        assert log.dropped == 2

        log.clear()
        assert len(log) == 0
        assert log.dropped == 0

    def test_latest_and_category(self):
        log = EventLog()
        log.append(_event(1, "game"))
        log.append(_event(2, "damage"))
        log.append(_event(3, "damage"))
        assert [e.turn for e in log.latest(2)] == [2, 3]
        assert log.latest(0) == []
        assert [e.turn for e in log.of_category("damage")] == [2, 3]

    def test_rejects_empty_capacity(self):
        with pytest.raises(ValueError):
            EventLog(capacity=0)


class TestSetupLogging:
    def teardown_method(self):
        logging.getLogger().handlers.clear()
        logging.getLogger("rogueboard.engine.turn_scheduler").setLevel(logging.NOTSET)

    def test_installs_single_handler(self):
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream)
        setup_logging("DEBUG", stream=stream)
        assert len(logging.getLogger().handlers) == 1

        logging.getLogger("rogueboard.test").info("level %d", 4)
        assert "level 4" in stream.getvalue()

    def test_quiet_ticks_hides_scheduler_debug(self):
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream, quiet_ticks=True)
        logging.getLogger("rogueboard.engine.turn_scheduler").debug("tick noise")
        logging.getLogger("rogueboard.engine.session").debug("session detail")
        out = stream.getvalue()
        assert "tick noise" not in out
        assert "session detail" in out
