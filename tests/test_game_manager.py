"""Tests for the thread-safe GameManager used by the API."""

import dataclasses

import pytest

from rogueboard.api.game_manager import GameManager, MoveSnapshot
from rogueboard.config import GameConfig
from rogueboard.core.enums import Direction, MoveOutcome


@pytest.fixture()
def manager():
    mgr = GameManager(GameConfig(realtime_clock=False))
    mgr.new_game()
    return mgr


class TestMoveSnapshot:
    def test_wait_reports_counters_after_the_tick(self, manager):
        snap = manager.wait()
        assert isinstance(snap, MoveSnapshot)
        assert snap.result.outcome == MoveOutcome.WAITED
        assert (snap.level, snap.food, snap.turn, snap.game_over) == (1, 19, 2, False)

    def test_snapshot_is_not_affected_by_later_turns(self, manager):
        first = manager.wait()
        manager.wait()
        manager.wait()
        assert first.turn == 2
        assert first.food == 19
        with manager.session() as session:
            assert session.turn_count == 4
        with pytest.raises(dataclasses.FrozenInstanceError):
            first.turn = 9  # type: ignore[misc]

    def test_blocked_move_snapshot_matches_session(self, manager):
        snap = manager.move(Direction.LEFT)
        assert snap.result.outcome == MoveOutcome.BLOCKED
        with manager.session() as session:
            assert (snap.food, snap.turn) == (session.food, session.turn_count)


class TestEventFeed:
    def test_session_writes_to_manager_log(self, manager):
        assert [e.category for e in manager.event_log.latest()] == ["game"]
        manager.new_game()
        assert len(manager.event_log) == 1
