"""GameManager: thread-safe wrapper around a GameSession for the HTTP API.

Request handlers run on FastAPI's worker threads, so every session access
goes through one lock. An optional clock thread calls ``session.update`` at
a fixed period so the attack lock plays out in real time.
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from rogueboard.engine.session import GameSession, MoveResult
from rogueboard.utils.event_log import EventLog

if TYPE_CHECKING:
    from rogueboard.config import GameConfig
    from rogueboard.core.enums import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveSnapshot:
    """A player input's result plus session counters read under the same lock."""

    result: MoveResult
    level: int
    food: int
    turn: int
    game_over: bool


class GameManager:
    """Owns the session, its lock, and the optional real-time clock."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._event_log = EventLog(config.event_log_capacity)
        self._session = GameSession(config, event_log=self._event_log)

        self._thread: threading.Thread | None = None
        self._stop_requested = threading.Event()

    # -- public properties --

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def clock_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @contextmanager
    def session(self) -> Iterator[GameSession]:
        """Hold the lock while the caller reads or mutates the session."""
        with self._lock:
            yield self._session

    # -- commands --

    def new_game(self) -> None:
        with self._lock:
            self._event_log.clear()
            self._session.new_game()

    def move(self, direction: Direction) -> MoveSnapshot:
        with self._lock:
            return self._snapshot(self._session.attempt_player_move(direction))

    def wait(self) -> MoveSnapshot:
        with self._lock:
            return self._snapshot(self._session.wait())

    def _snapshot(self, result: MoveResult) -> MoveSnapshot:
        session = self._session
        return MoveSnapshot(
            result=result,
            level=session.level,
            food=session.food,
            turn=session.turn_count,
            game_over=session.game_over,
        )

    def advance(self, seconds: float) -> None:
        with self._lock:
            self._session.update(seconds)

    # -- clock --

    def start(self) -> None:
        if self.clock_running:
            return
        self._stop_requested.clear()
        self._thread = threading.Thread(target=self._run_clock, name="game-clock", daemon=True)
        self._thread.start()
        logger.info("Game clock started (period=%.3fs)", self.config.clock_period_seconds)

    def stop(self) -> None:
        self._stop_requested.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        self._thread = None
        logger.info("Game clock stopped.")

    def _run_clock(self) -> None:
        period = self.config.clock_period_seconds
        last = time.perf_counter()
        while not self._stop_requested.wait(period):
            now = time.perf_counter()
            with self._lock:
                if self._session.started:
                    self._session.update(now - last)
            last = now
