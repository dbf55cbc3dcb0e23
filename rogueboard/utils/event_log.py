"""Thread-safe bounded buffer of game events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameEvent:
    """One line of the game's event feed (food, damage, combat, level, game)."""

    turn: int
    category: str
    message: str
    cells: tuple[tuple[int, int], ...] = ()  # Board cells involved in this event


class EventLog:
    """Bounded event log. The session writes; API handlers read copies.

    Once *capacity* events are held, each append evicts the oldest and
    bumps ``dropped`` so a poller can tell it missed part of the feed.
    """

    __slots__ = ("_buffer", "_lock", "_dropped")

    def __init__(self, capacity: int = 500) -> None:
        if capacity < 1:
            raise ValueError(f"EventLog capacity must be positive, got {capacity}")
        self._buffer: deque[GameEvent] = deque(maxlen=capacity)
        self._lock = threading.Lock()
        self._dropped = 0

    @property
    def capacity(self) -> int:
        return self._buffer.maxlen or 0

    @property
    def dropped(self) -> int:
        with self._lock:
            return self._dropped

    def append(self, event: GameEvent) -> None:
        with self._lock:
            if len(self._buffer) == self._buffer.maxlen:
                self._dropped += 1
            self._buffer.append(event)

    def since_turn(self, turn: int) -> list[GameEvent]:
        """Return all events with turn >= *turn*, oldest first."""
        with self._lock:
            return [e for e in self._buffer if e.turn >= turn]

    def of_category(self, category: str) -> list[GameEvent]:
        with self._lock:
            return [e for e in self._buffer if e.category == category]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return up to *count* most recent events."""
        if count <= 0:
            return []
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
            self._dropped = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
