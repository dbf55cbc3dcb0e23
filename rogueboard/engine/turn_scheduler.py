"""TurnScheduler: advances the turn counter and notifies subscribers."""

from __future__ import annotations

import logging
from typing import Callable

from rogueboard.engine.signals import Signal

logger = logging.getLogger(__name__)

TurnCallback = Callable[[], None]


class TurnScheduler:
    """Single-state turn clock.

    ``tick()`` bumps the counter, then calls every subscriber synchronously,
    in subscription order, once each. The subscriber list is snapshotted at
    the start of dispatch.
    """

    __slots__ = ("_turn_count", "_on_turn")

    def __init__(self) -> None:
        self._turn_count = 1
        self._on_turn: Signal[TurnCallback] = Signal("on_turn")

    @property
    def turn_count(self) -> int:
        return self._turn_count

    @property
    def subscriber_count(self) -> int:
        return len(self._on_turn)

    def subscribe(self, callback: TurnCallback) -> None:
        self._on_turn.connect(callback)

    def unsubscribe(self, callback: TurnCallback) -> None:
        self._on_turn.disconnect(callback)

    def is_subscribed(self, callback: TurnCallback) -> bool:
        return callback in self._on_turn

    def reset(self) -> None:
        """Restart the counter at 1. Subscribers are left in place."""
        self._turn_count = 1

    def tick(self) -> None:
        self._turn_count += 1
        logger.debug("Current turn: %d (%d subscribers)", self._turn_count, len(self._on_turn))
        self._on_turn.emit()
