"""Ordered callback list with snapshot dispatch."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class Signal(Generic[F]):
    """Subscribers are called in subscription order.

    ``emit`` iterates over a copy taken when dispatch starts, so connecting
    or disconnecting from inside a callback only affects the next emit.
    """

    __slots__ = ("name", "_callbacks")

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._callbacks: list[F] = []

    def connect(self, callback: F) -> None:
        self._callbacks.append(callback)

    def disconnect(self, callback: F) -> bool:
        """Remove *callback*. Returns False if it was not connected."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._callbacks.clear()

    def emit(self, *args: Any) -> None:
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, callback: object) -> bool:
        return callback in self._callbacks
