"""Core data models: Vector2 and direction offsets."""

from __future__ import annotations

from dataclasses import dataclass

from rogueboard.core.enums import Direction


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Origin is bottom-left, so UP increases y
DIRECTION_OFFSETS: dict[Direction, Vector2] = {
    Direction.UP: Vector2(0, 1),
    Direction.RIGHT: Vector2(1, 0),
    Direction.DOWN: Vector2(0, -1),
    Direction.LEFT: Vector2(-1, 0),
}
