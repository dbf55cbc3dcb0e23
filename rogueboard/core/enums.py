"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ContentKind(IntEnum):
    """Variants of content that can occupy a board cell."""

    FOOD = 0
    WALL = 1
    TRAP = 2
    EXIT = 3
    ENEMY = 4


@unique
class Direction(IntEnum):
    """Cardinal movement directions (origin bottom-left, UP is +y)."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    TERRAIN = 0
    ENEMY_COUNT = 1
    ENEMY_PLACEMENT = 2
    WALL_COUNT = 3
    WALL_PLACEMENT = 4
    FOOD_COUNT = 5
    FOOD_PLACEMENT = 6
    TRAP_COUNT = 7
    TRAP_PLACEMENT = 8
    AUTOPLAY = 9


@unique
class Tile(IntEnum):
    """Terrain tiles shown under (or in place of) cell contents."""

    GROUND = 0
    BOUNDARY = 1
    OBSTACLE = 2
    OBSTACLE_DAMAGED = 3
    EXIT = 4


@unique
class MoveOutcome(IntEnum):
    """Result of a player move attempt."""

    MOVED = 0
    BLOCKED = 1
    ATTACKED = 2
    ENTERED_HAZARD = 3
    IGNORED = 4          # Input dropped: game over or attack in progress
    WAITED = 5           # Turn passed without moving


@unique
class PursuitAction(IntEnum):
    """What an enemy decided to do on its turn."""

    HOLD = 0
    MOVE = 1
    ATTACK = 2


@unique
class AttackPhase(IntEnum):
    """Sub-phases of the player's attack lock."""

    STRIKE = 0          # Waiting for the hit to land
    RECOVER = 1         # Hit resolved, waiting to release the lock
