"""Difficulty curve: per-phase board size and spawn-rate parameters.

A level number maps to a phase by a step function over level ranges. Each
phase is an immutable, validated ``LevelConfig``; an invalid table fails at
import time rather than during generation.
"""

from __future__ import annotations

from pydantic import NonNegativeInt, PositiveFloat, PositiveInt, model_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass


@pydantic_dataclass(frozen=True)
class LevelConfig:
    """Immutable parameters for one difficulty phase."""

    width: int
    height: int
    min_enemies: NonNegativeInt
    max_enemies: NonNegativeInt
    enemy_position_fixed: bool
    food_divisor: PositiveInt
    min_food: NonNegativeInt
    wall_divisor: PositiveInt
    min_walls: NonNegativeInt
    min_traps: NonNegativeInt
    max_traps: NonNegativeInt
    camera_lens_size: PositiveFloat = 5.0   # presentation hint only

    @model_validator(mode="after")
    def _check_ranges(self) -> LevelConfig:
        if self.width < 3 or self.height < 3:
            raise ValueError("board must be at least 3x3")
        if self.min_enemies > self.max_enemies:
            raise ValueError("min_enemies exceeds max_enemies")
        if self.min_traps > self.max_traps:
            raise ValueError("min_traps exceeds max_traps")
        return self

    @property
    def interior_area(self) -> int:
        return (self.width - 2) * (self.height - 2)

    def base_wall_count(self) -> int:
        return max(self.min_walls, self.interior_area // self.wall_divisor)

    def base_food_count(self) -> int:
        return max(self.min_food, self.interior_area // self.food_divisor)


# (first level of the phase, config). Must stay sorted by first level.
LEVEL_PHASES: tuple[tuple[int, LevelConfig], ...] = (
    (1, LevelConfig(
        width=8, height=8, min_enemies=0, max_enemies=0, enemy_position_fixed=False,
        food_divisor=8, min_food=4, wall_divisor=20, min_walls=2,
        min_traps=0, max_traps=0, camera_lens_size=5.0,
    )),
    (3, LevelConfig(
        width=10, height=10, min_enemies=1, max_enemies=1, enemy_position_fixed=True,
        food_divisor=12, min_food=3, wall_divisor=15, min_walls=4,
        min_traps=0, max_traps=0, camera_lens_size=6.0,
    )),
    (6, LevelConfig(
        width=12, height=12, min_enemies=2, max_enemies=4, enemy_position_fixed=False,
        food_divisor=16, min_food=2, wall_divisor=12, min_walls=6,
        min_traps=2, max_traps=4, camera_lens_size=7.0,
    )),
    (9, LevelConfig(
        width=14, height=14, min_enemies=3, max_enemies=6, enemy_position_fixed=False,
        food_divisor=20, min_food=3, wall_divisor=10, min_walls=8,
        min_traps=3, max_traps=5, camera_lens_size=8.0,
    )),
    (13, LevelConfig(
        width=16, height=16, min_enemies=5, max_enemies=9, enemy_position_fixed=False,
        food_divisor=20, min_food=3, wall_divisor=10, min_walls=8,
        min_traps=5, max_traps=8, camera_lens_size=9.0,
    )),
)


def phase_index(level: int) -> int:
    """Index into ``LEVEL_PHASES`` for *level* (levels below 1 count as 1)."""
    index = 0
    for i, (first_level, _) in enumerate(LEVEL_PHASES):
        if level >= first_level:
            index = i
        else:
            break
    return index


def config_for_level(level: int) -> LevelConfig:
    return LEVEL_PHASES[phase_index(level)][1]
