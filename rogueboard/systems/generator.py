"""Board generator: populates a fresh board for a level number.

Placement runs in a fixed order (exit, enemies, walls, food, traps) and every
step draws from one shared pool of empty interior cells, so placed contents
never overlap and never land on the player spawn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from rogueboard.core.board import Board
from rogueboard.core.contents import CellContent, Enemy, Exit, Food, Trap, Wall, init_content
from rogueboard.core.enums import ContentKind, Domain, Tile
from rogueboard.core.level_config import LevelConfig, config_for_level
from rogueboard.core.models import Vector2

if TYPE_CHECKING:
    from rogueboard.config import GameConfig
    from rogueboard.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GeneratedLevel:
    """A populated board plus what was placed on it, in placement order."""

    level: int
    config: LevelConfig
    board: Board
    placements: list[CellContent] = field(default_factory=list)

    def of_kind(self, kind: ContentKind) -> list[CellContent]:
        return [c for c in self.placements if c.kind == kind]

    @property
    def enemies(self) -> list[Enemy]:
        return [c for c in self.placements if isinstance(c, Enemy)]

    @property
    def exit(self) -> Exit | None:
        for c in self.placements:
            if isinstance(c, Exit):
                return c
        return None


class BoardGenerator:
    """Builds boards from the difficulty table and a deterministic RNG."""

    __slots__ = ("_config",)

    def __init__(self, config: GameConfig) -> None:
        self._config = config

    @property
    def player_spawn(self) -> Vector2:
        return Vector2(self._config.player_spawn_x, self._config.player_spawn_y)

    def generate_level(self, level: int, rng: DeterministicRNG) -> GeneratedLevel:
        """Allocate and populate a board for *level*."""
        cfg = config_for_level(level)
        board = self._allocate(cfg, level, rng)
        result = GeneratedLevel(level=level, config=cfg, board=board)

        spawn = self.player_spawn
        pool = [pos for pos in board.interior_cells() if pos != spawn]

        # 1. Exit, top-right interior corner
        exit_pos = Vector2(cfg.width - 2, cfg.height - 2)
        if exit_pos in pool:
            pool.remove(exit_pos)
            self._place(result, Exit(exit_pos))
        else:
            logger.warning("Level %d: exit cell %s unavailable", level, exit_pos)

        # 2. Enemies
        enemy_count = rng.next_int(Domain.ENEMY_COUNT, level, 0, cfg.min_enemies, cfg.max_enemies)
        if enemy_count == 1 and cfg.enemy_position_fixed:
            fixed = Vector2(cfg.width - 3, cfg.height - 3)
            if fixed in pool:
                pool.remove(fixed)
                self._place(result, self._new_enemy(fixed))
            else:
                logger.warning("Level %d: fixed enemy cell %s unavailable", level, fixed)
        elif enemy_count > 0:
            self._scatter(result, pool, rng, Domain.ENEMY_PLACEMENT, enemy_count, self._new_enemy)

        # 3. Destructible walls
        wall_base = cfg.base_wall_count()
        wall_count = rng.next_int(Domain.WALL_COUNT, level, 0, wall_base, wall_base + 2)
        self._scatter(result, pool, rng, Domain.WALL_PLACEMENT, wall_count, self._new_wall)

        # 4. Food
        food_base = cfg.base_food_count()
        food_count = rng.next_int(Domain.FOOD_COUNT, level, 0, food_base, food_base + 1)
        self._scatter(result, pool, rng, Domain.FOOD_PLACEMENT, food_count, self._new_food)

        # 5. Traps
        trap_count = rng.next_int(Domain.TRAP_COUNT, level, 0, cfg.min_traps, cfg.max_traps)
        self._scatter(result, pool, rng, Domain.TRAP_PLACEMENT, trap_count, self._new_trap)

        logger.info(
            "Generated level %d: %dx%d, enemies=%d walls=%d food=%d traps=%d",
            level, cfg.width, cfg.height,
            len(result.of_kind(ContentKind.ENEMY)),
            len(result.of_kind(ContentKind.WALL)),
            len(result.of_kind(ContentKind.FOOD)),
            len(result.of_kind(ContentKind.TRAP)),
        )
        return result

    # -- internals --

    def _allocate(self, cfg: LevelConfig, level: int, rng: DeterministicRNG) -> Board:
        c = self._config
        board = Board(cfg.width, cfg.height, cell_size=c.cell_size, origin=(c.origin_x, c.origin_y))
        for y in range(cfg.height):
            for x in range(cfg.width):
                pos = Vector2(x, y)
                idx = y * cfg.width + x
                if board.is_perimeter(pos):
                    variant = rng.next_int(Domain.TERRAIN, level, idx, 0, c.boundary_tile_variants - 1)
                    board.set_tile(pos, Tile.BOUNDARY, variant)
                else:
                    variant = rng.next_int(Domain.TERRAIN, level, idx, 0, c.ground_tile_variants - 1)
                    board.set_tile(pos, Tile.GROUND, variant)
        return board

    def _scatter(
        self,
        result: GeneratedLevel,
        pool: list[Vector2],
        rng: DeterministicRNG,
        domain: Domain,
        count: int,
        factory: Callable[[Vector2], CellContent],
    ) -> None:
        """Draw *count* distinct cells from *pool* without replacement."""
        for i in range(count):
            if not pool:
                logger.warning(
                    "Level %d: pool exhausted placing %s (%d of %d placed)",
                    result.level, domain.name, i, count,
                )
                return
            idx = rng.next_int(domain, result.level, i, 0, len(pool) - 1)
            self._place(result, factory(pool.pop(idx)))

    def _place(self, result: GeneratedLevel, content: CellContent) -> None:
        result.board.set_occupant(content.cell, content)
        init_content(content, result.board)
        result.placements.append(content)

    def _new_enemy(self, pos: Vector2) -> Enemy:
        return Enemy(pos, max_health=self._config.enemy_health, damage=self._config.enemy_damage)

    def _new_wall(self, pos: Vector2) -> Wall:
        return Wall(pos, max_health=self._config.wall_health)

    def _new_food(self, pos: Vector2) -> Food:
        return Food(pos, nutrition=self._config.food_nutrition)

    def _new_trap(self, pos: Vector2) -> Trap:
        return Trap(pos, damage=self._config.trap_damage)
