"""Tests for procedural board generation.

Covers:
- Area-scaled counts with floors for walls and food
- Mutually exclusive placements, reserved player spawn
- Perimeter/interior passability after population
- Exit and fixed enemy positions
- Determinism per seed and clean regeneration
- Pool exhaustion fallback
"""

import logging

import pytest

from rogueboard.config import GameConfig
from rogueboard.core.enums import ContentKind, Tile
from rogueboard.core.level_config import LevelConfig, config_for_level
from rogueboard.core.models import Vector2
from rogueboard.systems import generator as generator_module
from rogueboard.systems.generator import BoardGenerator
from rogueboard.systems.rng import DeterministicRNG

LEVELS = list(range(1, 18))
SEEDS = [1, 42, 1337]


def _generate(level: int, seed: int = 42):
    gen = BoardGenerator(GameConfig(seed=seed))
    return gen.generate_level(level, DeterministicRNG(seed))


class TestCounts:
    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("level", LEVELS)
    def test_counts_within_ranges(self, level, seed):
        result = _generate(level, seed)
        cfg = config_for_level(level)

        walls = len(result.of_kind(ContentKind.WALL))
        food = len(result.of_kind(ContentKind.FOOD))
        traps = len(result.of_kind(ContentKind.TRAP))
        enemies = len(result.of_kind(ContentKind.ENEMY))

        assert cfg.base_wall_count() <= walls <= cfg.base_wall_count() + 2
        assert cfg.base_food_count() <= food <= cfg.base_food_count() + 1
        assert cfg.min_traps <= traps <= cfg.max_traps
        assert cfg.min_enemies <= enemies <= cfg.max_enemies
        assert len(result.of_kind(ContentKind.EXIT)) == 1

    def test_phase_three_food_is_six_or_seven(self):
        for seed in range(20):
            result = _generate(7, seed)
            assert len(result.of_kind(ContentKind.FOOD)) in (6, 7)

    def test_early_levels_have_no_enemies_or_traps(self):
        for level in (1, 2):
            result = _generate(level)
            assert result.enemies == []
            assert result.of_kind(ContentKind.TRAP) == []


class TestPlacementInvariants:
    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("level", LEVELS)
    def test_no_shared_cells_and_spawn_free(self, level, seed):
        result = _generate(level, seed)
        cells = [c.cell for c in result.placements]
        assert len(cells) == len(set(cells))
        assert Vector2(1, 1) not in cells
        assert result.board.occupant_at(Vector2(1, 1)) is None

    @pytest.mark.parametrize("level", LEVELS)
    def test_passability(self, level):
        board = _generate(level).board
        for y in range(board.height):
            for x in range(board.width):
                pos = Vector2(x, y)
                cell = board.get_cell(pos)
                if board.is_perimeter(pos):
                    assert not cell.passable
                else:
                    assert cell.passable
                    if cell.occupant is not None:
                        assert cell.occupant.cell == pos

    @pytest.mark.parametrize("level", LEVELS)
    def test_board_occupants_match_placements(self, level):
        result = _generate(level)
        on_board = {id(c) for c in result.board.occupants()}
        assert on_board == {id(c) for c in result.placements}

    def test_exit_in_top_right_interior_corner(self):
        for level in (1, 4, 7, 10, 15):
            result = _generate(level)
            cfg = result.config
            assert result.exit.cell == Vector2(cfg.width - 2, cfg.height - 2)
            assert result.board.get_cell(result.exit.cell).tile == Tile.EXIT

    def test_fixed_enemy_position(self):
        for level in (3, 4, 5):
            for seed in SEEDS:
                result = _generate(level, seed)
                assert [e.cell for e in result.enemies] == [Vector2(7, 7)]

    def test_walls_remember_terrain_and_show_obstacle(self):
        result = _generate(9)
        for wall in result.of_kind(ContentKind.WALL):
            assert wall.original_tile == Tile.GROUND
            assert 0 <= wall.original_variant < GameConfig().ground_tile_variants
            assert result.board.get_cell(wall.cell).tile == Tile.OBSTACLE
            assert wall.health == wall.max_health

    def test_contents_use_game_config_values(self):
        config = GameConfig(enemy_health=5, enemy_damage=2, food_nutrition=9, trap_damage=4, wall_health=6)
        result = BoardGenerator(config).generate_level(14, DeterministicRNG(3))
        assert all(e.health == 5 and e.damage == 2 for e in result.enemies)
        assert all(f.nutrition == 9 for f in result.of_kind(ContentKind.FOOD))
        assert all(t.damage == 4 for t in result.of_kind(ContentKind.TRAP))
        assert all(w.max_health == 6 for w in result.of_kind(ContentKind.WALL))


class TestDeterminism:
    def _fingerprint(self, result):
        board = result.board
        tiles = [
            (int(board.get_cell(Vector2(x, y)).tile), board.get_cell(Vector2(x, y)).variant)
            for y in range(board.height)
            for x in range(board.width)
        ]
        return tiles, [(c.kind, c.cell) for c in result.placements]

    def test_same_seed_same_board(self):
        for level in (1, 6, 13):
            assert self._fingerprint(_generate(level, 99)) == self._fingerprint(_generate(level, 99))

    def test_different_seeds_differ(self):
        a = self._fingerprint(_generate(13, 1))
        b = self._fingerprint(_generate(13, 2))
        assert a != b

    def test_clear_then_regenerate_has_no_residue(self):
        gen = BoardGenerator(GameConfig())
        rng = DeterministicRNG(5)
        first = gen.generate_level(6, rng)
        old = list(first.placements)
        first.board.clear_all_contents()
        assert list(first.board.occupants()) == []
        assert all(c.destroyed for c in old)

        second = gen.generate_level(7, rng)
        old_ids = {id(c) for c in old}
        assert not any(id(c) in old_ids for c in second.board.occupants())
        assert not any(c.destroyed for c in second.placements)


class TestPoolExhaustion:
    def test_small_board_places_what_fits(self, monkeypatch, caplog):
        tiny = LevelConfig(
            width=4, height=4, min_enemies=0, max_enemies=0, enemy_position_fixed=False,
            food_divisor=1, min_food=5, wall_divisor=1, min_walls=10,
            min_traps=3, max_traps=3,
        )
        monkeypatch.setattr(generator_module, "config_for_level", lambda level: tiny)

        with caplog.at_level(logging.WARNING, logger="rogueboard.systems.generator"):
            result = BoardGenerator(GameConfig()).generate_level(1, DeterministicRNG(1))

        # 4 interior cells: spawn reserved, exit takes one, walls take the other two
        assert len(result.of_kind(ContentKind.EXIT)) == 1
        assert len(result.of_kind(ContentKind.WALL)) == 2
        assert result.of_kind(ContentKind.FOOD) == []
        assert result.of_kind(ContentKind.TRAP) == []
        assert "pool exhausted" in caplog.text

    def test_fixed_enemy_skipped_when_cell_taken(self, monkeypatch, caplog):
        # On a 4x4 board the fixed enemy cell (1, 1) is the reserved spawn
        tiny = LevelConfig(
            width=4, height=4, min_enemies=1, max_enemies=1, enemy_position_fixed=True,
            food_divisor=50, min_food=0, wall_divisor=50, min_walls=0,
            min_traps=0, max_traps=0,
        )
        monkeypatch.setattr(generator_module, "config_for_level", lambda level: tiny)

        with caplog.at_level(logging.WARNING, logger="rogueboard.systems.generator"):
            result = BoardGenerator(GameConfig()).generate_level(1, DeterministicRNG(1))

        assert result.enemies == []
        assert result.board.occupant_at(Vector2(1, 1)) is None
        assert "fixed enemy" in caplog.text
