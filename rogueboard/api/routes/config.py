"""GET /api/v1/config: expose game configuration and the difficulty table."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from rogueboard.api.dependencies import get_game_manager
from rogueboard.api.game_manager import GameManager
from rogueboard.api.schemas import GameConfigResponse, LevelPhaseSchema
from rogueboard.core.level_config import LEVEL_PHASES

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(manager: GameManager = Depends(get_game_manager)) -> GameConfigResponse:
    cfg = manager.config
    phases = [
        LevelPhaseSchema(
            first_level=first_level,
            width=p.width,
            height=p.height,
            min_enemies=p.min_enemies,
            max_enemies=p.max_enemies,
            enemy_position_fixed=p.enemy_position_fixed,
            food_divisor=p.food_divisor,
            min_food=p.min_food,
            wall_divisor=p.wall_divisor,
            min_walls=p.min_walls,
            min_traps=p.min_traps,
            max_traps=p.max_traps,
            camera_lens_size=p.camera_lens_size,
        )
        for first_level, p in LEVEL_PHASES
    ]
    return GameConfigResponse(
        seed=cfg.seed,
        starting_food=cfg.starting_food,
        food_per_turn=cfg.food_per_turn,
        food_nutrition=cfg.food_nutrition,
        trap_damage=cfg.trap_damage,
        wall_health=cfg.wall_health,
        enemy_health=cfg.enemy_health,
        enemy_damage=cfg.enemy_damage,
        attack_strike_seconds=cfg.attack_strike_seconds,
        attack_recover_seconds=cfg.attack_recover_seconds,
        realtime_clock=cfg.realtime_clock,
        phases=phases,
    )
