"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a game session."""

    # World
    seed: int = 42

    # Food (the depleting resource)
    starting_food: int = 20
    food_per_turn: int = 1
    food_nutrition: int = 5

    # Hazards & combat
    trap_damage: int = 5
    wall_health: int = 3
    enemy_health: int = 3
    enemy_damage: int = 1

    # Player
    player_spawn_x: int = 1
    player_spawn_y: int = 1

    # Attack lock timing (seconds)
    attack_strike_seconds: float = 0.3
    attack_recover_seconds: float = 0.2

    # Terrain art variants picked at generation time
    ground_tile_variants: int = 4
    boundary_tile_variants: int = 3

    # Presentation geometry for cell_to_world
    cell_size: float = 1.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    # HTTP surface
    realtime_clock: bool = True
    clock_period_seconds: float = 0.05

    # Logging
    log_level: str = "INFO"
    event_log_capacity: int = 500
