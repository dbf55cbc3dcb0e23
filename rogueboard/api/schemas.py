"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Board ---

class OccupantSchema(BaseModel):
    kind: str
    x: int
    y: int
    health: int | None = None
    max_health: int | None = None
    nutrition: int | None = None
    damage: int | None = None


class BoardResponse(BaseModel):
    level: int
    width: int
    height: int
    # RLE encoded tile ids: [value, count, value, count, ...], row-major from y=0
    tiles: list[int]
    # Parallel RLE of art variants
    variants: list[int]
    occupants: list[OccupantSchema] = Field(default_factory=list)


# --- State ---

class EventSchema(BaseModel):
    turn: int
    category: str
    message: str
    cells: list[list[int]] = Field(default_factory=list)


class PlayerSchema(BaseModel):
    x: int
    y: int
    world_x: float
    world_y: float
    attacking: bool = False


class GameStateResponse(BaseModel):
    level: int
    food: int
    turn: int
    game_over: bool
    levels_survived: int
    camera_lens_size: float
    player: PlayerSchema
    enemies: list[OccupantSchema] = Field(default_factory=list)
    events: list[EventSchema] = Field(default_factory=list)
    # Events evicted from the bounded log since the last new game
    events_dropped: int = 0


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    turn: int


class MoveResponse(BaseModel):
    outcome: str
    player_x: int
    player_y: int
    target_x: int | None = None
    target_y: int | None = None
    content: str | None = None
    level_advanced: bool = False
    level: int
    food: int
    turn: int
    game_over: bool


# --- Config ---

class LevelPhaseSchema(BaseModel):
    first_level: int
    width: int
    height: int
    min_enemies: int
    max_enemies: int
    enemy_position_fixed: bool
    food_divisor: int
    min_food: int
    wall_divisor: int
    min_walls: int
    min_traps: int
    max_traps: int
    camera_lens_size: float


class GameConfigResponse(BaseModel):
    seed: int
    starting_food: int
    food_per_turn: int
    food_nutrition: int
    trap_damage: int
    wall_health: int
    enemy_health: int
    enemy_damage: int
    attack_strike_seconds: float
    attack_recover_seconds: float
    realtime_clock: bool
    phases: list[LevelPhaseSchema] = Field(default_factory=list)
