"""Core data models and board representation."""

from rogueboard.core.board import Board, CellData, OccupiedCellError
from rogueboard.core.contents import CellContent, Enemy, Exit, Food, Trap, Wall
from rogueboard.core.enums import ContentKind, Direction, Domain, MoveOutcome, PursuitAction, Tile
from rogueboard.core.level_config import LevelConfig, config_for_level
from rogueboard.core.models import Vector2

__all__ = [
    "Board",
    "CellContent",
    "CellData",
    "ContentKind",
    "Direction",
    "Domain",
    "Enemy",
    "Exit",
    "Food",
    "LevelConfig",
    "MoveOutcome",
    "OccupiedCellError",
    "PursuitAction",
    "Tile",
    "Trap",
    "Vector2",
    "Wall",
    "config_for_level",
]
