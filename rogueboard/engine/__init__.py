"""Engine layer: turn scheduler, enemy pursuit, game session."""

from rogueboard.engine.pursuit import EnemyController, decide_pursuit
from rogueboard.engine.session import GameSession, MoveResult
from rogueboard.engine.turn_scheduler import TurnScheduler

__all__ = ["EnemyController", "GameSession", "MoveResult", "TurnScheduler", "decide_pursuit"]
