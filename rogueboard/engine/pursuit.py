"""Enemy pursuit: greedy Manhattan chase with a single fallback axis.

No search is performed. Each turn an enemy either attacks an orthogonally
adjacent player, steps one cell toward the player along the axis with the
larger gap (Y on ties), falls back to the other axis if that step is
blocked, or holds position.

Usage:
    decision = decide_pursuit(enemy.cell, player_cell, board)
    controller = EnemyController(enemy, board, get_player_cell, on_hit)
    scheduler.subscribe(controller.on_turn)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from rogueboard.core.enums import PursuitAction
from rogueboard.core.models import Vector2

if TYPE_CHECKING:
    from rogueboard.core.board import Board
    from rogueboard.core.contents import Enemy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PursuitDecision:
    """Outcome of one pursuit evaluation."""

    action: PursuitAction
    target: Vector2 | None = None   # destination for MOVE, player cell for ATTACK


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _step(own: Vector2, delta: int, along_x: bool, board: Board) -> Vector2 | None:
    """One cell toward the player on one axis, or None if unusable."""
    if delta == 0:
        return None
    dest = Vector2(own.x + _sign(delta), own.y) if along_x else Vector2(own.x, own.y + _sign(delta))
    if not board.is_empty(dest):
        return None
    return dest


def decide_pursuit(own: Vector2, player: Vector2, board: Board) -> PursuitDecision:
    """Pure decision for an enemy at *own* chasing *player*."""
    dx = player.x - own.x
    dy = player.y - own.y

    if (dx == 0 and abs(dy) == 1) or (dy == 0 and abs(dx) == 1):
        return PursuitDecision(PursuitAction.ATTACK, player)

    x_first = abs(dx) > abs(dy)
    primary = _step(own, dx, True, board) if x_first else _step(own, dy, False, board)
    if primary is not None:
        return PursuitDecision(PursuitAction.MOVE, primary)

    secondary = _step(own, dy, False, board) if x_first else _step(own, dx, True, board)
    if secondary is not None:
        return PursuitDecision(PursuitAction.MOVE, secondary)

    return PursuitDecision(PursuitAction.HOLD)


class EnemyController:
    """Drives one Enemy; subscribe ``on_turn`` to the turn scheduler."""

    __slots__ = ("_enemy", "_board", "_player_cell", "_on_hit", "_active", "last_decision")

    def __init__(
        self,
        enemy: Enemy,
        board: Board,
        player_cell: Callable[[], Vector2],
        on_hit: Callable[[Enemy], None],
        active: Callable[[], bool] | None = None,
    ) -> None:
        self._enemy = enemy
        self._board = board
        self._player_cell = player_cell
        self._on_hit = on_hit
        self._active = active
        self.last_decision: PursuitDecision | None = None

    @property
    def enemy(self) -> Enemy:
        return self._enemy

    def on_turn(self) -> None:
        enemy = self._enemy
        # Dangling subscription: a destroyed enemy does nothing
        if not enemy.alive or self._board.occupant_at(enemy.cell) is not enemy:
            return
        # Owner has frozen turns (game over earlier in this tick)
        if self._active is not None and not self._active():
            return

        decision = decide_pursuit(enemy.cell, self._player_cell(), self._board)
        self.last_decision = decision

        if decision.action == PursuitAction.ATTACK:
            logger.debug("Enemy at %s attacks player at %s", enemy.cell, decision.target)
            self._on_hit(enemy)
        elif decision.action == PursuitAction.MOVE:
            self._move_to(decision.target)

    def _move_to(self, dest: Vector2) -> None:
        enemy = self._enemy
        self._board.clear_occupant(enemy.cell)
        self._board.set_occupant(dest, enemy)
        logger.debug("Enemy moved %s -> %s", enemy.cell, dest)
        enemy.cell = dest
