"""GameSession: level progression, the food resource, and player actions.

The session owns the current board, the player's cell, and the attack lock.
It is injected with the generator and the turn scheduler, and it is the
``InteractionContext`` handed to cell-content hooks.

Turn protocol for one player input:
  1. Validate the target cell (bounds, passability).
  2. Empty cell -> move. Food/Trap/Exit -> request entry, move, run the
     content's on_enter. Wall/Enemy -> start the attack lock instead.
  3. ``tick()``: the session drains food first (it subscribes before any
     enemy), then each enemy controller runs in subscription order.

The attack lock has two fixed-length phases driven by ``update(dt)``:
the strike phase resolves the hit (and moves the player in if the target
was destroyed); the recover phase releases the lock and calls ``tick()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from rogueboard.core.contents import CellContent, Enemy, Trap, enter, is_attackable, request_enter
from rogueboard.core.enums import AttackPhase, ContentKind, Direction, MoveOutcome
from rogueboard.core.models import DIRECTION_OFFSETS, Vector2
from rogueboard.engine.pursuit import EnemyController
from rogueboard.engine.signals import Signal
from rogueboard.engine.turn_scheduler import TurnScheduler
from rogueboard.systems.generator import BoardGenerator
from rogueboard.systems.rng import DeterministicRNG
from rogueboard.utils.event_log import EventLog, GameEvent

if TYPE_CHECKING:
    from rogueboard.config import GameConfig
    from rogueboard.core.board import Board, CellData
    from rogueboard.systems.generator import GeneratedLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """What happened to one player input."""

    outcome: MoveOutcome
    player_cell: Vector2
    target: Vector2 | None = None
    content: ContentKind | None = None
    level_advanced: bool = False


@dataclass(slots=True)
class AttackState:
    """An attack in progress; input is ignored while one exists."""

    target: CellContent
    cell: Vector2
    phase: AttackPhase
    remaining: float


class GameSession:
    """Tracks level, food and turn flow for one player."""

    def __init__(
        self,
        config: GameConfig,
        generator: BoardGenerator | None = None,
        scheduler: TurnScheduler | None = None,
        event_log: EventLog | None = None,
    ) -> None:
        self._config = config
        self._generator = generator if generator is not None else BoardGenerator(config)
        self._scheduler = scheduler if scheduler is not None else TurnScheduler()
        self._event_log = event_log if event_log is not None else EventLog(config.event_log_capacity)

        self._rng: DeterministicRNG | None = None
        self._games_started = 0
        self._current: GeneratedLevel | None = None
        self._controllers: dict[Enemy, EnemyController] = {}
        self._player_cell = self._generator.player_spawn
        self._level = 1
        self._food = config.starting_food
        self._game_over = False
        self._levels_survived = 0
        self._attack: AttackState | None = None

        self.on_game_over: Signal[Callable[[int], None]] = Signal("on_game_over")
        self.on_level_advance: Signal[Callable[[int], None]] = Signal("on_level_advance")
        self.on_player_damaged: Signal[Callable[[int], None]] = Signal("on_player_damaged")
        self.on_enemy_attack: Signal[Callable[[Enemy], None]] = Signal("on_enemy_attack")

        # Subscribed before any enemy so food drains first each turn
        self._scheduler.subscribe(self._on_turn)

    # -- public properties --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def scheduler(self) -> TurnScheduler:
        return self._scheduler

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def started(self) -> bool:
        return self._current is not None

    @property
    def board(self) -> Board:
        if self._current is None:
            raise RuntimeError("No game in progress; call new_game() first.")
        return self._current.board

    @property
    def current_level(self) -> GeneratedLevel | None:
        return self._current

    @property
    def level(self) -> int:
        return self._level

    @property
    def food(self) -> int:
        return self._food

    @property
    def turn_count(self) -> int:
        return self._scheduler.turn_count

    @property
    def player_cell(self) -> Vector2:
        return self._player_cell

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def levels_survived(self) -> int:
        return self._levels_survived

    @property
    def attack_state(self) -> AttackState | None:
        return self._attack

    @property
    def attacking(self) -> bool:
        return self._attack is not None

    @property
    def camera_lens_size(self) -> float:
        return self._current.config.camera_lens_size if self._current else 0.0

    @property
    def enemy_controllers(self) -> list[EnemyController]:
        return list(self._controllers.values())

    def get_cell(self, pos: Vector2) -> CellData | None:
        return self.board.get_cell(pos)

    # -- lifecycle --

    def new_game(self) -> None:
        """Reset level and food, then generate level 1."""
        self._rng = DeterministicRNG(self._config.seed + self._games_started)
        self._games_started += 1
        self._level = 1
        self._food = self._config.starting_food
        self._game_over = False
        self._levels_survived = 0
        self._attack = None
        self._scheduler.reset()
        self._load_level(self._level)
        logger.info("New game started (seed=%d, food=%d)", self._rng.seed, self._food)
        self._emit("game", "New game started.")

    def advance_level(self) -> None:
        """Move to the next level. Food and turn counters carry over."""
        self._level += 1
        self._load_level(self._level)
        logger.info("Advanced to level %d (food=%d, turn=%d)", self._level, self._food, self.turn_count)
        self._emit("level", f"Reached level {self._level}.")
        self.on_level_advance.emit(self._level)

    def _load_level(self, level: int) -> None:
        if self._current is not None:
            old_board = self._current.board
            old_board.clear_all_contents()
            old_board.remove_discard_listener(self._on_discard)
        # Controllers of a previous game may still be around if new_game() ran mid-level
        for controller in self._controllers.values():
            self._scheduler.unsubscribe(controller.on_turn)
        self._controllers.clear()

        self._current = self._generator.generate_level(level, self._rng)
        board = self._current.board
        board.add_discard_listener(self._on_discard)

        for enemy in self._current.enemies:
            controller = EnemyController(
                enemy, board, self._get_player_cell, self._enemy_hit, active=self._turns_active,
            )
            self._controllers[enemy] = controller
            self._scheduler.subscribe(controller.on_turn)

        self._player_cell = self._generator.player_spawn

    def _get_player_cell(self) -> Vector2:
        return self._player_cell

    def _turns_active(self) -> bool:
        return not self._game_over

    def _on_discard(self, content: CellContent) -> None:
        if isinstance(content, Enemy):
            controller = self._controllers.pop(content, None)
            if controller is not None:
                self._scheduler.unsubscribe(controller.on_turn)

    # -- resource --

    def change_resource(self, delta: int) -> None:
        """Add *delta* to food. Reaching zero or below ends the game once."""
        if self._game_over:
            return
        self._food += delta
        if delta > 0:
            self._emit("food", f"+{delta} food ({self._food}).", (self._player_cell,))
        if self._food <= 0:
            self._trigger_game_over()

    def _trigger_game_over(self) -> None:
        self._game_over = True
        self._levels_survived = self._level
        self._attack = None
        logger.info("Game over on level %d at turn %d", self._level, self.turn_count)
        self._emit("game", f"Game over after {self._level} levels.")
        self.on_game_over.emit(self._levels_survived)

    def player_damaged(self, amount: int, source: CellContent) -> None:
        self._emit("damage", f"Player hit by {source.kind.name.lower()} for {amount}.", (source.cell,))
        self.on_player_damaged.emit(amount)

    def _enemy_hit(self, enemy: Enemy) -> None:
        if self._game_over:
            return
        self.on_enemy_attack.emit(enemy)
        self.player_damaged(enemy.damage, enemy)
        self.change_resource(-enemy.damage)

    def _on_turn(self) -> None:
        if self._game_over:
            return
        self.change_resource(-self._config.food_per_turn)

    # -- player input --

    def _accepting_input(self) -> bool:
        if self._current is None:
            raise RuntimeError("No game in progress; call new_game() first.")
        return not self._game_over and self._attack is None

    def wait(self) -> MoveResult:
        """Pass a turn without moving."""
        if not self._accepting_input():
            return MoveResult(MoveOutcome.IGNORED, self._player_cell)
        self._scheduler.tick()
        return MoveResult(MoveOutcome.WAITED, self._player_cell)

    def attempt_player_move(self, direction: Direction) -> MoveResult:
        if not self._accepting_input():
            return MoveResult(MoveOutcome.IGNORED, self._player_cell)

        target = self._player_cell + DIRECTION_OFFSETS[direction]
        cell = self.board.get_cell(target)
        if cell is None or not cell.passable:
            return MoveResult(MoveOutcome.BLOCKED, self._player_cell, target)

        content = cell.occupant
        if content is None:
            self._player_cell = target
            self._scheduler.tick()
            return MoveResult(MoveOutcome.MOVED, self._player_cell, target)

        if is_attackable(content):
            self._attack = AttackState(
                target=content,
                cell=target,
                phase=AttackPhase.STRIKE,
                remaining=self._config.attack_strike_seconds,
            )
            logger.debug("Player attacks %r", content)
            return MoveResult(MoveOutcome.ATTACKED, self._player_cell, target, content.kind)

        if not request_enter(content, self):
            return MoveResult(MoveOutcome.BLOCKED, self._player_cell, target, content.kind)

        level_before = self._level
        self._player_cell = target
        enter(content, self)
        # Game over freezes the turn counter and every actor
        if not self._game_over:
            self._scheduler.tick()
        outcome = MoveOutcome.ENTERED_HAZARD if isinstance(content, Trap) else MoveOutcome.MOVED
        return MoveResult(
            outcome, self._player_cell, target, content.kind,
            level_advanced=self._level != level_before,
        )

    # -- attack lock --

    def update(self, dt: float) -> None:
        """Advance the attack lock by *dt* seconds."""
        while self._attack is not None:
            attack = self._attack
            if dt < attack.remaining:
                attack.remaining -= dt
                return
            dt -= attack.remaining
            self._advance_attack(attack)

    def finish_attack(self) -> None:
        """Run any pending attack through both phases immediately."""
        self.update(float("inf"))

    def _advance_attack(self, attack: AttackState) -> None:
        if attack.phase == AttackPhase.STRIKE:
            target = attack.target
            if not target.destroyed and request_enter(target, self):
                self._player_cell = attack.cell
                enter(target, self)
                self._emit("combat", f"Player destroyed {target.kind.name.lower()}.", (attack.cell,))
            attack.phase = AttackPhase.RECOVER
            attack.remaining = self._config.attack_recover_seconds
        else:
            self._attack = None
            if not self._game_over:
                self._scheduler.tick()

    # -- events --

    def _emit(self, category: str, message: str, cells: tuple[Vector2, ...] = ()) -> None:
        self._event_log.append(GameEvent(
            turn=self.turn_count,
            category=category,
            message=message,
            cells=tuple((c.x, c.y) for c in cells),
        ))
