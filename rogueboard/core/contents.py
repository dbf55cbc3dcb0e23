"""Cell contents: the things that can occupy a board cell.

Each variant is a plain dataclass tagged with a ``ContentKind``. Behaviour
lives in a dispatch table keyed by kind, one ``ContentHandler`` per variant,
covering three hooks:

  on_init           -- called once when the generator places the content
  on_enter_request  -- the player wants to step in; returns True to allow it
  on_enter          -- the player has stepped in

Hooks receive an ``InteractionContext`` (implemented by the game session)
instead of reaching for global state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

from rogueboard.core.enums import ContentKind, Tile
from rogueboard.core.models import Vector2

if TYPE_CHECKING:
    from rogueboard.core.board import Board

logger = logging.getLogger(__name__)


class InteractionContext(Protocol):
    """What content hooks are allowed to touch."""

    @property
    def board(self) -> Board: ...

    def change_resource(self, delta: int) -> None: ...

    def advance_level(self) -> None: ...

    def player_damaged(self, amount: int, source: CellContent) -> None: ...


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(slots=True, eq=False)
class CellContent:
    """Base record shared by every variant."""

    cell: Vector2
    destroyed: bool = field(default=False, init=False)

    kind = ContentKind.FOOD  # overridden per variant

    def __repr__(self) -> str:
        return f"{self.kind.name.title()}@{self.cell}"


@dataclass(slots=True, eq=False, repr=False)
class Food(CellContent):
    nutrition: int = 5

    kind = ContentKind.FOOD


@dataclass(slots=True, eq=False, repr=False)
class Wall(CellContent):
    max_health: int = 3
    health: int = field(default=0, init=False)
    damaged: bool = field(default=False, init=False)
    # Terrain that was under the wall before it was placed
    original_tile: Tile = field(default=Tile.GROUND, init=False)
    original_variant: int = field(default=0, init=False)

    kind = ContentKind.WALL

    def __post_init__(self) -> None:
        self.health = self.max_health


@dataclass(slots=True, eq=False, repr=False)
class Trap(CellContent):
    damage: int = 5

    kind = ContentKind.TRAP


@dataclass(slots=True, eq=False, repr=False)
class Exit(CellContent):
    kind = ContentKind.EXIT


@dataclass(slots=True, eq=False, repr=False)
class Enemy(CellContent):
    max_health: int = 3
    health: int = field(default=0, init=False)
    damage: int = 1

    kind = ContentKind.ENEMY

    def __post_init__(self) -> None:
        self.health = self.max_health

    @property
    def alive(self) -> bool:
        return self.health > 0 and not self.destroyed


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ContentHandler:
    """Hook set for one content variant."""

    on_init: Callable[[CellContent, Board], None]
    on_enter_request: Callable[[CellContent, InteractionContext], bool]
    on_enter: Callable[[CellContent, InteractionContext], None]
    attackable: bool = False


def _no_init(content: CellContent, board: Board) -> None:
    pass


def _allow(content: CellContent, ctx: InteractionContext) -> bool:
    return True


def _no_enter(content: CellContent, ctx: InteractionContext) -> None:
    pass


# -- Food --

def _food_enter(content: Food, ctx: InteractionContext) -> None:
    ctx.board.discard(content)
    logger.debug("Food collected at %s (+%d)", content.cell, content.nutrition)
    ctx.change_resource(content.nutrition)


# -- Trap --

def _trap_enter(content: Trap, ctx: InteractionContext) -> None:
    ctx.board.discard(content)
    logger.debug("Trap triggered at %s (-%d)", content.cell, content.damage)
    ctx.player_damaged(content.damage, content)
    ctx.change_resource(-content.damage)


# -- Exit --

def _exit_init(content: Exit, board: Board) -> None:
    board.set_tile(content.cell, Tile.EXIT)


def _exit_enter(content: Exit, ctx: InteractionContext) -> None:
    ctx.advance_level()


# -- Wall --

def _wall_init(content: Wall, board: Board) -> None:
    content.health = content.max_health
    cell = board.get_cell(content.cell)
    if cell is not None:
        content.original_tile = cell.tile
        content.original_variant = cell.variant
    board.set_tile(content.cell, Tile.OBSTACLE)


def _wall_hit(content: Wall, ctx: InteractionContext) -> bool:
    content.health -= 1
    if content.health <= 0:
        ctx.board.discard(content)
        ctx.board.set_tile(content.cell, content.original_tile, content.original_variant)
        logger.debug("Wall at %s destroyed", content.cell)
        return True
    if not content.damaged and content.health == content.max_health // 2:
        content.damaged = True
        ctx.board.set_tile(content.cell, Tile.OBSTACLE_DAMAGED)
    return False


# -- Enemy --

def _enemy_init(content: Enemy, board: Board) -> None:
    content.health = content.max_health


def _enemy_hit(content: Enemy, ctx: InteractionContext) -> bool:
    content.health -= 1
    logger.debug("Enemy at %s hit, %d health left", content.cell, content.health)
    if content.health <= 0:
        ctx.board.discard(content)
        return True
    return False


CONTENT_HANDLERS: dict[ContentKind, ContentHandler] = {
    ContentKind.FOOD: ContentHandler(_no_init, _allow, _food_enter),
    ContentKind.WALL: ContentHandler(_wall_init, _wall_hit, _no_enter, attackable=True),
    ContentKind.TRAP: ContentHandler(_no_init, _allow, _trap_enter),
    ContentKind.EXIT: ContentHandler(_exit_init, _allow, _exit_enter),
    ContentKind.ENEMY: ContentHandler(_enemy_init, _enemy_hit, _no_enter, attackable=True),
}


def handler_for(content: CellContent) -> ContentHandler:
    return CONTENT_HANDLERS[content.kind]


def init_content(content: CellContent, board: Board) -> None:
    handler_for(content).on_init(content, board)


def request_enter(content: CellContent, ctx: InteractionContext) -> bool:
    return handler_for(content).on_enter_request(content, ctx)


def enter(content: CellContent, ctx: InteractionContext) -> None:
    handler_for(content).on_enter(content, ctx)


def is_attackable(content: CellContent) -> bool:
    return handler_for(content).attackable
