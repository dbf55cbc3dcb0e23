"""Board / grid system: per-cell passability, terrain and occupancy."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator

from rogueboard.core.enums import Tile
from rogueboard.core.models import Vector2

if TYPE_CHECKING:
    from rogueboard.core.contents import CellContent

logger = logging.getLogger(__name__)

DiscardListener = Callable[["CellContent"], None]


class OccupiedCellError(RuntimeError):
    """Raised when placing content on a cell that already holds another."""


@dataclass(slots=True)
class CellData:
    """Gameplay state of a single cell."""

    passable: bool
    occupant: CellContent | None = None
    tile: Tile = Tile.GROUND
    variant: int = 0


class Board:
    """W x H grid backed by a flat list, perimeter impassable.

    Out-of-bounds lookups return ``None`` (or ``False`` for mutations);
    no cell is ever fabricated for an invalid coordinate.
    """

    __slots__ = ("width", "height", "cell_size", "origin", "_cells", "_discard_listeners")

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: float = 1.0,
        origin: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        if width < 3 or height < 3:
            raise ValueError(f"Board must be at least 3x3, got {width}x{height}")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.origin = origin
        self._cells: list[CellData] = []
        for y in range(height):
            for x in range(width):
                if self._on_perimeter(x, y):
                    self._cells.append(CellData(passable=False, tile=Tile.BOUNDARY))
                else:
                    self._cells.append(CellData(passable=True))
        self._discard_listeners: list[DiscardListener] = []

    # -- geometry --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def _on_perimeter(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_perimeter(self, pos: Vector2) -> bool:
        return self.in_bounds(pos) and self._on_perimeter(pos.x, pos.y)

    @property
    def interior_area(self) -> int:
        return (self.width - 2) * (self.height - 2)

    def interior_cells(self) -> list[Vector2]:
        """All interior coordinates, column-major (x outer, y inner)."""
        return [
            Vector2(x, y)
            for x in range(1, self.width - 1)
            for y in range(1, self.height - 1)
        ]

    def cell_to_world(self, pos: Vector2) -> tuple[float, float]:
        """Centre of *pos* in world units."""
        ox, oy = self.origin
        return (
            ox + (pos.x + 0.5) * self.cell_size,
            oy + (pos.y + 0.5) * self.cell_size,
        )

    # -- access --

    def get_cell(self, pos: Vector2) -> CellData | None:
        if not self.in_bounds(pos):
            return None
        return self._cells[self._idx(pos.x, pos.y)]

    def is_passable(self, pos: Vector2) -> bool:
        cell = self.get_cell(pos)
        return cell is not None and cell.passable

    def is_empty(self, pos: Vector2) -> bool:
        """True for an in-bounds, passable, unoccupied cell."""
        cell = self.get_cell(pos)
        return cell is not None and cell.passable and cell.occupant is None

    def occupant_at(self, pos: Vector2) -> CellContent | None:
        cell = self.get_cell(pos)
        return cell.occupant if cell is not None else None

    def occupants(self) -> Iterator[CellContent]:
        for cell in self._cells:
            if cell.occupant is not None:
                yield cell.occupant

    # -- mutation --

    def set_tile(self, pos: Vector2, tile: Tile, variant: int = 0) -> bool:
        cell = self.get_cell(pos)
        if cell is None:
            return False
        cell.tile = tile
        cell.variant = variant
        return True

    def set_occupant(self, pos: Vector2, content: CellContent) -> bool:
        """Bind *content* to *pos*. Returns False if out of bounds."""
        cell = self.get_cell(pos)
        if cell is None:
            return False
        if __debug__ and cell.occupant is not None and cell.occupant is not content:
            raise OccupiedCellError(
                f"Cell {pos} already holds {cell.occupant.kind.name}; "
                f"refusing to place {content.kind.name}"
            )
        cell.occupant = content
        return True

    def clear_occupant(self, pos: Vector2) -> CellContent | None:
        """Unbind whatever occupies *pos* and return it."""
        cell = self.get_cell(pos)
        if cell is None:
            return None
        previous = cell.occupant
        cell.occupant = None
        return previous

    def discard(self, content: CellContent) -> None:
        """Remove *content* from the board and mark it destroyed."""
        cell = self.get_cell(content.cell)
        if cell is not None and cell.occupant is content:
            cell.occupant = None
        if content.destroyed:
            return
        content.destroyed = True
        for listener in list(self._discard_listeners):
            listener(content)

    def clear_all_contents(self) -> int:
        """Discard every occupant. Returns how many were removed."""
        removed = [cell.occupant for cell in self._cells if cell.occupant is not None]
        for content in removed:
            self.discard(content)
        # Also drop any stale reference whose cell field drifted
        for cell in self._cells:
            cell.occupant = None
        logger.debug("Cleared %d contents from %dx%d board", len(removed), self.width, self.height)
        return len(removed)

    # -- listeners --

    def add_discard_listener(self, listener: DiscardListener) -> None:
        self._discard_listeners.append(listener)

    def remove_discard_listener(self, listener: DiscardListener) -> None:
        try:
            self._discard_listeners.remove(listener)
        except ValueError:
            pass
