"""GET /api/v1/board: tiles and occupants of the current level."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from rogueboard.api.dependencies import get_game_manager
from rogueboard.api.game_manager import GameManager
from rogueboard.api.schemas import BoardResponse, OccupantSchema
from rogueboard.core.contents import CellContent, Enemy, Food, Trap, Wall
from rogueboard.core.models import Vector2

router = APIRouter()


def rle_encode(values: list[int]) -> list[int]:
    """RLE encode: [value, count, value, count, ...]."""
    rle: list[int] = []
    if not values:
        return rle
    cur_val = values[0]
    cur_count = 1
    for v in values[1:]:
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


def occupant_schema(content: CellContent) -> OccupantSchema:
    schema = OccupantSchema(kind=content.kind.name.lower(), x=content.cell.x, y=content.cell.y)
    if isinstance(content, (Wall, Enemy)):
        schema.health = content.health
        schema.max_health = content.max_health
    if isinstance(content, Enemy):
        schema.damage = content.damage
    elif isinstance(content, Trap):
        schema.damage = content.damage
    elif isinstance(content, Food):
        schema.nutrition = content.nutrition
    return schema


@router.get("/board", response_model=BoardResponse)
def get_board(manager: GameManager = Depends(get_game_manager)) -> BoardResponse:
    with manager.session() as session:
        if not session.started:
            raise HTTPException(status_code=503, detail="No game in progress.")
        board = session.board
        tiles: list[int] = []
        variants: list[int] = []
        for y in range(board.height):
            for x in range(board.width):
                cell = board.get_cell(Vector2(x, y))
                tiles.append(int(cell.tile))
                variants.append(cell.variant)
        occupants = [occupant_schema(c) for c in board.occupants()]
        return BoardResponse(
            level=session.level,
            width=board.width,
            height=board.height,
            tiles=rle_encode(tiles),
            variants=rle_encode(variants),
            occupants=occupants,
        )
