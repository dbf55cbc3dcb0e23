"""POST /api/v1/control/*: player input and session lifecycle."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException, Query

from rogueboard.api.dependencies import get_game_manager
from rogueboard.api.game_manager import GameManager, MoveSnapshot
from rogueboard.api.schemas import ControlResponse, MoveResponse
from rogueboard.core.enums import Direction

router = APIRouter(prefix="/control")


class MoveDirection(str, Enum):
    up = "up"
    right = "right"
    down = "down"
    left = "left"


def _move_response(snapshot: MoveSnapshot) -> MoveResponse:
    result = snapshot.result
    return MoveResponse(
        outcome=result.outcome.name.lower(),
        player_x=result.player_cell.x,
        player_y=result.player_cell.y,
        target_x=result.target.x if result.target else None,
        target_y=result.target.y if result.target else None,
        content=result.content.name.lower() if result.content is not None else None,
        level_advanced=result.level_advanced,
        level=snapshot.level,
        food=snapshot.food,
        turn=snapshot.turn,
        game_over=snapshot.game_over,
    )


def _require_game(manager: GameManager) -> None:
    with manager.session() as session:
        if not session.started:
            raise HTTPException(status_code=503, detail="No game in progress.")


@router.post("/new-game", response_model=ControlResponse)
def new_game(manager: GameManager = Depends(get_game_manager)) -> ControlResponse:
    manager.new_game()
    with manager.session() as session:
        turn = session.turn_count
    return ControlResponse(status="ok", message="New game started.", turn=turn)


@router.post("/move/{direction}", response_model=MoveResponse)
def move(
    direction: MoveDirection,
    manager: GameManager = Depends(get_game_manager),
) -> MoveResponse:
    _require_game(manager)
    return _move_response(manager.move(Direction[direction.name.upper()]))


@router.post("/wait", response_model=MoveResponse)
def wait(manager: GameManager = Depends(get_game_manager)) -> MoveResponse:
    _require_game(manager)
    return _move_response(manager.wait())


@router.post("/advance", response_model=ControlResponse)
def advance(
    seconds: float = Query(0.5, gt=0.0, le=10.0, description="Seconds of attack-lock time to play out"),
    manager: GameManager = Depends(get_game_manager),
) -> ControlResponse:
    _require_game(manager)
    manager.advance(seconds)
    with manager.session() as session:
        turn = session.turn_count
        attacking = session.attacking
    message = "Attack still resolving." if attacking else "Clock advanced."
    return ControlResponse(status="ok", message=message, turn=turn)
