"""GET /api/v1/state: dynamic session data (polled by UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from rogueboard.api.dependencies import get_game_manager
from rogueboard.api.game_manager import GameManager
from rogueboard.api.routes.board import occupant_schema
from rogueboard.api.schemas import EventSchema, GameStateResponse, PlayerSchema

router = APIRouter()


@router.get("/state", response_model=GameStateResponse)
def get_state(
    since_turn: int = Query(0, ge=0, description="Only return events since this turn"),
    manager: GameManager = Depends(get_game_manager),
) -> GameStateResponse:
    with manager.session() as session:
        if not session.started:
            raise HTTPException(status_code=503, detail="No game in progress.")
        cell = session.player_cell
        world_x, world_y = session.board.cell_to_world(cell)
        enemies = [occupant_schema(c.enemy) for c in session.enemy_controllers]
        state = GameStateResponse(
            level=session.level,
            food=session.food,
            turn=session.turn_count,
            game_over=session.game_over,
            levels_survived=session.levels_survived,
            camera_lens_size=session.camera_lens_size,
            player=PlayerSchema(
                x=cell.x, y=cell.y, world_x=world_x, world_y=world_y,
                attacking=session.attacking,
            ),
            enemies=enemies,
        )

    state.events = [
        EventSchema(
            turn=e.turn,
            category=e.category,
            message=e.message,
            cells=[list(c) for c in e.cells],
        )
        for e in manager.event_log.since_turn(since_turn)
    ]
    state.events_dropped = manager.event_log.dropped
    return state
