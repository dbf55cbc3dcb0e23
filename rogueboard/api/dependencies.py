"""FastAPI dependency injection: provides the app's GameManager."""

from __future__ import annotations

from fastapi import Request

from rogueboard.api.game_manager import GameManager


def get_game_manager(request: Request) -> GameManager:
    manager = getattr(request.app.state, "game_manager", None)
    if manager is None:
        raise RuntimeError("GameManager not initialized; server not started correctly.")
    return manager
