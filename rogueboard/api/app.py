"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rogueboard.api.game_manager import GameManager
from rogueboard.api.routes import api_router
from rogueboard.config import GameConfig
from rogueboard.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = GameManager(_config)
        app.state.game_manager = manager
        manager.new_game()
        if _config.realtime_clock:
            manager.start()
        logger.info("API server started, game ready.")
        yield
        manager.stop()
        app.state.game_manager = None
        logger.info("API server shutting down.")

    app = FastAPI(
        title="rogueboard",
        description=(
            "Turn-based grid board game core: JSON API for presentation clients.\n\n"
            "## API Groups\n\n"
            "- **Board** - Tiles and occupants of the current level\n"
            "- **State** - Level, food, turn, player position, events\n"
            "- **Control** - New game, player moves, waiting a turn, advancing the attack clock\n"
            "- **Config** - Game settings and the difficulty phase table\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Board", "description": "Tile layout (RLE) and cell occupants. Changes when walls crack, contents are consumed, or the level advances."},
            {"name": "State", "description": "Live session state polled by the client."},
            {"name": "Control", "description": "Player input: moves, waits, and the attack-lock clock."},
            {"name": "Config", "description": "Read-only game configuration and difficulty phases."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
