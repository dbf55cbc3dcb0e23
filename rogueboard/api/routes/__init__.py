"""Versioned API route modules."""

from fastapi import APIRouter

from rogueboard.api.routes.board import router as board_router
from rogueboard.api.routes.config import router as config_router
from rogueboard.api.routes.control import router as control_router
from rogueboard.api.routes.state import router as state_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(board_router, tags=["Board"])
api_router.include_router(state_router, tags=["State"])
api_router.include_router(control_router, tags=["Control"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
