"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from snake_master.config import GameConfig
from snake_master.server.routes import router
from snake_master.server.session import GameSession
from snake_master.server.websocket import ws_router


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session = GameSession(config)
        yield
        await app.state.session.close()

    app = FastAPI(
        title="Snake Master 3D API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
