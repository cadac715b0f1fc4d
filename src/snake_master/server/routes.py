"""REST route handlers for game control."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from snake_master.config import Difficulty
from snake_master.server.models import (
    ControlResponse,
    DifficultyLevel,
    DifficultyRequest,
    DirectionRequest,
)
from snake_master.server.session import GameSession
from snake_master.snake import Direction

router = APIRouter(prefix="/game", tags=["game"])


def _get_session(request: Request) -> GameSession:
    return request.app.state.session


def _respond(session: GameSession, accepted: bool) -> ControlResponse:
    return ControlResponse(
        accepted=accepted, state=session.engine.snapshot.to_dict(),
    )


@router.get("")
async def get_state(request: Request) -> dict:
    """Return the latest committed snapshot."""
    return _get_session(request).engine.snapshot.to_dict()


@router.get("/difficulties")
async def list_difficulties(request: Request) -> list[DifficultyLevel]:
    """List difficulty levels from slowest to fastest."""
    config = _get_session(request).engine.config
    return [
        DifficultyLevel(level=d.value, tick_interval_ms=config.interval_for(d))
        for d in Difficulty.ordered()
    ]


@router.post("/start")
async def start(request: Request) -> ControlResponse:
    session = _get_session(request)
    return _respond(session, session.engine.start())


@router.post("/pause")
async def toggle_pause(request: Request) -> ControlResponse:
    session = _get_session(request)
    return _respond(session, session.engine.toggle_pause())


@router.post("/reset")
async def reset(request: Request) -> ControlResponse:
    session = _get_session(request)
    return _respond(session, session.engine.reset())


@router.post("/direction")
async def change_direction(
    body: DirectionRequest, request: Request,
) -> ControlResponse:
    """Queue a heading change for the next tick."""
    session = _get_session(request)
    try:
        direction = Direction.parse(body.direction)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _respond(session, session.engine.change_direction(direction))


@router.post("/difficulty")
async def set_difficulty(
    body: DifficultyRequest, request: Request,
) -> ControlResponse:
    """Select the speed level used for the next run."""
    session = _get_session(request)
    try:
        accepted = session.engine.set_difficulty(body.level)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _respond(session, accepted)
