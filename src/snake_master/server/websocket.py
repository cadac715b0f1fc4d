"""WebSocket handler streaming frames and accepting live input."""

from __future__ import annotations

import asyncio
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from snake_master.engine import GameEngine
from snake_master.server.session import GameSession
from snake_master.snake import Direction, direction_for_key

logger = logging.getLogger(__name__)

ws_router = APIRouter()

_DIRECTION_MAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _get_session(ws: WebSocket) -> GameSession:
    return ws.app.state.session


def apply_message(engine: GameEngine, msg: object) -> bool:
    """Apply one decoded client message to the engine.

    Returns whether the engine accepted it. Unknown or malformed messages
    are ignored.
    """
    if not isinstance(msg, dict):
        return False

    direction: Direction | None = None
    if isinstance(msg.get("direction"), str):
        direction = _DIRECTION_MAP.get(msg["direction"].lower())
    elif isinstance(msg.get("key"), str):
        direction = direction_for_key(msg["key"])
    if direction is not None:
        return engine.change_direction(direction)

    actions = {
        "start": engine.start,
        "pause": engine.toggle_pause,
        "reset": engine.reset,
    }
    action = msg.get("action")
    if isinstance(action, str) and action.lower() in actions:
        return actions[action.lower()]()
    return False


async def _pump_frames(websocket: WebSocket, queue: asyncio.Queue[dict]) -> None:
    while True:
        frame = await queue.get()
        await websocket.send_text(json.dumps(frame, separators=(",", ":")))


@ws_router.websocket("/game/ws")
async def play(websocket: WebSocket) -> None:
    """Viewer/controller socket: receive frames, send input."""
    session = _get_session(websocket)
    await websocket.accept()
    queue = session.add_viewer()
    sender = asyncio.create_task(_pump_frames(websocket, queue))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            apply_message(session.engine, msg)
    except WebSocketDisconnect:
        logger.info("Client disconnected from game socket.")
    finally:
        session.remove_viewer(queue)
        sender.cancel()
        await asyncio.gather(sender, return_exceptions=True)
