"""A live play session: one engine, its scheduler, and subscribed clients."""

from __future__ import annotations

import asyncio
import logging

from snake_master.config import GameConfig
from snake_master.engine import GameEngine, GameSnapshot
from snake_master.scene import build_scene
from snake_master.scheduler import TickScheduler

logger = logging.getLogger(__name__)

_MAX_QUEUED_FRAMES = 64


def render_frame(snapshot: GameSnapshot) -> dict:
    """Payload sent to view clients for one snapshot."""
    return {"state": snapshot.to_dict(), "scene": build_scene(snapshot)}


class GameSession:
    """Binds a :class:`GameEngine` to a :class:`TickScheduler` and viewers.

    Each viewer gets its own queue, filled synchronously from the engine
    listener, so frames arrive in commit order.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.engine = GameEngine(config)
        self.scheduler = TickScheduler(self.engine)
        self._viewers: set[asyncio.Queue[dict]] = set()
        self._unsubscribe = self.engine.subscribe(self._on_state)

    @property
    def viewer_count(self) -> int:
        return len(self._viewers)

    def add_viewer(self) -> asyncio.Queue[dict]:
        """Register a viewer queue primed with the current frame."""
        queue: asyncio.Queue[dict] = asyncio.Queue(maxsize=_MAX_QUEUED_FRAMES)
        queue.put_nowait(render_frame(self.engine.snapshot))
        self._viewers.add(queue)
        logger.info("Viewer connected (%d total).", len(self._viewers))
        return queue

    def remove_viewer(self, queue: asyncio.Queue[dict]) -> None:
        self._viewers.discard(queue)
        logger.info("Viewer disconnected (%d total).", len(self._viewers))

    def _on_state(self, snapshot: GameSnapshot) -> None:
        if not self._viewers:
            return
        frame = render_frame(snapshot)
        for queue in self._viewers:
            if queue.full():
                # Slow viewer; drop its oldest frame.
                queue.get_nowait()
            queue.put_nowait(frame)

    async def close(self) -> None:
        """Cancel the tick loop and detach from the engine."""
        self._unsubscribe()
        await self.scheduler.aclose()
        self._viewers.clear()
        logger.info("Game session closed.")
