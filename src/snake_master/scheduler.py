"""Interval scheduler that drives the engine while a game is running."""

from __future__ import annotations

import asyncio
import logging

from snake_master.engine import GameEngine, GameSnapshot, Phase

logger = logging.getLogger(__name__)


class TickScheduler:
    """Owns the tick loop task for one engine.

    The task only exists while the engine is RUNNING: it is created when a
    snapshot enters RUNNING and cancelled on any other phase. Must be used
    from inside a running event loop.
    """

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine
        self._task: asyncio.Task | None = None
        self._unsubscribe = engine.subscribe(self._on_state)

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def _on_state(self, snapshot: GameSnapshot) -> None:
        if snapshot.phase == Phase.RUNNING:
            self._acquire()
        else:
            self._release()

    def _acquire(self) -> None:
        if self.active:
            return
        interval_ms = self.engine.tick_interval_ms
        self._task = asyncio.get_running_loop().create_task(
            self._tick_loop(interval_ms / 1000.0),
        )
        logger.debug("Tick loop started (%d ms).", interval_ms)

    def _release(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        # A loop ending the game from inside its own tick exits on the
        # phase check instead.
        if task is asyncio.current_task():
            return
        task.cancel()
        logger.debug("Tick loop cancelled.")

    async def _tick_loop(self, interval: float) -> None:
        try:
            while self.engine.phase == Phase.RUNNING:
                await asyncio.sleep(interval)
                if self.engine.phase != Phase.RUNNING:
                    break
                self.engine.tick()
        except asyncio.CancelledError:
            logger.debug("Tick loop task cancelled.")
        except Exception:
            logger.exception("Tick loop error.")

    async def aclose(self) -> None:
        """Stop listening to the engine and cancel any live tick loop."""
        self._unsubscribe()
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
