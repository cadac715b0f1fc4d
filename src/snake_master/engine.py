"""Tick-driven game engine composing movement, collision, and food logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from snake_master import snake as movement
from snake_master.collision import Outcome, classify
from snake_master.config import Difficulty, GameConfig
from snake_master.food import FoodPlacer
from snake_master.grid import Cell, Grid
from snake_master.snake import Direction

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    """Lifecycle of a play session."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of committed engine state, handed to readers."""

    snake: tuple[Cell, ...]
    food: Cell
    direction: Direction
    pending_direction: Direction | None
    score: int
    phase: Phase
    difficulty: Difficulty
    tick_interval_ms: int
    grid_size: int
    ticks: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def to_dict(self) -> dict:
        """Return the snapshot as a JSON-serializable dict."""
        return {
            "snake": [c.to_dict() for c in self.snake],
            "food": self.food.to_dict(),
            "direction": self.direction.name,
            "pending_direction": (
                self.pending_direction.name if self.pending_direction else None
            ),
            "score": self.score,
            "length": self.length,
            "phase": self.phase.value,
            "difficulty": self.difficulty.value,
            "tick_interval_ms": self.tick_interval_ms,
            "grid_size": self.grid_size,
            "ticks": self.ticks,
        }


StateListener = Callable[[GameSnapshot], None]


class GameEngine:
    """Single-player snake state machine.

    The engine exclusively owns the snake, food, heading, score and phase.
    An external scheduler calls :meth:`tick` once per interval while the game
    is running; input handlers call the control operations in between.
    Every operation is synchronous, so it never interleaves with a tick.

    Control operations return ``True`` when accepted and ``False`` when they
    are a no-op in the current phase.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.grid_size)
        self.rng = np.random.default_rng(self.config.seed)
        self.food_placer = FoodPlacer(
            self.grid, max_attempts=self.config.food_max_attempts, rng=self.rng,
        )
        self.difficulty = self.config.difficulty
        self._listeners: list[StateListener] = []
        self._init_state()
        self._snapshot = self._build_snapshot()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> GameSnapshot:
        """The last committed state."""
        return self._snapshot

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def tick_interval_ms(self) -> int:
        return self.config.interval_for(self.difficulty)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for every committed snapshot.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Control operations
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Begin a run from NOT_STARTED, or a fresh one after GAME_OVER."""
        if self._phase in (Phase.RUNNING, Phase.PAUSED):
            return False
        if self._phase == Phase.GAME_OVER:
            self._init_state()
        self._set_phase(Phase.RUNNING)
        self._commit()
        return True

    def toggle_pause(self) -> bool:
        """Switch between RUNNING and PAUSED."""
        if self._phase == Phase.RUNNING:
            self._set_phase(Phase.PAUSED)
        elif self._phase == Phase.PAUSED:
            self._set_phase(Phase.RUNNING)
        else:
            return False
        self._commit()
        return True

    def change_direction(self, direction: Direction) -> bool:
        """Queue a heading change for the next tick.

        Rejected outside RUNNING and for 180° reversals of the committed
        heading. A later accepted change overwrites an earlier one that has
        not been consumed yet.
        """
        if self._phase != Phase.RUNNING:
            return False
        if direction.is_reverse_of(self._direction):
            return False
        self._pending_direction = direction
        self._commit()
        return True

    def set_difficulty(self, level: Difficulty | str) -> bool:
        """Change the tick interval; only allowed between runs."""
        level = Difficulty.parse(level)
        if self._phase not in (Phase.NOT_STARTED, Phase.GAME_OVER):
            return False
        self.difficulty = level
        logger.info(
            "Difficulty set to %s (%d ms).", level.value, self.tick_interval_ms,
        )
        self._commit()
        return True

    def reset(self) -> bool:
        """Restore the initial snake, food, heading and score."""
        self._init_state()
        self._commit()
        return True

    def tick(self) -> GameSnapshot:
        """Advance the game by one step and return the committed snapshot.

        Outside RUNNING this is a no-op.
        """
        if self._phase != Phase.RUNNING:
            return self._snapshot

        if self._pending_direction is not None:
            self._direction = self._pending_direction
            self._pending_direction = None

        candidate = movement.next_head(self._snake, self._direction)
        outcome = classify(candidate, self.grid.size, self._snake, self._food)
        self._ticks += 1

        if outcome.is_fatal:
            self._set_phase(Phase.GAME_OVER)
            logger.info(
                "Game over (%s) at tick %d with score %d.",
                outcome.value, self._ticks, self._score,
            )
        elif outcome == Outcome.FOOD:
            self._snake = movement.advance(self._snake, candidate, grow=True)
            self._score += self.config.score_increment
            self._food = self.food_placer.place(self._snake)
        else:
            self._snake = movement.advance(self._snake, candidate)

        self._commit()
        return self._snapshot

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _init_state(self) -> None:
        cfg = self.config
        self._snake: tuple[Cell, ...] = tuple(Cell(*c) for c in cfg.initial_snake)
        self._food = Cell(*cfg.initial_food)
        self._direction = cfg.initial_direction
        self._pending_direction: Direction | None = None
        self._score = 0
        self._ticks = 0
        self._phase = Phase.NOT_STARTED

    def _set_phase(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s.", self._phase.value, phase.value)
        self._phase = phase

    def _build_snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=self._snake,
            food=self._food,
            direction=self._direction,
            pending_direction=self._pending_direction,
            score=self._score,
            phase=self._phase,
            difficulty=self.difficulty,
            tick_interval_ms=self.tick_interval_ms,
            grid_size=self.grid.size,
            ticks=self._ticks,
        )

    def _commit(self) -> None:
        self._snapshot = self._build_snapshot()
        for listener in list(self._listeners):
            listener(self._snapshot)
