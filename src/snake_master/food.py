"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from snake_master.grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Picks a free cell for the next food item.

    Uses bounded rejection sampling over the whole board with a seeded NumPy
    RNG, so placement is reproducible for a given seed.
    """

    def __init__(
        self,
        grid: Grid,
        max_attempts: int = 100,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, occupied: Iterable[Cell]) -> Cell:
        """Return a cell not in *occupied*.

        Falls back to the first free cell in row-major order when sampling
        runs out of attempts, and to the last sampled candidate when the
        board is full.
        """
        taken = set(occupied)
        candidate = None
        for _ in range(self.max_attempts):
            x, z = self.rng.integers(0, self.grid.size, size=2).tolist()
            candidate = Cell(x, z)
            if candidate not in taken:
                return candidate

        free = self.grid.free_cells(taken)
        if free:
            logger.warning(
                "Food sampling exhausted %d attempts; using first free cell %s.",
                self.max_attempts, free[0],
            )
            return free[0]

        logger.warning("No free cells for food; reusing occupied cell %s.", candidate)
        return candidate
