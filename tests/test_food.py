"""Tests for the FoodPlacer module."""

import logging

import numpy as np
import pytest

from snake_master.food import FoodPlacer
from snake_master.grid import Cell, Grid


class TestFoodPlacerInit:
    def test_default(self):
        placer = FoodPlacer(Grid(size=5))
        assert placer.max_attempts == 100

    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            FoodPlacer(Grid(size=5), max_attempts=0)


class TestFoodPlacement:
    def test_avoids_occupied_cells(self):
        grid = Grid(size=5)
        placer = FoodPlacer(grid, rng=np.random.default_rng(42))
        occupied = {Cell(x, z) for x in range(5) for z in range(4)}
        for _ in range(20):
            cell = placer.place(occupied)
            assert cell not in occupied
            assert grid.in_bounds(cell)

    def test_deterministic(self):
        """Same seed produces the same sequence of placements."""
        assert self._place_with_seed(42) == self._place_with_seed(42)

    def test_different_seeds(self):
        # Very unlikely to match with different seeds.
        assert self._place_with_seed(1) != self._place_with_seed(2)

    def test_fallback_to_first_free_cell(self, caplog):
        grid = Grid(size=4)
        placer = FoodPlacer(grid, max_attempts=1, rng=np.random.default_rng(0))
        free = Cell(3, 3)
        occupied = [Cell(x, z) for x in range(4) for z in range(4) if Cell(x, z) != free]
        with caplog.at_level(logging.WARNING, logger="snake_master.food"):
            results = {placer.place(occupied) for _ in range(10)}
        # Sampling may hit the free cell directly; otherwise the scan finds it.
        assert results == {free}

    def test_full_board_returns_a_cell(self, caplog):
        grid = Grid(size=4)
        placer = FoodPlacer(grid, max_attempts=5, rng=np.random.default_rng(0))
        occupied = [Cell(x, z) for x in range(4) for z in range(4)]
        with caplog.at_level(logging.WARNING, logger="snake_master.food"):
            cell = placer.place(occupied)
        assert grid.in_bounds(cell)
        assert "No free cells" in caplog.text

    @staticmethod
    def _place_with_seed(seed: int) -> list[Cell]:
        placer = FoodPlacer(Grid(size=15), rng=np.random.default_rng(seed))
        return [placer.place([Cell(7, 7)]) for _ in range(5)]
