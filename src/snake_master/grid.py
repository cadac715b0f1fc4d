"""Square grid geometry for the snake board."""

from __future__ import annotations

import string
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class Cell(NamedTuple):
    """A discrete board coordinate.

    ``x`` runs left to right and ``z`` runs back to front. The board is flat,
    so the elevation ``y`` is always zero.
    """

    x: int
    z: int

    @property
    def y(self) -> int:
        return 0

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}


class Grid:
    """Fixed-size ``N x N`` lattice.

    Logic only needs :meth:`in_bounds` and :meth:`occupancy`; the world
    placement helpers exist for the 3D view, which centers the board on the
    origin.
    """

    def __init__(self, size: int = 15) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies within the grid."""
        return 0 <= cell.x < self.size and 0 <= cell.z < self.size

    def occupancy(self, cells: Iterable[Cell]) -> np.ndarray:
        """Return a ``(z, x)`` boolean mask marking the given cells."""
        mask = np.zeros((self.size, self.size), dtype=bool)
        for cell in cells:
            if self.in_bounds(cell):
                mask[cell.z, cell.x] = True
        return mask

    def free_cells(self, occupied: Iterable[Cell]) -> list[Cell]:
        """Return unoccupied cells in row-major ``(z, x)`` order."""
        zs, xs = np.where(~self.occupancy(occupied))
        return [Cell(x, z) for z, x in zip(zs.tolist(), xs.tolist(), strict=True)]

    def cell_to_world(
        self, cell: Cell, elevation: float = 0.0,
    ) -> tuple[float, float, float]:
        """Map a cell to its ``(x, y, z)`` world placement."""
        half = self.size / 2
        return cell.x - half, cell.y + elevation, cell.z - half

    def world_to_cell(self, wx: float, wz: float) -> Cell:
        """Map a world position back to the nearest cell."""
        half = self.size / 2
        return Cell(int(np.floor(wx + half + 0.5)), int(np.floor(wz + half + 0.5)))

    def row_label(self, z: int) -> str:
        """Board numbering along z: ``1..N``."""
        return str(z + 1)

    def column_label(self, x: int) -> str:
        """Board lettering along x: ``A..Z``, then ``AA, AB, ...``."""
        label = ""
        n = x + 1
        while n > 0:
            n, rem = divmod(n - 1, 26)
            label = string.ascii_uppercase[rem] + label
        return label

    def to_dict(self) -> dict:
        return {"size": self.size}
