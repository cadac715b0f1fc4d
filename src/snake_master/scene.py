"""World placements for the 3D view, derived from an engine snapshot."""

from __future__ import annotations

import math

from snake_master.engine import GameSnapshot
from snake_master.grid import Grid
from snake_master.snake import Direction

# Heights above the board surface.
HEAD_ELEVATION = 0.4
BODY_ELEVATION = 0.25
FOOD_ELEVATION = 0.3

_HEAD_YAW: dict[Direction, float] = {
    Direction.UP: math.pi,
    Direction.DOWN: 0.0,
    Direction.LEFT: -math.pi / 2,
    Direction.RIGHT: math.pi / 2,
}


def heading_yaw(direction: Direction) -> float:
    """Rotation about the vertical axis, in radians, for the snake's head."""
    return _HEAD_YAW[direction]


def build_scene(snapshot: GameSnapshot) -> dict:
    """Return render placements for the head, body segments and food."""
    grid = Grid(snapshot.grid_size)
    head, *body = snapshot.snake
    return {
        "head": {
            "position": grid.cell_to_world(head, HEAD_ELEVATION),
            "yaw": heading_yaw(snapshot.direction),
        },
        "body": [
            {"index": i, "position": grid.cell_to_world(cell, BODY_ELEVATION)}
            for i, cell in enumerate(body, start=1)
        ],
        "food": {"position": grid.cell_to_world(snapshot.food, FOOD_ELEVATION)},
        "labels": {
            "rows": [grid.row_label(z) for z in range(grid.size)],
            "columns": [grid.column_label(x) for x in range(grid.size)],
        },
    }
