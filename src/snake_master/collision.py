"""Classification of a proposed head move."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from snake_master.grid import Cell


class Outcome(enum.Enum):
    """Result of moving the head onto a candidate cell."""

    WALL = "wall"
    SELF = "self"
    FOOD = "food"
    FREE = "free"

    @property
    def is_fatal(self) -> bool:
        return self in (Outcome.WALL, Outcome.SELF)


def classify(
    candidate: Cell,
    grid_size: int,
    body: Sequence[Cell],
    food: Cell,
) -> Outcome:
    """Classify the tick outcome for a head moving onto *candidate*.

    *body* is the current snake, head first. Wall and self collisions take
    precedence over food.
    """
    if not (0 <= candidate.x < grid_size and 0 <= candidate.z < grid_size):
        return Outcome.WALL

    will_grow = candidate == food

    # The tail is vacated on a plain move but stays put when the snake grows.
    full_body = frozenset(body)
    body_without_tail = frozenset(body[:-1])
    blocking = full_body if will_grow else body_without_tail

    if candidate in blocking:
        return Outcome.SELF
    if will_grow:
        return Outcome.FOOD
    return Outcome.FREE
