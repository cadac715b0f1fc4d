"""Headings and snake movement."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from snake_master.grid import Cell


class Direction(enum.Enum):
    """Cardinal headings with ``(dx, dz)`` unit deltas.

    UP moves toward the back of the board (decreasing z).
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def is_reverse_of(self, other: Direction) -> bool:
        """True when turning from *other* to this heading is a 180° reversal."""
        return _OPPOSITES[other] is self

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        """Resolve a heading from a member or a case-insensitive name."""
        if isinstance(value, Direction):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Direction must be a name, got {value!r}.")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {value!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Keyboard bindings: arrow keys and WASD.
_KEY_BINDINGS: dict[str, Direction] = {
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Translate a key name into a heading, or ``None`` if unbound."""
    return _KEY_BINDINGS.get(key.lower())


def next_head(body: Sequence[Cell], direction: Direction) -> Cell:
    """Compute the candidate head cell one step along *direction*."""
    dx, dz = direction.value
    head = body[0]
    return Cell(head.x + dx, head.z + dz)


def advance(body: Sequence[Cell], head: Cell, grow: bool = False) -> tuple[Cell, ...]:
    """Return the body after moving onto *head*.

    The tail is kept when *grow* is set, so the snake gains one segment.
    """
    if grow:
        return (head, *body)
    return (head, *body[:-1])


def is_contiguous(body: Sequence[Cell]) -> bool:
    """Check that consecutive segments are exactly one grid step apart."""
    return all(
        abs(a.x - b.x) + abs(a.z - b.z) == 1
        for a, b in zip(body, body[1:])
    )
