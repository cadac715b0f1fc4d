"""Tests for headings and snake movement."""

import pytest

from snake_master.grid import Cell
from snake_master.snake import (
    Direction,
    advance,
    direction_for_key,
    is_contiguous,
    next_head,
)


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite == Direction.DOWN
        assert Direction.LEFT.opposite == Direction.RIGHT

    def test_reverse_detection(self):
        assert Direction.LEFT.is_reverse_of(Direction.RIGHT)
        assert not Direction.UP.is_reverse_of(Direction.RIGHT)
        assert not Direction.RIGHT.is_reverse_of(Direction.RIGHT)

    def test_parse(self):
        assert Direction.parse("up") == Direction.UP
        assert Direction.parse(" Right ") == Direction.RIGHT
        assert Direction.parse(Direction.DOWN) == Direction.DOWN

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.parse("sideways")

    def test_parse_non_string(self):
        with pytest.raises(ValueError, match="must be a name"):
            Direction.parse(3)


class TestKeyBindings:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("ArrowUp", Direction.UP),
            ("w", Direction.UP),
            ("S", Direction.DOWN),
            ("arrowleft", Direction.LEFT),
            ("d", Direction.RIGHT),
        ],
    )
    def test_bound_keys(self, key, expected):
        assert direction_for_key(key) == expected

    def test_unbound_key(self):
        assert direction_for_key("q") is None


class TestMovement:
    def test_next_head_right(self):
        assert next_head((Cell(7, 7),), Direction.RIGHT) == Cell(8, 7)

    def test_next_head_up_decreases_z(self):
        assert next_head((Cell(7, 7),), Direction.UP) == Cell(7, 6)

    def test_next_head_does_not_mutate(self):
        body = [Cell(5, 5), Cell(4, 5)]
        next_head(body, Direction.DOWN)
        assert body == [Cell(5, 5), Cell(4, 5)]

    def test_advance_without_growth(self):
        body = (Cell(5, 5), Cell(4, 5), Cell(3, 5))
        moved = advance(body, Cell(6, 5))
        assert moved == (Cell(6, 5), Cell(5, 5), Cell(4, 5))

    def test_advance_with_growth(self):
        body = (Cell(5, 5),)
        moved = advance(body, Cell(6, 5), grow=True)
        assert moved == (Cell(6, 5), Cell(5, 5))

    def test_single_cell_moves(self):
        assert advance((Cell(5, 5),), Cell(5, 6)) == (Cell(5, 6),)


class TestContiguity:
    def test_single_cell(self):
        assert is_contiguous([Cell(0, 0)])

    def test_chain(self):
        assert is_contiguous([Cell(5, 5), Cell(6, 5), Cell(6, 6)])

    def test_diagonal_gap(self):
        assert not is_contiguous([Cell(5, 5), Cell(6, 6)])
