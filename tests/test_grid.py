"""Tests for the Grid module."""

import numpy as np
import pytest

from frog_snake.grid import CellType, Grid


class TestGridInit:
    def test_default_size(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cell_count == 400

    def test_custom_size(self):
        grid = Grid(8)
        assert grid.size == 8
        assert grid.cell_count == 64

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(3)

    def test_center(self):
        assert Grid(20).center() == (10, 10)
        assert Grid(5).center() == (2, 2)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(5)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((4, 4))
        assert grid.in_bounds((4, 0))

    def test_out_of_bounds(self):
        grid = Grid(5)
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, -1))
        assert not grid.in_bounds((5, 0))
        assert not grid.in_bounds((0, 5))


class TestGridPaint:
    def test_empty_board(self):
        board = Grid(4).paint([])
        assert board.shape == (4, 4)
        assert np.all(board == CellType.EMPTY)

    def test_paint_uses_row_major_y_x(self):
        grid = Grid(5)
        board = grid.paint([(3, 1), (3, 2)], food_cell=(0, 4))
        assert board[1, 3] == CellType.HEAD
        assert board[2, 3] == CellType.SNAKE
        assert board[4, 0] == CellType.FOOD
        assert np.count_nonzero(board) == 3

    def test_out_of_bounds_cells_skipped(self):
        grid = Grid(4)
        board = grid.paint([(-1, 0), (0, 0)])
        assert board[0, 0] == CellType.SNAKE
        assert np.count_nonzero(board) == 1


class TestGridSerialization:
    def test_to_dict(self):
        assert Grid(6).to_dict() == {"size": 6}
