"""Grid geometry for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

Cell = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes used when painting the board for renderers."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    HEAD = 3


class Grid:
    """Square game grid addressed by ``(x, y)`` cells.

    The grid itself holds no state beyond its size; the snake and food own
    their cells. :meth:`paint` produces a NumPy occupancy array indexed
    ``[y, x]`` for renderers that want a raster view.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    @property
    def cell_count(self) -> int:
        return self._size * self._size

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies within the grid."""
        x, y = cell
        return 0 <= x < self._size and 0 <= y < self._size

    def center(self) -> Cell:
        return self._size // 2, self._size // 2

    def paint(
        self,
        snake_cells: Iterable[Cell],
        food_cell: Cell | None = None,
    ) -> np.ndarray:
        """Return an int8 board with the snake and food drawn on it.

        The first snake cell is painted as the head. Cells outside the grid
        (a head that just left the board) are skipped.
        """
        board = np.zeros((self._size, self._size), dtype=np.int8)
        if food_cell is not None and self.in_bounds(food_cell):
            board[food_cell[1], food_cell[0]] = CellType.FOOD
        for i, cell in enumerate(snake_cells):
            if not self.in_bounds(cell):
                continue
            board[cell[1], cell[0]] = CellType.HEAD if i == 0 else CellType.SNAKE
        return board

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {"size": self._size}
