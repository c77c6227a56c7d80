"""Food (frog) placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from frog_snake.errors import SpawnSpaceExhaustedError

if TYPE_CHECKING:
    from frog_snake.grid import Cell, Grid

logger = logging.getLogger(__name__)

# Rejection-sampling attempts allowed per grid cell before giving up.
_ATTEMPTS_PER_CELL = 50


class FoodSpawner:
    """Places the single food cell on a free grid cell.

    Draws uniformly random cells and retries while the draw lands on the
    snake. The occupied set is normally tiny compared with the grid, so
    this terminates quickly; an attempt cap turns a (near) full board into
    :class:`SpawnSpaceExhaustedError` instead of a hang.
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self.position: Cell | None = None

    def respawn(self, occupied_cells: Iterable[Cell], grid: Grid) -> Cell:
        """Pick a new food cell outside *occupied_cells* and return it."""
        occupied = {tuple(c) for c in occupied_cells if grid.in_bounds(c)}
        if len(occupied) >= grid.cell_count:
            logger.error("Cannot place food: all %d cells are occupied.", grid.cell_count)
            raise SpawnSpaceExhaustedError("Every grid cell is occupied by the snake.")

        limit = self.max_attempts or grid.cell_count * _ATTEMPTS_PER_CELL
        self.position = None
        for _ in range(limit):
            x, y = self.rng.integers(0, grid.size, size=2).tolist()
            if (x, y) not in occupied:
                self.position = (x, y)
                return self.position

        logger.error(
            "Cannot place food after %d attempts (%d/%d cells occupied).",
            limit, len(occupied), grid.cell_count,
        )
        raise SpawnSpaceExhaustedError(f"No free cell found after {limit} attempts.")

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"position": list(self.position) if self.position is not None else None}
