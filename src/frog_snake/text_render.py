"""Plain-text board renderer for terminals and logs."""

from __future__ import annotations

import sys
from typing import TextIO

from frog_snake.grid import CellType, Grid
from frog_snake.session import Snapshot

_GLYPHS: dict[int, str] = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "o",
    CellType.HEAD: "@",
    CellType.FOOD: "F",
}


def format_board(grid: Grid, snapshot: Snapshot) -> str:
    """Draw *snapshot* as rows of glyphs, one line per grid row."""
    board = grid.paint(snapshot.snake_cells, snapshot.food_cell)
    return "\n".join("".join(_GLYPHS[int(v)] for v in row) for row in board)


class TextRenderer:
    """Renderer and score sink writing to a text stream.

    With ``show_board=False`` only the score line and game-over banner are
    written, which keeps long headless runs quiet.
    """

    def __init__(
        self,
        grid: Grid,
        stream: TextIO | None = None,
        show_board: bool = True,
    ) -> None:
        self.grid = grid
        self.stream = stream if stream is not None else sys.stdout
        self.show_board = show_board
        self.frames = 0
        self.last_snapshot: Snapshot | None = None

    def render(self, snapshot: Snapshot) -> None:
        self.frames += 1
        self.last_snapshot = snapshot
        if self.show_board:
            self.stream.write(format_board(self.grid, snapshot) + "\n\n")

    def update_score(self, score: int) -> None:
        self.stream.write(f"Score: {score}\n")

    def show_game_over(self) -> None:
        self.stream.write("Game Over! Press any arrow key to restart.\n")

    def hide_game_over(self) -> None:
        pass
