"""Per-game mutable session record and render snapshots."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from frog_snake.config import GameConfig
from frog_snake.grid import Cell


class Phase(str, enum.Enum):
    """Lifecycle phases of a single game."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameSession:
    """Everything about one game that changes while it is played.

    ``score`` and ``points_per_food`` only grow, ``tick_interval_ms`` only
    shrinks (once, via the speed boost). A restart replaces the whole record.
    """

    score: int
    tick_interval_ms: int
    points_per_food: int
    speed_boost_applied: bool = False
    phase: Phase = Phase.PLAYING
    ticks: int = 0
    foods_eaten: int = 0

    @classmethod
    def fresh(cls, config: GameConfig) -> GameSession:
        return cls(
            score=0,
            tick_interval_ms=config.initial_tick_interval_ms,
            points_per_food=config.initial_points_per_food,
        )

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the board handed to renderers after each tick."""

    snake_cells: tuple[Cell, ...]
    food_cell: Cell | None
    score: int
    game_over: bool
    tick: int
    tick_interval_ms: int
    points_per_food: int

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dict."""
        return {
            "snake": [list(c) for c in self.snake_cells],
            "food": list(self.food_cell) if self.food_cell is not None else None,
            "score": self.score,
            "game_over": self.game_over,
            "tick": self.tick,
            "tick_interval_ms": self.tick_interval_ms,
            "points_per_food": self.points_per_food,
        }
