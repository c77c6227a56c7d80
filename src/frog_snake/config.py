"""Game configuration."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from frog_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunable game parameters.

    Supports JSON serialization so a setup can be reproduced from a file.
    ``cell_size`` only matters to pixel renderers.
    """

    # Board
    grid_size: int = 20
    cell_size: int = 20
    start_direction: str = "up"

    # Pacing
    initial_tick_interval_ms: int = 200
    min_tick_interval_ms: int = 50
    speed_multiplier: float = 1.5

    # Scoring
    initial_points_per_food: int = 10
    bonus_points_per_food: int = 50
    score_threshold: int = 100

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if self.min_tick_interval_ms < 1:
            raise ValueError("min_tick_interval_ms must be at least 1.")
        if self.initial_tick_interval_ms < self.min_tick_interval_ms:
            raise ValueError(
                "initial_tick_interval_ms must not be below min_tick_interval_ms."
            )
        if self.speed_multiplier < 1.0:
            raise ValueError("speed_multiplier must be at least 1.0.")
        if self.initial_points_per_food < 1 or self.bonus_points_per_food < 1:
            raise ValueError("Points per food must be at least 1.")
        if self.score_threshold < 0:
            raise ValueError("score_threshold must be >= 0.")
        Direction.from_name(self.start_direction)

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.start_direction)

    @property
    def boosted_tick_interval_ms(self) -> int:
        """Tick interval after the one-time speed boost."""
        return max(
            self.min_tick_interval_ms,
            int(self.initial_tick_interval_ms / self.speed_multiplier),
        )

    def replace(self, **overrides) -> GameConfig:
        """Return a copy with *overrides* applied; ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
