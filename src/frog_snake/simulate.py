"""Headless game runs with random input, for smoke testing and demos."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TextIO

import numpy as np

from frog_snake.config import GameConfig
from frog_snake.engine import GameEngine
from frog_snake.scheduler import ManualTickScheduler
from frog_snake.snake import Direction
from frog_snake.text_render import TextRenderer

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Outcome of a single headless game."""

    ticks: int
    score: int
    length: int
    foods_eaten: int
    speed_boost_applied: bool
    game_over: bool
    wall_time_seconds: float

    def summary(self) -> str:
        status = "game over" if self.game_over else "still alive"
        return (
            f"Simulation: {self.ticks} ticks, score {self.score}, "
            f"length {self.length}, {self.foods_eaten} food(s), "
            f"boost={'yes' if self.speed_boost_applied else 'no'}, {status} "
            f"in {self.wall_time_seconds:.3f}s"
        )


def run_simulation(
    config: GameConfig | None = None,
    *,
    seed: int | None = None,
    max_ticks: int = 500,
    turn_probability: float = 0.3,
    stream: TextIO | None = None,
    show_board: bool = False,
) -> SimulationResult:
    """Play one game with randomly timed random turns.

    Ticks are fired by a :class:`ManualTickScheduler`, so the run takes no
    wall-clock pacing. Stops at game over or after *max_ticks*.
    """
    config = config if config is not None else GameConfig()
    rng = np.random.default_rng(seed)
    scheduler = ManualTickScheduler()
    engine = GameEngine(config, scheduler=scheduler, rng=rng)
    engine.renderer = engine.score_sink = TextRenderer(
        engine.grid, stream=stream, show_board=show_board,
    )

    start = time.perf_counter()
    engine.start()
    for _ in range(max_ticks):
        if rng.random() < turn_probability:
            engine.request_direction(_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))])
        if scheduler.advance(1) == 0:
            break
    elapsed = time.perf_counter() - start

    session = engine.session
    result = SimulationResult(
        ticks=session.ticks,
        score=session.score,
        length=len(engine.snake),
        foods_eaten=session.foods_eaten,
        speed_boost_applied=session.speed_boost_applied,
        game_over=session.game_over,
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
