"""Tick-driven single-player game engine."""

from __future__ import annotations

import logging

import numpy as np

from frog_snake.config import GameConfig
from frog_snake.errors import ConfigurationError
from frog_snake.food import FoodSpawner
from frog_snake.grid import Cell, Grid
from frog_snake.interfaces import Renderer, ScoreSink, TickScheduler
from frog_snake.scheduler import AsyncioTickScheduler
from frog_snake.session import GameSession, Phase, Snapshot
from frog_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake game engine driven by a periodic scheduler.

    The engine owns the grid, snake, food spawner and the current
    :class:`GameSession`. :meth:`start` (re)initialises everything and
    starts the scheduler; each scheduled :meth:`tick` advances the snake by
    one cell, then reports a :class:`Snapshot` to the renderer. Input is
    buffered by :meth:`request_direction` and applied at the next tick.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        renderer: Renderer | None = None,
        score_sink: ScoreSink | None = None,
        scheduler: TickScheduler | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.renderer = renderer
        self.score_sink = score_sink
        self.scheduler: TickScheduler = (
            scheduler if scheduler is not None else AsyncioTickScheduler()
        )
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.grid = Grid(self.config.grid_size)
        self.snake = Snake(self.grid.center(), self.config.direction)
        self.food_spawner = FoodSpawner(rng=self.rng)
        self.food: Cell | None = None
        self.session = GameSession.fresh(self.config)
        self.started = False
        self._pending: list[Direction] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.session.phase

    @property
    def game_over(self) -> bool:
        return self.session.game_over

    def start(self) -> Snapshot:
        """Begin a fresh game, replacing any previous one.

        Raises :class:`ConfigurationError` when no renderer is attached;
        the scheduler is not touched in that case.
        """
        if self.renderer is None:
            raise ConfigurationError("Cannot start a game without a renderer.")

        self.scheduler.stop()
        self.session = GameSession.fresh(self.config)
        self.snake.reset(self.grid.center(), self.config.direction)
        self._pending.clear()
        self.food = self.food_spawner.respawn(self.snake.body, self.grid)
        self.started = True

        if self.score_sink is not None:
            self.score_sink.hide_game_over()
            self.score_sink.update_score(self.session.score)
        snapshot = self.snapshot()
        self.renderer.render(snapshot)

        self.scheduler.start(self.session.tick_interval_ms, self.tick)
        logger.info(
            "Game started: grid %dx%d, interval %d ms, food at %s.",
            self.grid.size, self.grid.size, self.session.tick_interval_ms, self.food,
        )
        return snapshot

    def stop(self) -> None:
        """Halt ticking without ending the game (e.g. the viewer went away)."""
        self.scheduler.stop()

    def request_restart(self) -> bool:
        """Restart after a game over. Ignored while a game is in progress."""
        if not self.game_over:
            return False
        logger.info("Restarting after game over (final score %d).", self.session.score)
        self.start()
        return True

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def request_direction(self, direction: Direction) -> bool:
        """Queue a direction change for the next tick.

        Returns False (nothing queued) once the game is over.
        """
        if self.game_over:
            return False
        self._pending.append(direction)
        return True

    def handle_input(self, direction: Direction) -> bool:
        """Route a direction key: restart when over, else steer."""
        if self.game_over:
            return self.request_restart()
        return self.request_direction(direction)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self) -> Snapshot:
        """Advance the game by one cell and return the new snapshot."""
        if self.game_over or not self.started:
            return self.snapshot()

        session = self.session
        self._apply_pending()
        self.snake.move()
        session.ticks += 1

        if self.snake.head == self.food:
            session.score += session.points_per_food
            session.foods_eaten += 1
            if self.score_sink is not None:
                self.score_sink.update_score(session.score)
            self.food = self.food_spawner.respawn(self.snake.body, self.grid)
            self._apply_speed_boost()
        else:
            self.snake.shrink()

        hit_wall = self.snake.check_wall_collision(self.grid)
        hit_self = self.snake.check_self_collision()
        if hit_wall or hit_self:
            return self._end_game(hit_wall, hit_self)

        snapshot = self.snapshot()
        if self.renderer is not None:
            self.renderer.render(snapshot)
        return snapshot

    def _apply_pending(self) -> None:
        # The snake's lock admits at most one of these per tick.
        pending, self._pending = self._pending, []
        for direction in pending:
            self.snake.request_direction(direction)

    def _apply_speed_boost(self) -> None:
        session = self.session
        if session.speed_boost_applied or session.score < self.config.score_threshold:
            return
        session.points_per_food = self.config.bonus_points_per_food
        session.tick_interval_ms = self.config.boosted_tick_interval_ms
        session.speed_boost_applied = True
        self.scheduler.restart(session.tick_interval_ms)
        logger.info(
            "Speed increased to %d ms interval. Points per food: %d.",
            session.tick_interval_ms, session.points_per_food,
        )

    def _end_game(self, hit_wall: bool, hit_self: bool) -> Snapshot:
        self.scheduler.stop()
        self.session.phase = Phase.GAME_OVER
        snapshot = self.snapshot()
        if self.renderer is not None:
            self.renderer.render(snapshot)
        if self.score_sink is not None:
            self.score_sink.show_game_over()
        logger.info(
            "Game over at tick %d with score %d (wall=%s, self=%s).",
            self.session.ticks, self.session.score, hit_wall, hit_self,
        )
        return snapshot

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake_cells=self.snake.cells(),
            food_cell=self.food,
            score=self.session.score,
            game_over=self.game_over,
            tick=self.session.ticks,
            tick_interval_ms=self.session.tick_interval_ms,
            points_per_food=self.session.points_per_food,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        state = self.snapshot().to_dict()
        state.update(
            phase=self.session.phase.value,
            speed_boost_applied=self.session.speed_boost_applied,
            foods_eaten=self.session.foods_eaten,
            direction=self.snake.direction.name.lower(),
            grid=self.grid.to_dict(),
        )
        return state
