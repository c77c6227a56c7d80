"""Frog Snake: single-player snake game engine."""

from frog_snake.config import GameConfig
from frog_snake.engine import GameEngine
from frog_snake.errors import ConfigurationError, SpawnSpaceExhaustedError
from frog_snake.food import FoodSpawner
from frog_snake.grid import Grid
from frog_snake.session import GameSession, Phase, Snapshot
from frog_snake.snake import Direction, Snake

__all__ = [
    "ConfigurationError",
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameSession",
    "Grid",
    "Phase",
    "Snake",
    "Snapshot",
    "SpawnSpaceExhaustedError",
]
