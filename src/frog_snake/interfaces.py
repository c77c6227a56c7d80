"""Collaborator protocols the engine talks to."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from frog_snake.session import Snapshot


@runtime_checkable
class Renderer(Protocol):
    """Draws the board. Called at (re)start, once per tick, and on game over."""

    def render(self, snapshot: Snapshot) -> None: ...


@runtime_checkable
class ScoreSink(Protocol):
    """Displays the score and the game-over banner."""

    def update_score(self, score: int) -> None: ...

    def show_game_over(self) -> None: ...

    def hide_game_over(self) -> None: ...


class TickScheduler(Protocol):
    """Cancellable periodic driver of ``GameEngine.tick``.

    ``start`` must cancel any running driver before installing a new one so
    two tick streams never overlap.
    """

    @property
    def running(self) -> bool: ...

    def start(self, interval_ms: int, callback: Callable[[], object]) -> None: ...

    def restart(self, interval_ms: int) -> None: ...

    def stop(self) -> None: ...
