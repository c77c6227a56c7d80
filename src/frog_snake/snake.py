"""Snake body, heading, and movement rules."""

from __future__ import annotations

import enum
import logging
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from frog_snake.grid import Cell, Grid

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Parse a logical direction name such as ``"up"``."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {name!r}.") from None

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: Direction) -> bool:
        """Two directions are opposite when their vectors sum to zero."""
        dx, dy = self.value
        ox, oy = other.value
        return dx + ox == 0 and dy + oy == 0


class Snake:
    """A snake represented as an ordered deque of ``(x, y)`` body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Each move prepends a
    new head; the engine pops the tail afterwards unless food was eaten.
    """

    def __init__(
        self,
        start_cell: Cell = (0, 0),
        direction: Direction = Direction.UP,
    ) -> None:
        self.body: deque[Cell] = deque()
        self.direction = direction
        self._direction_locked = False
        self.reset(start_cell, direction)

    def reset(self, start_cell: Cell, start_direction: Direction) -> None:
        """Collapse the snake to a single segment heading *start_direction*."""
        self.body = deque([tuple(start_cell)])
        self.direction = start_direction
        self._direction_locked = False

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    @property
    def direction_locked(self) -> bool:
        """True once a direction change was accepted since the last move."""
        return self._direction_locked

    def request_direction(self, direction: Direction) -> bool:
        """Try to change heading; at most one change is accepted per move.

        Returns False, leaving the heading untouched, for a 180° reversal or
        when a change was already accepted since the last :meth:`move`.
        """
        if self._direction_locked:
            logger.debug("Rejected %s: direction already changed this tick.", direction.name)
            return False
        if direction.is_opposite(self.direction):
            logger.debug("Rejected %s: reversal of %s.", direction.name, self.direction.name)
            return False
        self.direction = direction
        self._direction_locked = True
        return True

    def next_head(self) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def move(self) -> Cell:
        """Prepend a new head one step ahead and release the direction lock.

        The body is one segment longer afterwards; call :meth:`shrink` to
        turn the move into a plain translation.
        """
        new_head = self.next_head()
        self.body.appendleft(new_head)
        self._direction_locked = False
        return new_head

    def shrink(self) -> Cell | None:
        """Drop the tail segment and return it.

        A single-segment snake is never emptied; ``None`` is returned then.
        """
        if len(self.body) <= 1:
            return None
        return self.body.pop()

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return tuple(cell) in self.body

    def cells(self) -> tuple[Cell, ...]:
        """Return an immutable copy of the body, head first."""
        return tuple(self.body)

    def check_self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in list(self.body)[1:])

    def check_wall_collision(self, grid: Grid) -> bool:
        """Check whether the head has left the grid."""
        return not grid.in_bounds(self.head)

    def __len__(self) -> int:
        return len(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
