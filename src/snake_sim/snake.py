"""Snake representation and movement logic."""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING

from snake_sim.grid import Cell

if TYPE_CHECKING:
    from snake_sim.grid import Grid

logger = logging.getLogger(__name__)

# Head first. The snake starts motionless until the first input arrives.
SPAWN_BODY: tuple[Cell, ...] = ((3, 3), (3, 2))


class Direction(enum.Enum):
    """Headings with (dx, dy) unit vectors; ``y`` grows upward."""

    UNSET = (0, 0)
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the 180° reversal of this heading (``UNSET`` maps to itself)."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UNSET: Direction.UNSET,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class MoveOutcome(enum.Enum):
    """Result of advancing the snake by one tick."""

    CONTINUED = "continued"
    ATE_FOOD = "ate_food"
    COLLIDED = "collided"


class CollisionKind(enum.Enum):
    """What the head ran into on a ``COLLIDED`` tick."""

    WALL = "wall"
    SELF = "self"


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. ``direction`` is the
    heading used on the next tick and ``pending`` holds the latest accepted
    request, committed at the start of :meth:`advance`.
    """

    def __init__(self, body: Iterable[Cell] = SPAWN_BODY) -> None:
        cells = [tuple(c) for c in body]
        if len(cells) < 2:
            raise ValueError("Snake must have at least 2 segments.")
        if len(set(cells)) != len(cells):
            raise ValueError("Snake segments must not overlap.")
        for (ax, ay), (bx, by) in zip(cells, cells[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ValueError(
                    f"Snake segments {(ax, ay)} and {(bx, by)} are not adjacent."
                )
        self.body: deque[Cell] = deque(cells)
        self.direction = Direction.UNSET
        self.pending = Direction.UNSET
        self.last_tail: Cell | None = None
        self.last_collision: CollisionKind | None = None

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def request(self, direction: Direction) -> bool:
        """Buffer a heading change, ignoring ``UNSET`` and 180° reversals.

        Returns True if the request was accepted. Later accepted requests
        overwrite earlier ones until the next tick.
        """
        if direction is Direction.UNSET or direction == self.direction.opposite():
            logger.debug(
                "Ignored direction %s while heading %s.",
                direction.name, self.direction.name,
            )
            return False
        self.pending = direction
        return True

    def next_head(self) -> Cell:
        """Compute the next head position for the current heading without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def advance(self, grid: Grid, food: Cell | None = None) -> MoveOutcome:
        """Move the snake one step forward.

        A wall or body hit leaves the snake untouched and returns
        ``COLLIDED``. The tail still counts as occupied during the body
        check even though it would vacate this tick.
        """
        self.direction = self.pending
        before = tuple(self.body)

        if self.direction is Direction.UNSET:
            return MoveOutcome.CONTINUED

        new_head = self.next_head()
        if not grid.in_bounds(new_head):
            self.last_collision = CollisionKind.WALL
            return MoveOutcome.COLLIDED
        if new_head in before:
            self.last_collision = CollisionKind.SELF
            return MoveOutcome.COLLIDED

        self.body.appendleft(new_head)
        self.last_tail = self.body.pop()
        self.last_collision = None

        if food is not None and new_head == food:
            return MoveOutcome.ATE_FOOD
        return MoveOutcome.CONTINUED

    def grow(self) -> Cell:
        """Append one segment at the cell the tail last vacated."""
        if self.last_tail is None:
            raise ValueError("Snake cannot grow before it has moved.")
        cell = self.last_tail
        self.body.append(cell)
        self.last_tail = None
        return cell

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
