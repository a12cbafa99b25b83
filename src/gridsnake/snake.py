# snake.py
from __future__ import annotations
from collections import deque
from itertools import islice
from typing import Deque, Iterator, Tuple
import random

from .config import GRID_W, GRID_H, Direction

Cell = Tuple[int, int]


def in_bounds(x: int, y: int) -> bool:
    """Check if a cell is inside the grid."""
    return 0 <= x < GRID_W and 0 <= y < GRID_H


# ---------- Snake ----------
class Snake:
    """
    Head-first body of grid cells plus the current heading.

    The body is a deque so a move is a push at the front and (unless the
    snake grew) a pop at the back.
    """

    def __init__(self, start: Cell):
        assert in_bounds(*start), f"Start cell {start} is off the grid"
        self.body: Deque[Cell] = deque([start])
        self.direction = Direction.RIGHT

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    @property
    def head(self) -> Cell:
        return self.body[0]

    def projected_head(self) -> Cell:
        """Where the head would go on the next move, ignoring the walls."""
        hx, hy = self.head
        return (hx + self.direction.dx, hy + self.direction.dy)

    def set_direction(self, requested: Direction) -> bool:
        """Change heading unless it is a 180° turn. Returns True if accepted."""
        if requested is self.direction.opposite:
            return False
        self.direction = requested
        return True

    def advance(self, grew: bool) -> None:
        """
        Move one cell along the heading. The new head is clamped to the grid,
        so running into a wall leaves that axis unchanged. Keeps the tail when
        `grew` is True.
        """
        nx, ny = self.projected_head()
        nx = min(max(nx, 0), GRID_W - 1)
        ny = min(max(ny, 0), GRID_H - 1)

        self.body.appendleft((nx, ny))
        if not grew:
            self.body.pop()

    def has_self_collision(self) -> bool:
        head = self.body[0]
        return any(segment == head for segment in islice(self.body, 1, None))


# ---------- Food ----------
class Food:
    """A single piece of food. Placement ignores the snake's cells."""

    def __init__(self, position: Cell):
        self.position = position

    @classmethod
    def spawn(cls, rng: random.Random) -> Food:
        return cls(_random_cell(rng))

    def respawn(self, rng: random.Random) -> None:
        self.position = _random_cell(rng)


def _random_cell(rng: random.Random) -> Cell:
    return (rng.randrange(GRID_W), rng.randrange(GRID_H))
