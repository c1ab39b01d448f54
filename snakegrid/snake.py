"""The snake model: body, direction and movement on the board."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Tuple

from snakegrid.config import (
    CELL_X,
    CELL_Y,
    DOWN,
    RIGHT,
    SNAKE_INIT_DIR,
    SNAKE_INIT_LEN,
    map_walls,
)

Point = Tuple[int, int]

_STEPS: tuple[Point, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class MoveResult(IntEnum):
    """Outcome of a single step."""

    OK = 0
    HIT_SELF = 1
    HIT_WALL = 2
    ATE_FOOD = 3


class Snake:
    """A snake made of grid cells; the head is the first element of ``body``."""

    def __init__(self) -> None:
        self.body: deque[Point] = deque()
        self.direction = SNAKE_INIT_DIR
        self.cut_tail = 0
        self.clear()

    def clear(self) -> None:
        """Remove every segment and restore the initial direction."""
        self.body.clear()
        self.direction = SNAKE_INIT_DIR

    def reset(self) -> None:
        """Place a fresh snake in the middle of the board."""
        self.direction = SNAKE_INIT_DIR
        cx, cy = CELL_X // 2, CELL_Y // 2
        self.body = deque((cx, cy + i) for i in range(SNAKE_INIT_LEN))

    def turn(self, new_dir: int) -> None:
        """Change direction unless that would reverse the snake."""
        if self.direction + new_dir not in (1, 5):
            self.direction = new_dir

    def move(self, food: Point, map_id: int, invincible: bool) -> MoveResult:
        """Advance one cell, reporting walls, food and self collisions."""
        d = self.direction
        hx, hy = self.body[0]
        nx1 = hx + (d == RIGHT)
        ny1 = hy + (d == DOWN)
        nx2 = nx1 + (d < 2)
        ny2 = ny1 + (d > 1)

        if not invincible and (nx1, ny1, nx2, ny2) in _wall_set(map_id):
            return MoveResult.HIT_WALL

        dx, dy = _STEPS[d]
        head = ((hx + dx) % CELL_X, (hy + dy) % CELL_Y)
        self.body.appendleft(head)

        if head == tuple(food):
            return MoveResult.ATE_FOOD

        self.body.pop()
        if not invincible and self.body.count(head) == 2:
            return MoveResult.HIT_SELF
        return MoveResult.OK

    def check_food(self, food: Point) -> bool:
        """Return True if the head is on the food; otherwise drop the tail."""
        if self.body[0] == tuple(food):
            self.cut_tail = 0
            return True
        self.body.pop()
        return False

    def check_dead(self) -> bool:
        """Return True if the head overlaps another segment."""
        return self.body.count(self.body[0]) == 2

    def contains(self, point: Point) -> bool:
        """Return True if any segment occupies the point."""
        return tuple(point) in self.body


_WALL_SETS: dict[int, frozenset] = {}


def _wall_set(map_id: int) -> frozenset:
    walls = _WALL_SETS.get(map_id)
    if walls is None:
        walls = frozenset(tuple(w) for w in map_walls(map_id))
        _WALL_SETS[map_id] = walls
    return walls