"""Board geometry, timing and wall layouts for the snake game."""

from __future__ import annotations

from typing import NamedTuple

SNAKE_INIT_LEN = 2
SNAKE_INIT_DIR = 0

WINDOW_X = 1024
WINDOW_Y = 768

GAME_X = 1000
GAME_Y = 650

DELTA_X = 10
DELTA_Y = 50

CELL = 25
SCELL = 15

CELL_X = GAME_X // CELL
CELL_Y = GAME_Y // CELL

DEFAULT_DIFFICULTY = 4
DEFAULT_MAP = 0

SCORE_LABEL_SIZE = 12

# Directions as used by the snake model.
UP = 0
DOWN = 1
LEFT = 2
RIGHT = 3

DIFFICULTY_INTERVALS = (0, 120, 100, 75, 50)
MAP_NAMES = ("Borderless", "Classic_Box", "Trail_Station")


class Wall(NamedTuple):
    """A unit wall segment between two grid corners."""

    x1: int
    y1: int
    x2: int
    y2: int


def _horizontal(y: int, start: int, stop: int) -> list[Wall]:
    return [Wall(x, y, x + 1, y) for x in range(start, stop)]


def _vertical(x: int, start: int, stop: int) -> list[Wall]:
    return [Wall(x, y, x, y + 1) for y in range(start, stop)]


def _classic_box() -> tuple[Wall, ...]:
    return tuple(
        _horizontal(0, 0, CELL_X)
        + _horizontal(CELL_Y, 0, CELL_X)
        + _vertical(0, 0, CELL_Y)
        + _vertical(CELL_X, 0, CELL_Y)
    )


def _trail_station() -> tuple[Wall, ...]:
    walls = [
        Wall(3, 3, 4, 3), Wall(4, 3, 5, 3), Wall(5, 3, 6, 3),
        Wall(3, 3, 3, 4), Wall(3, 4, 3, 5), Wall(3, 5, 3, 6),

        Wall(37, 3, 37, 4), Wall(37, 4, 37, 5), Wall(37, 5, 37, 6),
        Wall(36, 3, 37, 3), Wall(35, 3, 36, 3), Wall(34, 3, 35, 3),

        Wall(3, 23, 4, 23), Wall(4, 23, 5, 23), Wall(5, 23, 6, 23),
        Wall(3, 22, 3, 23), Wall(3, 21, 3, 22), Wall(3, 20, 3, 21),

        Wall(36, 23, 37, 23), Wall(35, 23, 36, 23), Wall(34, 23, 35, 23),
        Wall(37, 22, 37, 23), Wall(37, 21, 37, 22), Wall(37, 20, 37, 21),
    ]
    walls += _horizontal(10, 6, 34)
    walls += _horizontal(16, 6, 34)
    return tuple(walls)


_MAPS: tuple[tuple[Wall, ...], ...] = ((), _classic_box(), _trail_station())


def map_walls(map_id: int) -> tuple[Wall, ...]:
    """Return the wall segments of the given map."""
    if not 0 <= map_id < len(_MAPS):
        raise ValueError(f"unknown map id: {map_id}")
    return _MAPS[map_id]


def tick_interval(difficulty: int) -> int:
    """Return the tick length in milliseconds for a difficulty level (1-4)."""
    if not 1 <= difficulty < len(DIFFICULTY_INTERVALS):
        raise ValueError(f"unknown difficulty: {difficulty}")
    return DIFFICULTY_INTERVALS[difficulty]