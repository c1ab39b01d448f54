"""Game state: ticking, scoring, food effects, pausing and game over."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Protocol

from snakegrid.config import (
    CELL_X,
    CELL_Y,
    DEFAULT_DIFFICULTY,
    DEFAULT_MAP,
    MAP_NAMES,
    UP,
    map_walls,
    tick_interval,
)
from snakegrid.scores import ScoreManager
from snakegrid.snake import MoveResult, Point, Snake

BONUS_FOOD = 9
SHRINK_FOOD = 10
INVINCIBLE_FOOD = 11
FOOD_KINDS = 12

INVINCIBLE_MS = 10000
PAUSED_TEXT = "Game paused. Press space to continue."


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Status(IntEnum):
    """State of the game loop."""

    RUNNING = 0
    IDLE = 1
    PAUSED = 2


@dataclass(frozen=True)
class GameOver:
    """What ended a game, with the score and the map's previous best."""

    reason: MoveResult
    score: int
    high_score: int
    new_record: bool
    message: str


class Game:
    """One snake game with difficulty, map choice and per-map high scores."""

    def __init__(
        self,
        scores: Optional[ScoreManager] = None,
        rng: Optional[_RandomSource] = None,
    ) -> None:
        self.scores = scores if scores is not None else ScoreManager()
        self.scores.load()
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake()
        self.status = Status.IDLE
        self.difficulty = DEFAULT_DIFFICULTY
        self.new_map_id = DEFAULT_MAP
        self.map_id = DEFAULT_MAP
        self.new_dir = UP
        self.score = 0
        self.inv_count = 0
        self.food: Point = (0, 0)
        self.food_type = 0
        self.label = ""

    @property
    def interval(self) -> int:
        """Tick length in milliseconds for the current difficulty."""
        return tick_interval(self.difficulty)

    def map_name(self) -> str:
        """Name of the map being played, as used for high scores."""
        if 0 <= self.map_id < len(MAP_NAMES):
            return MAP_NAMES[self.map_id]
        return "Unknown"

    def make_food(self) -> None:
        """Pick a food kind and place it on a cell the snake does not occupy."""
        self.food_type = self.rng.randrange(FOOD_KINDS)
        while True:
            self.food = (self.rng.randrange(CELL_X), self.rng.randrange(CELL_Y))
            if not self.snake.contains(self.food):
                break

    def start(self) -> None:
        """Begin a new game on the selected map."""
        if self.status is not Status.IDLE:
            raise RuntimeError("a game is already in progress")
        self.make_food()
        self.status = Status.RUNNING
        self.score = 0
        self.inv_count = 0
        self.food_type = 0
        self.map_id = self.new_map_id
        self.snake.reset()
        self.label = "Score: 0"

    def tick(self) -> Optional[GameOver]:
        """Advance the game by one step; return a GameOver when it ends."""
        if self.status is not Status.RUNNING:
            return None
        if self.inv_count:
            self.inv_count -= 1
        self.snake.turn(self.new_dir)

        result = self.snake.move(self.food, self.map_id, self.inv_count != 0)

        if result is MoveResult.ATE_FOOD:
            self._apply_food_effect()
            self.make_food()
            self.score += self.difficulty
            self.label = f"Score: {self.score}"
        elif not self.inv_count and result in (MoveResult.HIT_SELF, MoveResult.HIT_WALL):
            return self._finish(result)
        return None

    def _apply_food_effect(self) -> None:
        if self.food_type == BONUS_FOOD:
            self.score += self.difficulty * (self.difficulty - 1)
        if self.food_type == SHRINK_FOOD:
            remove = self.rng.randrange(4) + 1
            body = self.snake.body
            while remove and len(body) > 2:
                body.pop()
                remove -= 1
        if self.food_type == INVINCIBLE_FOOD:
            self.inv_count = INVINCIBLE_MS // self.interval

    def _finish(self, reason: MoveResult) -> GameOver:
        name = self.map_name()
        best = self.scores.high_score(name)
        new_record = self.score > best
        if new_record:
            self.scores.update(name, self.score)
        prefix = "You hit yourself!\n" if reason is MoveResult.HIT_SELF else "You hit the wall!\n"
        outcome = GameOver(
            reason=reason,
            score=self.score,
            high_score=best,
            new_record=new_record,
            message=prefix + self.label,
        )
        self.status = Status.IDLE
        self.snake.clear()
        self.label = ""
        return outcome

    def steer(self, direction: int) -> None:
        """Request a new direction (0 up, 1 down, 2 left, 3 right)."""
        if direction not in range(4):
            raise ValueError(f"unknown direction: {direction}")
        self.new_dir = direction

    def toggle_pause(self) -> Status:
        """Pause a running game or resume a paused one; return the new status."""
        if self.status is Status.RUNNING:
            self.label = PAUSED_TEXT
            self.status = Status.PAUSED
        elif self.status is Status.PAUSED:
            self.label = f"Score: {self.score}"
            self.status = Status.RUNNING
        return self.status

    def set_difficulty(self, level: int) -> None:
        """Choose the difficulty (1-4) for the next game."""
        tick_interval(level)
        if self.status is not Status.IDLE:
            raise RuntimeError("difficulty cannot change during a game")
        self.difficulty = level

    def set_map(self, map_id: int) -> None:
        """Choose the map for the next game."""
        map_walls(map_id)
        if self.status is not Status.IDLE:
            raise RuntimeError("map cannot change during a game")
        self.new_map_id = map_id