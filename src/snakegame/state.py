from __future__ import annotations

from collections import namedtuple
from enum import Enum, IntEnum

Position = tuple[int, int]
Snake = tuple[Position, ...]


class Cell(IntEnum):
    EMPTY = 0
    SNAKE = 1
    APPLE = 2


class Direction(Enum):
    # (drow, dcol)
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Phase(Enum):
    PAUSED = "paused"
    RUNNING = "running"
    GAME_OVER = "game_over"


GameState = namedtuple(
    "GameState",
    ["snake", "grid", "direction", "running", "over", "apples_eaten", "last_move_ms"],
)
# snake: tuple[(row, col)], head is first element.
# grid: read-only numpy array of Cell values, snake not drawn in.
# direction: Direction
# running: bool, toggled by pause/resume
# over: bool, one-way
# apples_eaten: int
# last_move_ms: int, clock reading of the previous tick


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
