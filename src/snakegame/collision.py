from __future__ import annotations

from enum import Enum

import numpy as np

from .playfield import cell_at, in_bounds
from .state import Cell, Snake


class Collision(Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"
    APPLE = "apple"


def classify(snake: Snake, grid: np.ndarray) -> Collision:
    """Classify what the snake's head ran into.

    Bounds are checked first since an out-of-bounds head has no cell to look
    at. A head that is both inside the body and on an apple counts as SELF.
    """
    head = snake[0]
    if not in_bounds(grid, head):
        return Collision.WALL
    if head in snake[1:]:
        return Collision.SELF
    if cell_at(grid, head) is Cell.APPLE:
        return Collision.APPLE
    return Collision.NONE
