from __future__ import annotations

import logging
import random

import numpy as np

from .playfield import corners, has_marker, with_marker
from .state import Cell, Position, Snake

logger = logging.getLogger(__name__)


def candidate_cells(grid: np.ndarray, snake: Snake) -> list[Position]:
    """Free cells an apple may go in. Corners never qualify, they are too hard to reach."""
    blocked = set(snake) | corners(grid)
    rows, cols = grid.shape
    return [(r, c) for r in range(rows) for c in range(cols) if (r, c) not in blocked]


def place_if_absent(grid: np.ndarray, snake: Snake, rng: random.Random | None = None) -> np.ndarray:
    if has_marker(grid, Cell.APPLE):
        return grid

    candidates = candidate_cells(grid, snake)
    if not candidates:
        # Board is (nearly) full; try again next tick.
        logger.debug("no free cell for an apple, snake length %d", len(snake))
        return grid

    pos = (rng or random).choice(candidates)
    return with_marker(grid, pos, Cell.APPLE)
