"""Fixed-size grid of cell markers.

Grids are numpy arrays flagged read-only. Every update returns a fresh array,
so a grid handed to the renderer can never change under it.
"""

from __future__ import annotations

import numpy as np

from .state import Cell, Position


class OutOfRange(IndexError):
    """Raised for a position outside the grid. Callers are expected to check first."""


def _freeze(grid: np.ndarray) -> np.ndarray:
    grid.flags.writeable = False
    return grid


def empty_grid(rows: int, cols: int) -> np.ndarray:
    if rows <= 0 or cols <= 0:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
    return _freeze(np.full((rows, cols), Cell.EMPTY, dtype=np.int8))


def in_bounds(grid: np.ndarray, pos: Position) -> bool:
    rows, cols = grid.shape
    row, col = pos
    return 0 <= row < rows and 0 <= col < cols


def _check(grid: np.ndarray, pos: Position) -> None:
    # numpy would silently wrap negative indices.
    if not in_bounds(grid, pos):
        raise OutOfRange(f"position {pos} outside {grid.shape[0]}x{grid.shape[1]} grid")


def cell_at(grid: np.ndarray, pos: Position) -> Cell:
    _check(grid, pos)
    return Cell(int(grid[pos]))


def with_marker(grid: np.ndarray, pos: Position, marker: Cell) -> np.ndarray:
    _check(grid, pos)
    updated = grid.copy()
    updated[pos] = marker
    return _freeze(updated)


def clear_marker(grid: np.ndarray, marker: Cell) -> np.ndarray:
    return _freeze(np.where(grid == marker, Cell.EMPTY, grid).astype(np.int8))


def has_marker(grid: np.ndarray, marker: Cell) -> bool:
    return bool(np.any(grid == marker))


def marker_positions(grid: np.ndarray, marker: Cell) -> list[Position]:
    return [(int(r), int(c)) for r, c in np.argwhere(grid == marker)]


def corners(grid: np.ndarray) -> set[Position]:
    last_row, last_col = grid.shape[0] - 1, grid.shape[1] - 1
    return {(0, 0), (0, last_col), (last_row, 0), (last_row, last_col)}


def with_markers(grid: np.ndarray, positions: list[Position], marker: Cell) -> np.ndarray:
    for pos in positions:
        _check(grid, pos)
    updated = grid.copy()
    if positions:
        rows, cols = zip(*positions)
        updated[list(rows), list(cols)] = marker
    return _freeze(updated)
