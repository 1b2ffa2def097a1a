"""Pure game-state transitions.

Every function takes a GameState and returns a new one; nothing here touches
pygame, the clock or the score file.
"""

from __future__ import annotations

import random

import numpy as np

from . import config
from .apples import place_if_absent
from .collision import Collision, classify
from .movement import can_turn, grow, move
from .playfield import cell_at, clear_marker, empty_grid, in_bounds, with_markers
from .state import Cell, Direction, Functor, GameState, Phase, Snake


def _validate_snake(snake: Snake, rows: int, cols: int) -> None:
    if len(snake) < 2:
        raise ValueError("snake needs at least two cells")
    if len(set(snake)) != len(snake):
        raise ValueError("snake overlaps itself")
    for row, col in snake:
        if not (0 <= row < rows and 0 <= col < cols):
            raise ValueError(f"snake cell {(row, col)} outside {rows}x{cols} grid")
    for (r1, c1), (r2, c2) in zip(snake, snake[1:]):
        if abs(r1 - r2) + abs(c1 - c2) != 1:
            raise ValueError(f"snake cells {(r1, c1)} and {(r2, c2)} are not adjacent")


def new_game(
    rows: int = config.ROWS,
    cols: int = config.COLS,
    snake: Snake = config.START_SNAKE,
    direction: Direction = Direction[config.START_DIRECTION],
    now_ms: int = 0,
) -> GameState:
    snake = tuple(tuple(p) for p in snake)
    _validate_snake(snake, rows, cols)
    return GameState(
        snake=snake,
        grid=empty_grid(rows, cols),
        direction=direction,
        running=False,
        over=False,
        apples_eaten=0,
        last_move_ms=now_ms,
    )


def phase(state: GameState) -> Phase:
    if state.over:
        return Phase.GAME_OVER
    return Phase.RUNNING if state.running else Phase.PAUSED


def toggle_pause(state: GameState) -> GameState:
    if state.over:
        return state
    return state._replace(running=not state.running)


def request_direction(state: GameState, direction: Direction) -> GameState:
    # Checked against the current body; takes effect on the next tick.
    if state.over or not can_turn(state.snake, direction):
        return state
    return state._replace(direction=direction)


def advance_snake(state: GameState) -> GameState:
    moved = move(state.snake, state.direction)
    if moved is None:
        return state
    return state._replace(snake=moved)


def place_apple(state: GameState, rng: random.Random | None = None) -> GameState:
    return state._replace(grid=place_if_absent(state.grid, state.snake, rng))


def resolve_collision(state: GameState, previous: Snake, rng: random.Random | None = None) -> GameState:
    collision = classify(state.snake, state.grid)

    if collision is Collision.APPLE:
        # The tail dropped by this tick's move comes back.
        snake = grow(previous, state.direction)
        grid = place_if_absent(clear_marker(state.grid, Cell.APPLE), snake, rng)
        return state._replace(snake=snake, grid=grid, apples_eaten=state.apples_eaten + 1)

    if collision is Collision.SELF:
        assert cell_at(state.grid, state.snake[0]) is not Cell.APPLE, "apple under snake body"
        return state._replace(over=True, running=False)

    if collision is Collision.WALL:
        return state._replace(over=True, running=False)

    return state


def tick(state: GameState, rng: random.Random | None = None) -> GameState:
    """Run one game step: move, make sure an apple exists, resolve what the head hit."""
    if state.over:
        return state
    return (
        Functor(state)
        .map(advance_snake)
        .map(lambda s: place_apple(s, rng))
        .map(lambda s: resolve_collision(s, state.snake, rng))
        .get()
    )


def advance(
    state: GameState,
    now_ms: int,
    interval_ms: int = config.TICK_INTERVAL_MS,
    rng: random.Random | None = None,
) -> GameState:
    """Tick only while running and once at least interval_ms passed since the last tick."""
    if phase(state) is not Phase.RUNNING or now_ms - state.last_move_ms < interval_ms:
        return state
    return tick(state._replace(last_move_ms=now_ms), rng)


def drawable_grid(state: GameState) -> np.ndarray:
    # A head that ran into the wall has no cell to draw.
    visible = [pos for pos in state.snake if in_bounds(state.grid, pos)]
    return with_markers(state.grid, visible, Cell.SNAKE)
