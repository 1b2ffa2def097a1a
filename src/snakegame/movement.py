from __future__ import annotations

from .state import Direction, Position, Snake, add_vectors


def step_head(pos: Position, direction: Direction) -> Position:
    return add_vectors(pos, direction.value)


def move(snake: Snake, direction: Direction) -> Snake | None:
    """Advance one cell, dropping the tail. None if the head would back into the neck."""
    new_head = step_head(snake[0], direction)
    if new_head == snake[1]:
        return None
    return (new_head,) + tuple(snake[:-1])


def grow(snake: Snake, direction: Direction) -> Snake:
    """Advance one cell keeping the tail."""
    return (step_head(snake[0], direction),) + tuple(snake)


def can_turn(snake: Snake, direction: Direction) -> bool:
    return move(snake, direction) is not None
