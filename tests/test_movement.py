import pytest

from snakegame.movement import can_turn, grow, move, step_head
from snakegame.state import Direction

SNAKES = [
    ((2, 2), (2, 3)),
    ((2, 2), (3, 2), (3, 3)),
    ((1, 1), (1, 2), (1, 3), (2, 3)),
]


def test_step_head() -> None:
    assert step_head((2, 2), Direction.UP) == (1, 2)
    assert step_head((2, 2), Direction.DOWN) == (3, 2)
    assert step_head((2, 2), Direction.LEFT) == (2, 1)
    assert step_head((2, 2), Direction.RIGHT) == (2, 3)


@pytest.mark.parametrize("snake", SNAKES)
@pytest.mark.parametrize("direction", list(Direction))
def test_move_keeps_length_or_rejects_backtrack(snake, direction) -> None:
    moved = move(snake, direction)

    if step_head(snake[0], direction) == snake[1]:
        assert moved is None
    else:
        assert len(moved) == len(snake)
        assert moved[0] == step_head(snake[0], direction)
        assert moved[1:] == snake[:-1]


@pytest.mark.parametrize("snake", SNAKES)
@pytest.mark.parametrize("direction", list(Direction))
def test_grow_adds_one_cell_and_keeps_tail(snake, direction) -> None:
    grown = grow(snake, direction)

    assert len(grown) == len(snake) + 1
    assert grown[-1] == snake[-1]
    assert grown[0] == step_head(snake[0], direction)


def test_reversing_into_the_neck_is_refused() -> None:
    snake = ((1, 1), (1, 2), (1, 3))

    assert not can_turn(snake, Direction.RIGHT)
    assert can_turn(snake, Direction.UP)
