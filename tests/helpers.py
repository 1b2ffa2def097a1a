from snakegame import playfield
from snakegame.state import Cell


def make_grid(rows: int = 5, cols: int = 5, apple=None):
    grid = playfield.empty_grid(rows, cols)
    if apple is not None:
        grid = playfield.with_marker(grid, apple, Cell.APPLE)
    return grid
