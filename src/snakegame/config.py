from __future__ import annotations

WINDOW_WIDTH, WINDOW_HEIGHT = 500, 500
CELL_SIZE = 20
ROWS = WINDOW_HEIGHT // CELL_SIZE
COLS = WINDOW_WIDTH // CELL_SIZE
FPS = 60

# Minimum wall-clock time between two state ticks, independent of FPS.
TICK_INTERVAL_MS = 120

# (row, col) cells, head first.
START_SNAKE = ((15, 15), (15, 16))
START_DIRECTION = "LEFT"

HIGH_SCORE_FILE = "score.dat"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (120, 120, 120)
RED = (255, 17, 0)
LIGHT_BLUE = (173, 216, 230)

FONT_SIZE = 28
LINE_HEIGHT = 30

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
