from __future__ import annotations

import pygame

from . import config
from .engine import SnakeEngine
from .state import Cell, Phase

CELL_COLORS = {
    Cell.EMPTY: config.WHITE,
    Cell.SNAKE: config.GREY,
    Cell.APPLE: config.RED,
}


def _high_score_text(engine: SnakeEngine) -> str:
    best = engine.high_score()
    if best is None:
        return "NO HIGH SCORE YET"
    return f"HIGH SCORE: {best}"


def _draw_lines(screen: pygame.Surface, font: pygame.font.Font, lines, color, top: int) -> None:
    center_x = screen.get_width() // 2
    for i, text in enumerate(lines):
        surf = font.render(text, True, color)
        rect = surf.get_rect(center=(center_x, top + i * config.LINE_HEIGHT))
        screen.blit(surf, rect)


def draw_grid(screen: pygame.Surface, grid) -> None:
    rows, cols = grid.shape
    for row in range(rows):
        for col in range(cols):
            rect = pygame.Rect(col * config.CELL_SIZE, row * config.CELL_SIZE, config.CELL_SIZE, config.CELL_SIZE)
            pygame.draw.rect(screen, CELL_COLORS[Cell(int(grid[row, col]))], rect)


def draw_pause_menu(screen: pygame.Surface, font: pygame.font.Font, engine: SnakeEngine) -> None:
    screen.fill(config.LIGHT_BLUE)
    lines = [
        "SNAKE",
        "MOUSE CLICK OR ENTER: PLAY/PAUSE",
        f"APPLES: {engine.state.apples_eaten}",
        _high_score_text(engine),
    ]
    _draw_lines(screen, font, lines, config.BLACK, 50)


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, engine: SnakeEngine) -> None:
    screen.fill(config.BLACK)
    lines = [
        "GAME OVER",
        f"APPLES: {engine.state.apples_eaten}",
        _high_score_text(engine),
    ]
    _draw_lines(screen, font, lines, config.WHITE, 50)


def draw_frame(screen: pygame.Surface, font: pygame.font.Font, engine: SnakeEngine) -> None:
    phase = engine.phase
    if phase is Phase.GAME_OVER:
        draw_game_over(screen, font, engine)
    elif phase is Phase.PAUSED:
        draw_pause_menu(screen, font, engine)
    else:
        draw_grid(screen, engine.drawable_grid())
