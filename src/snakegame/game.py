from __future__ import annotations

import logging

import pygame

from . import config
from .controls import handle_events
from .engine import SnakeEngine
from .logic import new_game
from .render import draw_frame
from .score import HighScoreFile, ScoreError

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    scores = HighScoreFile(config.HIGH_SCORE_FILE)
    try:
        scores.initialize()
    except ScoreError:
        logger.warning("high score file unavailable, scores will not be saved", exc_info=True)

    pygame.init()
    pygame.display.set_caption("Snake")
    screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
    font = pygame.font.Font(None, config.FONT_SIZE)
    clock = pygame.time.Clock()

    engine = SnakeEngine(new_game(now_ms=pygame.time.get_ticks()), scores)
    logger.info("snake started on a %dx%d grid", config.ROWS, config.COLS)

    while handle_events(engine, pygame.event.get()):
        engine.update(pygame.time.get_ticks())
        draw_frame(screen, font, engine)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    return 0
