from __future__ import annotations

import pygame

from .engine import SnakeEngine
from .state import Direction

KEY_MAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
PAUSE_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
# Left, middle, right. Wheel scrolls arrive as buttons 4 and 5.
CLICK_BUTTONS = (1, 2, 3)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def handle_events(engine: SnakeEngine, events) -> bool:
    """Feed input events to the engine. Returns False once the player asked to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button in CLICK_BUTTONS:
            engine.toggle_pause()
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                return False
            if event.key in PAUSE_KEYS:
                engine.toggle_pause()
            elif event.key in KEY_MAP:
                engine.request_direction(KEY_MAP[event.key])
    return True
