from __future__ import annotations

import logging
import random

import numpy as np

from . import config, logic
from .score import HighScoreFile, ScoreError
from .state import Direction, GameState, Phase

logger = logging.getLogger(__name__)


class SnakeEngine:
    """Owns the game state and is the only thing that replaces it.

    The input adapter calls request_direction/toggle_pause, the loop calls
    update() every frame, and the renderer reads drawable_grid() and the
    counters. The score file is committed once, on the tick that ends the game.
    """

    def __init__(
        self,
        state: GameState,
        scores: HighScoreFile,
        rng: random.Random | None = None,
        interval_ms: int = config.TICK_INTERVAL_MS,
    ):
        self._state = state
        self.scores = scores
        self.rng = rng
        self.interval_ms = interval_ms
        self._high_score = self._load_high_score()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> Phase:
        return logic.phase(self._state)

    def request_direction(self, direction: Direction) -> None:
        self._state = logic.request_direction(self._state, direction)

    def toggle_pause(self) -> None:
        before = self._state
        self._state = logic.toggle_pause(before)
        if self._state is before:
            return
        if self.phase is Phase.PAUSED:
            self._high_score = self._load_high_score()
        logger.info("game %s", self.phase.value)

    def update(self, now_ms: int) -> bool:
        """Run a tick if one is due. Returns True when the state changed."""
        before = self._state
        self._state = logic.advance(before, now_ms, self.interval_ms, self.rng)
        if self._state is before:
            return False
        if self._state.over and not before.over:
            self._finish()
        return True

    def drawable_grid(self) -> np.ndarray:
        return logic.drawable_grid(self._state)

    def high_score(self) -> int | None:
        """Last known high score, None when the score file could not be read."""
        return self._high_score

    def _finish(self) -> None:
        apples = self._state.apples_eaten
        logger.info("game over with %d apples", apples)
        try:
            self.scores.commit_if_higher(apples)
        except ScoreError:
            logger.warning("could not record score %d", apples, exc_info=True)
        self._high_score = self._load_high_score()

    def _load_high_score(self) -> int | None:
        try:
            return self.scores.read()
        except ScoreError as e:
            logger.warning("high score unavailable: %s", e)
            return None
