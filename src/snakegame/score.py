"""High-score file.

The file holds a single non-negative integer as plain text. Problems reading
it are raised to the caller rather than papered over with a default, so a
corrupted file is noticed instead of silently reset.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ScoreError(Exception):
    pass


class ScoreReadError(ScoreError):
    pass


class ScoreParseError(ScoreError, ValueError):
    pass


class ScoreWriteError(ScoreError):
    pass


class HighScoreFile:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def initialize(self) -> None:
        """Create the file holding 0 if there is none yet. Existing content is left alone."""
        if self.path.exists():
            return
        logger.info("creating high score file %s", self.path)
        self.write(0)

    def read(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ScoreReadError(f"cannot read high score file {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ScoreParseError(f"high score file {self.path} is not text: {e}") from e

        raw = text.strip()
        if not (raw.isascii() and raw.isdigit()):
            raise ScoreParseError(f"high score file {self.path} does not hold a non-negative integer: {raw!r}")
        return int(raw)

    def write(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"high score must be non-negative, got {value}")
        # Swap in a complete file so an interrupted write never leaves it empty.
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(f"{value}\n", encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            raise ScoreWriteError(f"cannot write high score file {self.path}: {e}") from e

    def commit_if_higher(self, apples: int) -> bool:
        best = self.read()
        if apples <= best:
            return False
        self.write(apples)
        logger.info("new high score %d (was %d)", apples, best)
        return True
