from .state import Cell, Direction, GameState, Phase

__all__ = ["Cell", "Direction", "GameState", "Phase"]
