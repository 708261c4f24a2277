"""Top-level package exports for the memo project.

Expose a small, stable API so callers can `from memo import Engine, new_deck`.
"""

from .consts import DIFFICULTIES, GameConfig
from .engine import Engine
from .scheduler import AsyncioScheduler, VirtualScheduler
from .state import RoundState, new_deck
from .store import FileStorage, MemoryStorage, ScoreStore
from .surface import ConsoleSurface, Surface
from .typings import Achievement, DifficultyId, Outcome, ScoreEntry, Tile, TurnPhase

__all__ = [
  "DIFFICULTIES", "GameConfig", "Engine", "AsyncioScheduler", "VirtualScheduler",
  "RoundState", "new_deck", "FileStorage", "MemoryStorage", "ScoreStore",
  "ConsoleSurface", "Surface", "Achievement", "DifficultyId", "Outcome",
  "ScoreEntry", "Tile", "TurnPhase",
]
