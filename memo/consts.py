from dataclasses import asdict
from fractions import Fraction
from pathlib import Path

from pydantic.dataclasses import dataclass as pydantic_dataclass

from memo.typings import DifficultyId

MATCH_POINTS = 100
COMBO_MULTIPLIER = 0.5
# Expected moves per pair for an average player; star thresholds scale it.
MOVE_BUDGET_PER_PAIR = Fraction(5, 2)
# (stars, max share of the time limit, max share of the move budget)
STAR_THRESHOLDS = (
  (3, Fraction(1, 2), Fraction(3, 5)),
  (2, Fraction(3, 4), Fraction(4, 5)),
)
MIN_STARS = 1

STORAGE_KEY_DEFAULT = "memoryGameLeaderboard"


@pydantic_dataclass(frozen=True)
class Difficulty:
  id: DifficultyId
  pair_count: int
  time_limit: int

  @property
  def tile_count(self) -> int:
    return self.pair_count * 2

  @property
  def move_budget(self) -> Fraction:
    return self.pair_count * MOVE_BUDGET_PER_PAIR


DIFFICULTIES: dict[DifficultyId, Difficulty] = {
  DifficultyId.EASY: Difficulty(id=DifficultyId.EASY, pair_count=6, time_limit=60),
  DifficultyId.MEDIUM: Difficulty(id=DifficultyId.MEDIUM, pair_count=12, time_limit=120),
  DifficultyId.HARD: Difficulty(id=DifficultyId.HARD, pair_count=18, time_limit=180),
}


def get_difficulty(difficulty_id: "DifficultyId | str") -> Difficulty | None:
  """Look up a catalog entry, returning None for unknown ids."""
  try:
    return DIFFICULTIES[DifficultyId(difficulty_id)]
  except ValueError:
    return None


@pydantic_dataclass(frozen=True)
class GameConfig:
  """Validated immutable tunables shared by every round of an engine.

  Uses pydantic's dataclass wrapper to provide runtime validation while
  retaining a light dataclass footprint.
  """
  mismatch_delay: float = 1.0
  tick_interval: float = 1.0
  leaderboard_size: int = 10
  storage_key: str = STORAGE_KEY_DEFAULT
  time_bonus_per_second: int = 10
  speed_match_window: int = 2
  streak_target: int = 3

  def __post_init__(self):
    # pydantic already ran basic type validation; now apply domain rules.
    if self.mismatch_delay <= 0:
      raise ValueError(f'mismatch_delay must be positive, got {self.mismatch_delay}')
    if self.tick_interval <= 0:
      raise ValueError(f'tick_interval must be positive, got {self.tick_interval}')
    if self.leaderboard_size < 1:
      raise ValueError(f'leaderboard_size must be at least 1, got {self.leaderboard_size}')
    if not self.storage_key:
      raise ValueError('storage_key must not be empty')

  def serialize(self) -> dict:
    return asdict(self)

  @classmethod
  def deserialize(cls, data: dict) -> 'GameConfig':
    return cls(**data)


@pydantic_dataclass(frozen=True)
class SymbolAssets:
  symbols: tuple[str, ...]

  def __post_init__(self):
    if len(set(self.symbols)) != len(self.symbols):
      raise ValueError("symbols must be distinct")

  @property
  def max_pairs(self) -> int:
    return len(self.symbols)

  @classmethod
  def load_default(cls, path: str | None = None) -> 'SymbolAssets':
    """Load the tile faces from a YAML file with a top-level `symbols` list."""
    import yaml
    p = Path(path) if path is not None else Path(__file__).parent / "assets" / "symbols.yaml"
    with p.open('r', encoding='utf8') as fh:
      j = yaml.safe_load(fh)

    return cls(symbols=tuple(str(s) for s in j.get('symbols', [])))


SYMBOL_ASSETS_DEFAULT = SymbolAssets.load_default()
