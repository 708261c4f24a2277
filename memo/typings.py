from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.dataclasses import dataclass as pydantic_dataclass


class DifficultyId(Enum):
  """Identifiers of the fixed difficulty catalog.

  Values are the lowercase names used in serialization and by callers
  selecting a difficulty.
  """
  EASY = "easy"
  MEDIUM = "medium"
  HARD = "hard"

  def __str__(self) -> str:
    return self.value


class TurnPhase(Enum):
  IDLE = "idle"
  ONE_FLIPPED = "one_flipped"
  RESOLVING = "resolving"
  ENDED = "ended"

  def __str__(self) -> str:
    return self.value


class Outcome(Enum):
  WIN = "win"
  TIMEOUT = "timeout"

  def __str__(self) -> str:
    return self.value


class ActionType(Enum):
  FLIP = "flip"
  TICK = "tick"
  SETTLE = "settle"

  def __str__(self) -> str:
    return self.value


_ACHIEVEMENT_TEXT = {
  "speed_match": ("Speed Demon", "Match a pair in under 2 seconds"),
  "clean_opener": ("Perfect Start", "Find first pair without mistakes"),
  "streak_bonus": ("Combo Master", "Match 3 pairs in a row"),
}


class Achievement(Enum):
  """Per-round achievements. Declaration order is the reporting order."""
  SPEED_MATCH = "speed_match"
  CLEAN_OPENER = "clean_opener"
  STREAK_BONUS = "streak_bonus"

  @property
  def title(self) -> str:
    return _ACHIEVEMENT_TEXT[self.value][0]

  @property
  def description(self) -> str:
    return _ACHIEVEMENT_TEXT[self.value][1]

  def __str__(self) -> str:
    return f"🏆 {self.title}: {self.description}"


@pydantic_dataclass(frozen=True)
class Tile:
  """One grid cell of the round.

  - `id` is the tile's position in the deck, stable for the round.
  - `symbol` is an opaque face token; exactly two tiles share it.
  - `is_matched` never reverts to False within a round.
  """
  id: int
  symbol: str
  is_flipped: bool = False
  is_matched: bool = False

  @property
  def face_up(self) -> bool:
    return self.is_flipped or self.is_matched

  def __str__(self) -> str:  # pragma: no cover - tiny convenience
    if self.is_matched:
      return f"[{self.symbol}]"
    if self.is_flipped:
      return f" {self.symbol} "
    return " ? "


@pydantic_dataclass(frozen=True)
class StatsView:
  """Header numbers shown while a round is in progress."""
  moves: int
  time: str
  score: int


@pydantic_dataclass(frozen=True)
class RoundSummary:
  """End-of-round grading handed to the presentation surface."""
  difficulty: DifficultyId
  outcome: Outcome
  score: int
  time_bonus: int
  stars: int
  moves: int
  elapsed: int
  matched_pairs: int
  pair_count: int
  text: str

  @property
  def stars_text(self) -> str:
    return "⭐" * self.stars


def _utcnow() -> datetime:
  return datetime.now(timezone.utc)


class ScoreEntry(BaseModel):
  """A persisted leaderboard record.

  Serialized with the field names `score`, `difficulty`, `moves`, `time`
  and `date`; the Python attribute names are the descriptive ones.
  """
  model_config = ConfigDict(frozen=True, populate_by_name=True)

  score: int
  difficulty: DifficultyId
  moves: int
  elapsed_seconds: int = Field(alias="time")
  timestamp: datetime = Field(alias="date", default_factory=_utcnow)

  @classmethod
  def from_summary(cls, summary: RoundSummary) -> "ScoreEntry":
    return cls(
      score=summary.score,
      difficulty=summary.difficulty,
      moves=summary.moves,
      elapsed_seconds=summary.elapsed,
    )
