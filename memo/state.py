import random
from dataclasses import dataclass, field, replace
from collections.abc import Sequence
from typing import TYPE_CHECKING

from memo.consts import (
  DIFFICULTIES,
  MIN_STARS,
  STAR_THRESHOLDS,
  SYMBOL_ASSETS_DEFAULT,
  Difficulty,
  GameConfig,
)

from .typings import Achievement, DifficultyId, Outcome, RoundSummary, StatsView, Tile, TurnPhase
from .utils import format_time

if TYPE_CHECKING:
  from .actions import FlipAction


def new_deck(pair_count: int, symbols: Sequence[str] | None = None) -> tuple[Tile, ...]:
  """Return a shuffled deck of `2 * pair_count` face-down tiles.

  The first `pair_count` symbols each appear exactly twice. Tile ids are
  assigned after shuffling so that an id is the tile's grid position. For
  two or more pairs the result never equals the construction order.
  """
  symbols = SYMBOL_ASSETS_DEFAULT.symbols if symbols is None else tuple(symbols)
  if not (1 <= pair_count <= len(symbols)):
    raise ValueError(f'pair_count must be between 1 and {len(symbols)}, got {pair_count}')
  chosen = list(symbols[:pair_count])
  if len(set(chosen)) != pair_count:
    raise ValueError("symbols must be distinct")
  ordered = chosen + chosen
  shuffled = random.sample(ordered, len(ordered))
  while pair_count > 1 and shuffled == ordered:
    shuffled = random.sample(ordered, len(ordered))
  return tuple(Tile(id=i, symbol=s) for i, s in enumerate(shuffled))


def time_bonus(difficulty: Difficulty, elapsed: int, config: GameConfig) -> int:
  """Points for the unused part of the countdown; zero once time ran out."""
  return max(0, difficulty.time_limit - elapsed) * config.time_bonus_per_second


def star_rating(difficulty: Difficulty, elapsed: int, moves: int) -> int:
  """Grade a round from 1 to 3 stars.

  A tier requires both the time and the move condition; failing either
  drops to the next tier down.
  """
  for stars, time_share, move_share in STAR_THRESHOLDS:
    if elapsed <= difficulty.time_limit * time_share and moves <= difficulty.move_budget * move_share:
      return stars
  return MIN_STARS


@dataclass(frozen=True)
class RoundState:
  """An immutable snapshot of one round.

  Every rule transition (see `memo.actions`) returns a new RoundState and
  leaves the previous one untouched, so callers can compare snapshots by
  identity to tell whether an action was accepted.
  """
  difficulty: Difficulty
  config: GameConfig
  tiles: tuple[Tile, ...]
  flipped: tuple[int, ...] = ()
  matched_pairs: int = 0
  moves: int = 0
  score: int = 0
  combo: int = 0
  elapsed: int = 0
  started: bool = False
  earned: frozenset[Achievement] = field(default_factory=frozenset)
  # number of flips so far and the elapsed time of the latest one
  flip_count: int = 0
  last_flip_at: int | None = None
  outcome: Outcome | None = None
  time_bonus: int = 0

  def __post_init__(self):
    object.__setattr__(self, 'tiles', tuple(self.tiles))
    object.__setattr__(self, 'flipped', tuple(self.flipped))
    object.__setattr__(self, 'earned', frozenset(self.earned))
    if len(self.tiles) != self.difficulty.tile_count:
      raise ValueError(f"expected {self.difficulty.tile_count} tiles, got {len(self.tiles)}")
    if len(self.flipped) > 2:
      raise ValueError("at most two tiles can be flipped at once")

  @classmethod
  def new(cls, difficulty: Difficulty | DifficultyId = DifficultyId.EASY, config: GameConfig | None = None,
          symbols: Sequence[str] | None = None) -> 'RoundState':
    """Create a fresh idle round with a newly shuffled deck."""
    if isinstance(difficulty, DifficultyId):
      difficulty = DIFFICULTIES[difficulty]
    return cls(
      difficulty=difficulty,
      config=config or GameConfig(),
      tiles=new_deck(difficulty.pair_count, symbols),
    )

  @property
  def pair_count(self) -> int:
    return self.difficulty.pair_count

  @property
  def phase(self) -> TurnPhase:
    if self.outcome is not None:
      return TurnPhase.ENDED
    if len(self.flipped) == 2:
      return TurnPhase.RESOLVING
    if len(self.flipped) == 1:
      return TurnPhase.ONE_FLIPPED
    return TurnPhase.IDLE

  @property
  def is_over(self) -> bool:
    return self.outcome is not None

  @property
  def time_left(self) -> int:
    return max(0, self.difficulty.time_limit - self.elapsed)

  def tile(self, tile_id: int) -> Tile | None:
    if 0 <= tile_id < len(self.tiles):
      return self.tiles[tile_id]
    return None

  def legal_actions(self) -> list["FlipAction"]:
    """Enumerate the flips the round would currently accept."""
    from .actions import FlipAction
    if self.phase not in (TurnPhase.IDLE, TurnPhase.ONE_FLIPPED):
      return []
    return [FlipAction.create(t.id) for t in self.tiles if not t.face_up]

  def stats(self) -> StatsView:
    return StatsView(moves=self.moves, time=format_time(self.elapsed), score=self.score)

  def end(self, outcome: Outcome) -> 'RoundState':
    """Return the ended round with the time bonus folded into the score."""
    bonus = time_bonus(self.difficulty, self.elapsed, self.config)
    return replace(self, outcome=outcome, time_bonus=bonus, score=self.score + bonus)

  def stars(self) -> int:
    return star_rating(self.difficulty, self.elapsed, self.moves)

  def summary(self) -> RoundSummary:
    if self.outcome is None:
      raise ValueError("round has not ended")
    time_text = format_time(self.elapsed)
    if self.outcome == Outcome.WIN:
      text = f"You completed the game in {time_text} with {self.moves} moves! Final score: {self.score}"
    else:
      text = (f"Time's up! You matched {self.matched_pairs} of {self.pair_count} pairs in {time_text} "
              f"with {self.moves} moves. Final score: {self.score}")
    return RoundSummary(
      difficulty=self.difficulty.id,
      outcome=self.outcome,
      score=self.score,
      time_bonus=self.time_bonus,
      stars=self.stars(),
      moves=self.moves,
      elapsed=self.elapsed,
      matched_pairs=self.matched_pairs,
      pair_count=self.pair_count,
      text=text,
    )

  def print_summary(self) -> None:
    """Print the board and counters; a development convenience."""
    width = 6
    rows = [self.tiles[i:i + width] for i in range(0, len(self.tiles), width)]
    print(f"[{self.difficulty.id}] moves={self.moves} time={format_time(self.elapsed)} score={self.score} combo={self.combo}")
    for row in rows:
      print("".join(f"{str(t):5}" for t in row))
