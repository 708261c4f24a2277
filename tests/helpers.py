from collections.abc import Sequence

from memo.consts import DIFFICULTIES, GameConfig
from memo.state import RoundState
from memo.surface import Surface
from memo.typings import DifficultyId, Tile

EASY = DIFFICULTIES[DifficultyId.EASY]


def ordered_tiles(pair_count: int) -> tuple[Tile, ...]:
  """Tiles 2k and 2k+1 share a symbol."""
  return tuple(Tile(id=i, symbol=f"S{i // 2}") for i in range(pair_count * 2))


def make_state(difficulty=EASY, config: GameConfig | None = None, **kwargs) -> RoundState:
  tiles = kwargs.pop("tiles", None) or ordered_tiles(difficulty.pair_count)
  return RoundState(difficulty=difficulty, config=config or GameConfig(), tiles=tiles, **kwargs)


def pairs_of(state: RoundState) -> list[tuple[int, int]]:
  """Return (a, b) id pairs sharing a symbol, ordered by the first id."""
  by_symbol: dict[str, list[int]] = {}
  for tile in state.tiles:
    by_symbol.setdefault(tile.symbol, []).append(tile.id)
  return sorted((ids[0], ids[1]) for ids in by_symbol.values())


def mismatch_of(state: RoundState) -> tuple[int, int]:
  """Return two face-down ids with different symbols."""
  first = next(t for t in state.tiles if not t.face_up)
  second = next(t for t in state.tiles if not t.face_up and t.symbol != first.symbol)
  return first.id, second.id


class RecordingSurface(Surface):
  def __init__(self) -> None:
    self.events: list[tuple[str, object]] = []

  def on_tiles(self, tiles: Sequence[Tile]) -> None:
    self.events.append(("tiles", tuple(tiles)))

  def on_stats(self, stats) -> None:
    self.events.append(("stats", stats))

  def on_achievement(self, achievement) -> None:
    self.events.append(("achievement", achievement))

  def on_round_end(self, summary) -> None:
    self.events.append(("round_end", summary))

  def on_leaderboard(self, entries) -> None:
    self.events.append(("leaderboard", list(entries)))

  def of(self, kind: str) -> list:
    return [payload for k, payload in self.events if k == kind]
