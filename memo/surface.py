"""Presentation surface hooks.

The engine reports every state change through these hooks. Subclasses
override the ones they render; the defaults do nothing.
"""
from collections.abc import Sequence

from .typings import Achievement, RoundSummary, ScoreEntry, StatsView, Tile
from .utils import format_time


class Surface:
  def on_tiles(self, tiles: Sequence[Tile]) -> None:
    pass

  def on_stats(self, stats: StatsView) -> None:
    pass

  def on_achievement(self, achievement: Achievement) -> None:
    pass

  def on_round_end(self, summary: RoundSummary) -> None:
    pass

  def on_leaderboard(self, entries: Sequence[ScoreEntry]) -> None:
    pass


class ConsoleSurface(Surface):
  """Print notifications to stdout; used by the demo runner."""

  def __init__(self, columns: int = 6, show_tiles: bool = True) -> None:
    self.columns = columns
    self.show_tiles = show_tiles

  def on_tiles(self, tiles: Sequence[Tile]) -> None:
    if not self.show_tiles:
      return
    for i in range(0, len(tiles), self.columns):
      print("".join(f"{str(t):5}" for t in tiles[i:i + self.columns]))

  def on_stats(self, stats: StatsView) -> None:
    print(f"Moves: {stats.moves}  Time: {stats.time}  Score: {stats.score}")

  def on_achievement(self, achievement: Achievement) -> None:
    print(str(achievement))

  def on_round_end(self, summary: RoundSummary) -> None:
    print(summary.stars_text)
    print(summary.text)

  def on_leaderboard(self, entries: Sequence[ScoreEntry]) -> None:
    print("Leaderboard:")
    for i, entry in enumerate(entries):
      print(f"  #{i + 1} {str(entry.difficulty):<6} {entry.score:>6} pts  {entry.moves} moves  {format_time(entry.elapsed_seconds)}")
