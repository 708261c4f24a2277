from collections.abc import Callable

from memo.typings import Outcome

from .core import SimulationRecord


EXTRACTORS: dict[str, Callable] = {}


def extractor(func):
  EXTRACTORS[func.__name__] = func
  return func


@extractor
def extract_scores(records: list[SimulationRecord]) -> list[int]:
  return [r.summary.score for r in records]


@extractor
def extract_moves(records: list[SimulationRecord]) -> list[int]:
  return [r.summary.moves for r in records]


@extractor
def extract_star_counts(records: list[SimulationRecord]) -> dict[int, int]:
  """Return how many rounds earned 1, 2 and 3 stars."""
  counts = {1: 0, 2: 0, 3: 0}
  for r in records:
    counts[r.summary.stars] += 1
  return counts


@extractor
def extract_win_rate(records: list[SimulationRecord]) -> float:
  if not records:
    return 0.0
  wins = sum(1 for r in records if r.summary.outcome == Outcome.WIN)
  return wins / len(records)
