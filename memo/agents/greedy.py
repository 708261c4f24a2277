"""GreedyAgent: remembers revealed faces and cashes in known pairs first."""
from collections.abc import Sequence
from dataclasses import asdict
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .core import Agent
from ..actions import FlipAction
from ..state import RoundState


@pydantic_dataclass(frozen=True)
class GreedyAgentConfig:
  # chance that a face seen for the first time is remembered
  recall: float = 1.0

  def __post_init__(self):
    if not (0.0 <= self.recall <= 1.0):
      raise ValueError(f"recall must be within [0, 1], got {self.recall}")


class GreedyAgent(Agent):
  """Flip a known pair when one exists, otherwise explore unseen tiles.

  Order of preference for each flip:
  1. the remembered partner of the tile already face up this turn
  2. the first tile of a pair whose two faces are both remembered
  3. a tile never seen before
  4. any legal tile
  """

  def __init__(self, *, seed: int | None = None, name: str | None = None,
               config: GreedyAgentConfig | None = None) -> None:
    super().__init__(seed=seed, name=name)
    self.config = config or GreedyAgentConfig()
    self._memory: dict[int, str] = {}
    self._seen: set[int] = set()

  def _reset(self) -> None:
    self._memory = {}
    self._seen = set()

  def observe(self, state: RoundState) -> None:
    for tile in state.tiles:
      if tile.is_matched:
        self._memory.pop(tile.id, None)
        continue
      if tile.is_flipped and tile.id not in self._seen:
        self._seen.add(tile.id)
        if self.rng.random() < self.config.recall:
          self._memory[tile.id] = tile.symbol

  def act(self, state: RoundState, legal_actions: Sequence[FlipAction]) -> FlipAction:
    if not legal_actions:
      raise ValueError("No legal actions available")
    by_id = {a.tile_id: a for a in legal_actions}
    known = {tid: sym for tid, sym in self._memory.items() if tid in by_id}

    if state.flipped:
      open_symbol = state.tiles[state.flipped[0]].symbol
      for tid, sym in known.items():
        if sym == open_symbol:
          return by_id[tid]
    else:
      first_by_symbol: dict[str, int] = {}
      for tid, sym in sorted(known.items()):
        if sym in first_by_symbol:
          return by_id[first_by_symbol[sym]]
        first_by_symbol[sym] = tid

    unseen = [a for tid, a in by_id.items() if tid not in self._seen]
    if unseen:
      return self.rng.choice(unseen)
    return self.rng.choice(list(legal_actions))

  def _metadata(self) -> dict:
    return {"config": asdict(self.config)}


__all__ = ["GreedyAgent", "GreedyAgentConfig"]
