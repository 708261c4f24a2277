"""RandomAgent: picks uniformly from legal flips using its own RNG."""
from collections.abc import Sequence

from .core import Agent
from ..actions import FlipAction
from ..state import RoundState


class RandomAgent(Agent):
  def act(self, state: RoundState, legal_actions: Sequence[FlipAction]) -> FlipAction:
    if not legal_actions:
      raise ValueError("No legal actions available")
    return self.rng.choice(legal_actions)


__all__ = ["RandomAgent"]
