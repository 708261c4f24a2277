"""Agents that play a memo round by choosing which tile to flip.

A driver such as `memo.play.play_round` shows the agent every snapshot it
should remember through `observe` and asks for a flip with `act`. Agents
register themselves by class name so simulations can build them from
configuration.
"""
from dataclasses import dataclass
from pydantic import BaseModel
import random
from collections.abc import Sequence
from typing import ClassVar, TypeVar

from ..actions import FlipAction
from ..state import RoundState

def AGENT_SEED_GENERATOR(): return random.Random().randint(0, 2**31 - 1)


@dataclass
class Agent:
  name: str

  agent_name_to_cls: ClassVar[dict[str, type["Agent"]]] = {}

  def __init__(self, *, seed: int | None = None, name: str | None = None) -> None:
    self.name = name if name is not None else self.__class__.__name__
    if seed is None:
      seed = AGENT_SEED_GENERATOR()
    self._seed = seed
    self.rng = random.Random(seed)

  @classmethod
  def __init_subclass__(cls):
    cls.agent_name_to_cls[cls.__name__] = cls
    super().__init_subclass__()

  def reset(self, seed: int | None = None) -> None:
    """Prepare for a new round: reseed and forget the previous board."""
    if seed is None:
      seed = AGENT_SEED_GENERATOR()
    self._seed = seed
    self.rng.seed(seed)
    self._reset()

  def _reset(self) -> None:
    """Drop whatever the agent remembers about the last deck."""

  def observe(self, state: RoundState) -> None:
    """Look at the board; face-up tiles are the only information it holds."""

  def act(self, state: RoundState, legal_actions: Sequence[FlipAction]) -> FlipAction:
    """Pick the next flip from `legal_actions`."""
    raise NotImplementedError()

  def metadata(self) -> dict:
    """Describe the agent for a simulation record: class, name and seed."""
    metadata = {
        "type": self.__class__.__name__,
        "name": self.name,
        "seed": self._seed,
    }
    if (extra := self._metadata()):
      metadata.update(extra)
    return metadata

  def _metadata(self) -> dict:
    return {}


BaseAgent = TypeVar('BaseAgent', bound=Agent)


class AgentBuilder(BaseModel):
  """Build a registered agent from its class name, e.g. from a TOML run config."""

  cls_name: str
  name: str | None = None
  seed: int | None = None
  kwargs: dict = {}

  def build(self) -> Agent:
    agent_cls = Agent.agent_name_to_cls.get(self.cls_name)
    if agent_cls is None:
      raise ValueError(f"Unknown agent class: {self.cls_name}")
    return agent_cls(seed=self.seed, name=self.name, **self.kwargs)


__all__ = ["Agent", "AgentBuilder", "BaseAgent"]
