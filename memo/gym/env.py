"""Gymnasium environment wrapper for the memo engine.

One step is one flip. Time runs on a `VirtualScheduler`: each step first
lets a pending mismatch turn back over, then spends `think_seconds` of
virtual time before flipping, so slow play can still run out the clock.
"""
from __future__ import annotations

from typing import Callable

import gymnasium as gym
from gymnasium import spaces

from ..consts import DIFFICULTIES, GameConfig
from ..engine import Engine
from ..scheduler import VirtualScheduler
from ..state import RoundState
from ..typings import DifficultyId, TurnPhase
from .state_space import StateSpace

INVALID_ACTION_PENALTY = -0.1


def default_reward_fn(prev_state: RoundState, new_state: RoundState) -> float:
  """Default reward: delta in score, time bonus included."""
  return float(new_state.score - prev_state.score)


class MemoEnv(gym.Env):
  metadata = {"render_modes": ["human"], "render_fps": 4}

  def __init__(self,
               difficulty: DifficultyId | str = DifficultyId.EASY,
               config: GameConfig | None = None,
               think_seconds: float = 0.5,
               reward_fn: Callable[[RoundState, RoundState], float] | None = None):
    super().__init__()
    self.difficulty = DIFFICULTIES[DifficultyId(difficulty)]
    self.config = config or GameConfig()
    self.think_seconds = think_seconds
    self._reward_fn = reward_fn or default_reward_fn
    self._scheduler: VirtualScheduler | None = None
    self._engine: Engine | None = None
    self._state_space = StateSpace(self.difficulty)
    self.observation_space = self._state_space
    self.action_space = spaces.Discrete(self.difficulty.tile_count)

  # Gymnasium API -------------------------------------------------
  def reset(self, *, seed: int | None = None, options: dict | None = None):
    super().reset(seed=seed)
    self._scheduler = VirtualScheduler()
    self._engine = Engine(scheduler=self._scheduler, difficulty=self.difficulty.id, config=self.config)
    state = self._engine.get_state()
    return self._state_space.make_obs(state), self._info(state)

  def step(self, action: int):
    if self._engine is None or self._scheduler is None:
      raise RuntimeError("Environment not reset")
    engine = self._engine
    if engine.get_state().phase == TurnPhase.RESOLVING:
      self._scheduler.advance(self.config.mismatch_delay)
    self._scheduler.advance(self.think_seconds)
    prev_state = engine.get_state()
    new_state = engine.request_flip(int(action))
    penalty = 0.0
    if new_state is prev_state and not prev_state.is_over:
      penalty = INVALID_ACTION_PENALTY
    reward = self._reward_fn(prev_state, new_state) + penalty
    terminated = new_state.is_over
    truncated = False
    info = self._info(new_state)
    info['accepted'] = new_state is not prev_state
    return self._state_space.make_obs(new_state), reward, terminated, truncated, info

  def render(self):  # pragma: no cover - printing side-effect
    if self._engine is None:
      return
    self._engine.print_summary()

  def close(self):  # pragma: no cover - trivial
    self._engine = None
    self._scheduler = None

  # Internal helpers ----------------------------------------------
  def _info(self, state: RoundState) -> dict:
    info: dict = {
      'action_mask': self._state_space.action_mask(state),
      'score': state.score,
      'phase': state.phase.value,
    }
    if self._engine is not None and self._engine.summary is not None:
      info['stars'] = self._engine.summary.stars
      info['outcome'] = self._engine.summary.outcome.value
    return info


__all__ = ["MemoEnv", "StateSpace"]
