"""StateSpace helper for building observations from a RoundState.

Provides a gymnasium Dict space with a `make_obs(state)` method that
produces the numpy observation dict used by the env. Only faces that are
currently showing are encoded; face-down tiles read as 0.
"""
from __future__ import annotations

from typing import TypeAlias, TypedDict, TypeVar

import numpy as np
from gymnasium import spaces

from ..consts import Difficulty
from ..state import RoundState

_ScalarT = TypeVar("_ScalarT", bound=np.generic)
NDArray1D: TypeAlias = np.ndarray[tuple[int], np.dtype[_ScalarT]]

MAX_MOVES = 2**15


class StateDict(TypedDict):
  tiles: NDArray1D[np.int32]  # shape (tile_count,), 0 == face down, k == k-th symbol
  matched: NDArray1D[np.int32]  # shape (tile_count,)
  moves: NDArray1D[np.int32]  # shape (1,)
  combo: NDArray1D[np.int32]  # shape (1,)
  time_left: NDArray1D[np.int32]  # shape (1,)


class StateSpace(spaces.Dict):
  def __init__(self, difficulty: Difficulty, *, seed=None):
    self._tile_count = difficulty.tile_count
    self._pair_count = difficulty.pair_count
    super().__init__({
      'tiles': spaces.Box(low=0, high=self._pair_count, shape=(self._tile_count,), dtype=np.int32),
      'matched': spaces.Box(low=0, high=1, shape=(self._tile_count,), dtype=np.int32),
      'moves': spaces.Box(low=0, high=MAX_MOVES, shape=(1,), dtype=np.int32),
      'combo': spaces.Box(low=0, high=self._pair_count, shape=(1,), dtype=np.int32),
      'time_left': spaces.Box(low=0, high=difficulty.time_limit, shape=(1,), dtype=np.int32),
    }, seed=seed)

  def make_obs(self, state: RoundState | None) -> StateDict:
    tiles = np.zeros(self._tile_count, dtype=np.int32)
    matched = np.zeros(self._tile_count, dtype=np.int32)
    moves = np.zeros(1, dtype=np.int32)
    combo = np.zeros(1, dtype=np.int32)
    time_left = np.zeros(1, dtype=np.int32)
    if state is not None:
      # symbols are numbered by sort order so the encoding is stable within a round
      index = {s: i + 1 for i, s in enumerate(sorted({t.symbol for t in state.tiles}))}
      for tile in state.tiles:
        if tile.face_up:
          tiles[tile.id] = index[tile.symbol]
        matched[tile.id] = int(tile.is_matched)
      moves[0] = min(state.moves, MAX_MOVES)
      combo[0] = state.combo
      time_left[0] = state.time_left
    return {
      'tiles': tiles,
      'matched': matched,
      'moves': moves,
      'combo': combo,
      'time_left': time_left,
    }

  def action_mask(self, state: RoundState | None) -> np.ndarray:
    mask = np.zeros(self._tile_count, dtype=np.int8)
    if state is not None:
      for action in state.legal_actions():
        mask[action.tile_id] = 1
    return mask


__all__ = ["StateSpace"]
