import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from .consts import COMBO_MULTIPLIER, MATCH_POINTS
from .state import RoundState
from .typings import Achievement, ActionType, Outcome, TurnPhase
from .utils import _replace_tuple


def match_points(combo: int) -> int:
  """Points for a match made with the given (already incremented) combo."""
  return math.floor(MATCH_POINTS * (1 + combo * COMBO_MULTIPLIER))


@dataclass(frozen=True)
class Action(ABC):
  """Base class for every rule transition of a round.

  Player input and the two scheduled triggers (the per-second tick and
  the delayed un-flip after a mismatch) are all actions, so the engine
  drives a round exclusively through `apply`.
  """
  type: ActionType

  @classmethod
  def flip(cls, tile_id: int) -> 'FlipAction':
    return FlipAction.create(tile_id)

  @classmethod
  def tick(cls) -> 'TickAction':
    return TickAction.create()

  @classmethod
  def settle(cls) -> 'SettleAction':
    return SettleAction.create()

  def apply(self, state: RoundState) -> RoundState:
    """Return the round after this action.

    An action the round does not accept is ignored: the very same
    `state` object is returned, which callers use to detect rejection.
    Implementations of `_apply` must not mutate the provided state.
    """
    if not self.check(state):
      return state
    return self._apply(state)

  def check(self, state: RoundState) -> bool:
    """Return True if `apply` would change the round."""
    if state.is_over:
      return False
    return self._check(state)

  @abstractmethod
  def _check(self, state: RoundState) -> bool:
    """Non-mutating validation for a round that is still running."""

  @abstractmethod
  def _apply(self, state: RoundState) -> RoundState:
    """Apply this action to a round that passed `check`."""


@dataclass(frozen=True)
class FlipAction(Action):
  tile_id: int = -1

  @classmethod
  def create(cls, tile_id: int) -> 'FlipAction':
    return cls(type=ActionType.FLIP, tile_id=tile_id)

  def __str__(self) -> str:
    return f"Action.Flip({self.tile_id})"

  def _check(self, state: RoundState) -> bool:
    if len(state.flipped) >= 2:
      return False
    tile = state.tile(self.tile_id)
    if tile is None:
      return False
    return not tile.is_flipped and not tile.is_matched

  def _apply(self, state: RoundState) -> RoundState:
    tile = state.tiles[self.tile_id]
    # the first flip of a round is never a Speed Match baseline
    baseline = state.last_flip_at if state.flip_count > 1 else None
    state = replace(
      state,
      tiles=_replace_tuple(state.tiles, tile.id, replace(tile, is_flipped=True)),
      flipped=state.flipped + (tile.id,),
      started=True,
      flip_count=state.flip_count + 1,
      last_flip_at=state.elapsed,
    )
    if len(state.flipped) < 2:
      return state
    state = replace(state, moves=state.moves + 1)
    return _resolve(state, baseline)


@dataclass(frozen=True)
class TickAction(Action):
  @classmethod
  def create(cls) -> 'TickAction':
    return cls(type=ActionType.TICK)

  def __str__(self) -> str:
    return "Action.Tick()"

  def _check(self, state: RoundState) -> bool:
    return state.started

  def _apply(self, state: RoundState) -> RoundState:
    state = replace(state, elapsed=state.elapsed + 1)
    if state.elapsed >= state.difficulty.time_limit and state.matched_pairs < state.pair_count:
      return state.end(Outcome.TIMEOUT)
    return state


@dataclass(frozen=True)
class SettleAction(Action):
  """Turn the two tiles of a mismatch face down again."""

  @classmethod
  def create(cls) -> 'SettleAction':
    return cls(type=ActionType.SETTLE)

  def __str__(self) -> str:
    return "Action.Settle()"

  def _check(self, state: RoundState) -> bool:
    return state.phase == TurnPhase.RESOLVING

  def _apply(self, state: RoundState) -> RoundState:
    tiles = state.tiles
    for tile_id in state.flipped:
      tiles = _replace_tuple(tiles, tile_id, replace(tiles[tile_id], is_flipped=False))
    return replace(state, tiles=tiles, flipped=())


def _resolve(state: RoundState, baseline: int | None) -> RoundState:
  first, second = (state.tiles[i] for i in state.flipped)
  if first.symbol != second.symbol:
    # tiles stay face up until a SettleAction; the full selection blocks flips
    state = replace(state, combo=0)
    return _evaluate_achievements(state, matched=False, baseline=baseline)

  tiles = state.tiles
  for tile in (first, second):
    tiles = _replace_tuple(tiles, tile.id, replace(tile, is_matched=True))
  combo = state.combo + 1
  state = replace(
    state,
    tiles=tiles,
    flipped=(),
    matched_pairs=state.matched_pairs + 1,
    combo=combo,
    score=state.score + match_points(combo),
  )
  state = _evaluate_achievements(state, matched=True, baseline=baseline)
  if state.matched_pairs == state.pair_count:
    return state.end(Outcome.WIN)
  return state


def _evaluate_achievements(state: RoundState, *, matched: bool, baseline: int | None) -> RoundState:
  config = state.config
  earned = set(state.earned)
  if (matched and baseline is not None
      and state.elapsed - baseline < config.speed_match_window):
    earned.add(Achievement.SPEED_MATCH)
  if state.matched_pairs == 1 and state.moves == 1:
    earned.add(Achievement.CLEAN_OPENER)
  if state.combo >= config.streak_target:
    earned.add(Achievement.STREAK_BONUS)
  if earned == state.earned:
    return state
  return replace(state, earned=frozenset(earned))
