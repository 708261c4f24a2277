"""The game engine: owns the current round and drives every transition.

The engine is the only object callers talk to. It keeps one `Round` at a
time, applies actions to its immutable `RoundState`, schedules the tick
and the mismatch un-flip, reports changes to a `Surface` and hands the
finished round to a `ScoreStore`.

All work happens inside the call that triggered it (a flip request or a
scheduler callback), so one event is fully processed before the next.
"""
import logging

from .actions import Action, FlipAction, SettleAction, TickAction
from .consts import SYMBOL_ASSETS_DEFAULT, Difficulty, GameConfig, SymbolAssets, get_difficulty
from .scheduler import AsyncioScheduler, Handle, Scheduler
from .state import RoundState
from .store import ScoreStore
from .surface import Surface
from .typings import Achievement, DifficultyId, RoundSummary, ScoreEntry, TurnPhase

logger = logging.getLogger(__name__)


class Round:
  """One round's state together with the callbacks scheduled for it.

  Closing a round cancels every outstanding callback at once; a callback
  that still fires for a closed round is ignored by the engine.
  """

  def __init__(self, state: RoundState) -> None:
    self.state = state
    self.tick: Handle | None = None
    self.settle: Handle | None = None
    self.summary: RoundSummary | None = None
    self.closed = False

  def cancel_all(self) -> None:
    for handle in (self.tick, self.settle):
      if handle is not None:
        handle.cancel()
    self.tick = None
    self.settle = None

  def close(self) -> None:
    self.cancel_all()
    self.closed = True


class Engine:
  """Stateful owner of the current round.

  - `request_flip(tile_id)` forwards a player's flip intent
  - `restart()` and `set_difficulty(id)` replace the round
  - `get_state()` returns the current immutable RoundState
  """

  config: GameConfig
  _scheduler: Scheduler
  _store: ScoreStore
  _surface: Surface
  _assets: SymbolAssets
  _difficulty: Difficulty
  _round: Round

  def __init__(
      self,
      *,
      scheduler: Scheduler | None = None,
      store: ScoreStore | None = None,
      surface: Surface | None = None,
      difficulty: DifficultyId | str = DifficultyId.EASY,
      config: GameConfig | None = None,
      assets: SymbolAssets | None = None,
  ) -> None:
    self.config = config or GameConfig()
    self._scheduler = scheduler or AsyncioScheduler()
    self._store = store or ScoreStore(config=self.config)
    self._surface = surface or Surface()
    self._assets = assets or SYMBOL_ASSETS_DEFAULT
    resolved = get_difficulty(difficulty)
    if resolved is None:
      raise ValueError(f"Unknown difficulty: {difficulty!r}")
    self._difficulty = resolved
    self._round = self._new_round()
    self._surface.on_leaderboard(self._store.load_top())

  @staticmethod
  def new(difficulty: DifficultyId | str = DifficultyId.EASY, **kwargs) -> "Engine":
    return Engine(difficulty=difficulty, **kwargs)

  # Public API --------------------------------------------------------
  @property
  def difficulty(self) -> Difficulty:
    return self._difficulty

  @property
  def store(self) -> ScoreStore:
    return self._store

  @property
  def summary(self) -> RoundSummary | None:
    """The current round's grading once it has ended, else None."""
    return self._round.summary

  def get_state(self) -> RoundState:
    return self._round.state

  def request_flip(self, tile_id: int) -> RoundState:
    """Flip a tile on behalf of the player.

    Flips the rules do not allow are ignored; the returned state is then
    the unchanged current state.
    """
    return self._dispatch(self._round, FlipAction.create(tile_id))

  def restart(self) -> RoundState:
    """Discard the current round and start a fresh one."""
    self._round.close()
    self._round = self._new_round()
    return self._round.state

  def set_difficulty(self, difficulty_id: DifficultyId | str) -> RoundState:
    """Switch difficulty and restart. Unknown ids are ignored."""
    difficulty = get_difficulty(difficulty_id)
    if difficulty is None:
      logger.debug("ignoring unknown difficulty %r", difficulty_id)
      return self._round.state
    self._difficulty = difficulty
    return self.restart()

  def print_summary(self) -> None:
    self._round.state.print_summary()

  # Internal helpers --------------------------------------------------
  def _new_round(self) -> Round:
    state = RoundState.new(self._difficulty, self.config, self._assets.symbols)
    rnd = Round(state)
    logger.debug("new %s round with %d tiles", self._difficulty.id, len(state.tiles))
    self._surface.on_tiles(state.tiles)
    self._surface.on_stats(state.stats())
    return rnd

  def _dispatch(self, rnd: Round, action: Action) -> RoundState:
    prev = rnd.state
    new = action.apply(prev)
    if new is prev:
      logger.debug("ignored %s in phase %s", action, prev.phase)
      return prev
    if not new.is_over:
      # a scheduler failure must leave the round as it was
      self._schedule(rnd, prev, new)
    rnd.state = new
    self._after_transition(rnd, prev, new)
    return rnd.state

  def _schedule(self, rnd: Round, prev: RoundState, new: RoundState) -> None:
    if not prev.started and new.started:
      self._schedule_tick(rnd)
    if new.phase == TurnPhase.RESOLVING and prev.phase != TurnPhase.RESOLVING:
      rnd.settle = self._scheduler.call_later(self.config.mismatch_delay, self._on_settle, rnd)

  def _after_transition(self, rnd: Round, prev: RoundState, new: RoundState) -> None:
    if new.tiles != prev.tiles:
      self._surface.on_tiles(new.tiles)
    self._surface.on_stats(new.stats())
    for achievement in [a for a in Achievement if a in new.earned and a not in prev.earned]:
      logger.debug("earned %s", achievement.value)
      self._surface.on_achievement(achievement)

    if new.is_over:
      self._finish(rnd, new)

  def _finish(self, rnd: Round, state: RoundState) -> None:
    rnd.cancel_all()
    summary = state.summary()
    rnd.summary = summary
    logger.info("%s round ended (%s): score=%d stars=%d moves=%d elapsed=%ds",
                summary.difficulty, summary.outcome, summary.score, summary.stars,
                summary.moves, summary.elapsed)
    entries = self._store.submit(ScoreEntry.from_summary(summary))
    self._surface.on_round_end(summary)
    self._surface.on_leaderboard(entries)

  def _is_live(self, rnd: Round) -> bool:
    return rnd is self._round and not rnd.closed and not rnd.state.is_over

  def _schedule_tick(self, rnd: Round) -> None:
    rnd.tick = self._scheduler.call_later(self.config.tick_interval, self._on_tick, rnd)

  def _on_tick(self, rnd: Round) -> None:
    if not self._is_live(rnd):
      return
    rnd.tick = None
    self._dispatch(rnd, TickAction.create())
    if self._is_live(rnd):
      self._schedule_tick(rnd)

  def _on_settle(self, rnd: Round) -> None:
    if not self._is_live(rnd):
      return
    rnd.settle = None
    self._dispatch(rnd, SettleAction.create())


__all__ = ["Engine", "Round"]
