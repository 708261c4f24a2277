"""Drive an agent through a round on a virtual clock."""
from .agents.core import Agent
from .engine import Engine
from .scheduler import VirtualScheduler
from .typings import RoundSummary, TurnPhase


def play_round(engine: Engine, agent: Agent, scheduler: VirtualScheduler, *,
               think_seconds: float = 0.5, debug: bool = False) -> RoundSummary:
  """Let `agent` play the engine's current round until it ends.

  `think_seconds` of virtual time pass before every flip. While a
  mismatch is showing, the clock is moved on by the mismatch delay so the
  tiles turn back over. The engine must have been built with `scheduler`.
  """
  agent.observe(engine.get_state())
  while (state := engine.get_state()).outcome is None:
    if state.phase == TurnPhase.RESOLVING:
      scheduler.advance(engine.config.mismatch_delay)
      agent.observe(engine.get_state())
      continue
    action = agent.act(state, state.legal_actions())
    scheduler.advance(think_seconds)
    if engine.get_state().is_over:
      break
    engine.request_flip(action.tile_id)
    agent.observe(engine.get_state())
    if debug:
      print(f"Move {engine.get_state().moves}: {agent.name} performs: {action}")
      engine.print_summary()
  summary = engine.summary
  if summary is None:
    raise RuntimeError("round ended without a summary")
  return summary
