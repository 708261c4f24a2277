from memo.actions import Action
from memo.typings import Outcome, TurnPhase

from helpers import make_state


def test_tick_is_ignored_before_first_flip():
  state = make_state()
  assert Action.tick().apply(state) is state


def test_tick_advances_elapsed():
  state = Action.flip(0).apply(make_state())
  state = Action.tick().apply(state)
  assert state.elapsed == 1
  assert state.time_left == 59
  assert state.stats().time == "0:01"


def test_timeout_at_limit():
  state = make_state(started=True, elapsed=59, moves=4, score=150, matched_pairs=1)
  state = Action.tick().apply(state)
  assert state.outcome == Outcome.TIMEOUT
  assert state.phase == TurnPhase.ENDED
  assert state.elapsed == 60
  assert state.time_bonus == 0
  assert state.score == 150


def test_timeout_summary_uses_actual_values():
  state = make_state(started=True, elapsed=59, moves=4, score=150, matched_pairs=1)
  summary = Action.tick().apply(state).summary()
  assert summary.outcome == Outcome.TIMEOUT
  assert summary.stars == 1
  assert summary.moves == 4
  assert summary.elapsed == 60
  assert summary.text.startswith("Time's up!")
  assert "1 of 6 pairs" in summary.text


def test_win_adds_time_bonus():
  state = make_state(started=True, elapsed=20)
  for a in range(0, 12, 2):
    state = Action.flip(a).apply(state)
    state = Action.flip(a + 1).apply(state)
  assert state.outcome == Outcome.WIN
  # 150 + 200 + ... + 400 for six consecutive matches
  assert state.time_bonus == 400
  assert state.score == 1650 + 400

  summary = state.summary()
  assert summary.stars == 3
  assert summary.text == "You completed the game in 0:20 with 6 moves! Final score: 2050"


def test_ended_round_rejects_everything():
  state = make_state(started=True, elapsed=59)
  state = Action.flip(0).apply(state)
  state = Action.tick().apply(state)
  assert state.is_over
  assert Action.flip(1).apply(state) is state
  assert Action.tick().apply(state) is state
  assert Action.settle().apply(state) is state
  assert state.legal_actions() == []
