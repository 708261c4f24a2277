from memo.actions import Action
from memo.typings import Achievement

from helpers import make_state


def flip(state, *ids):
  for tile_id in ids:
    state = Action.flip(tile_id).apply(state)
  return state


def tick(state, n=1):
  for _ in range(n):
    state = Action.tick().apply(state)
  return state


def test_clean_opener_on_first_move_match():
  state = flip(make_state(), 0, 1)
  assert Achievement.CLEAN_OPENER in state.earned


def test_no_clean_opener_after_a_miss():
  state = flip(make_state(), 0, 2)
  state = Action.settle().apply(state)
  state = flip(state, 0, 1)
  assert state.matched_pairs == 1
  assert Achievement.CLEAN_OPENER not in state.earned


def test_first_turn_never_earns_speed_match():
  # both flips at elapsed 0, but the first flip of the round has no baseline
  state = flip(make_state(), 0, 1)
  assert Achievement.SPEED_MATCH not in state.earned


def test_speed_match_on_quick_later_turn():
  state = flip(make_state(), 0, 2)
  state = Action.settle().apply(state)
  state = tick(flip(state, 4))
  state = flip(state, 5)
  assert Achievement.SPEED_MATCH in state.earned


def test_no_speed_match_when_turn_is_slow():
  state = flip(make_state(), 0, 2)
  state = Action.settle().apply(state)
  state = tick(flip(state, 4), 2)
  state = flip(state, 5)
  assert state.matched_pairs == 1
  assert Achievement.SPEED_MATCH not in state.earned


def test_no_speed_match_for_quick_mismatch():
  state = flip(make_state(), 0, 2)
  state = Action.settle().apply(state)
  state = flip(state, 4, 6)
  assert Achievement.SPEED_MATCH not in state.earned


def test_streak_after_three_matches_in_a_row():
  state = flip(make_state(), 0, 1, 2, 3)
  assert Achievement.STREAK_BONUS not in state.earned
  state = flip(state, 4, 5)
  assert Achievement.STREAK_BONUS in state.earned


def test_streak_broken_by_mismatch():
  state = flip(make_state(), 0, 1, 2, 3, 4, 6)
  state = Action.settle().apply(state)
  state = flip(state, 4, 5)
  assert state.combo == 1
  assert Achievement.STREAK_BONUS not in state.earned


def test_earned_achievements_stay_earned():
  state = flip(make_state(), 0, 1, 2, 4)
  assert state.combo == 0
  assert Achievement.CLEAN_OPENER in state.earned
