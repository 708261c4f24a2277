import pytest

from memo.actions import Action, match_points
from memo.typings import TurnPhase

from helpers import make_state


def flip(state, *ids):
  for tile_id in ids:
    state = Action.flip(tile_id).apply(state)
  return state


@pytest.mark.parametrize("combo, points", [(1, 150), (2, 200), (3, 250), (6, 400)])
def test_match_points(combo, points):
  assert match_points(combo) == points


def test_consecutive_matches_grow_combo():
  state = make_state()
  scores = []
  for a in (0, 2, 4):
    state = flip(state, a, a + 1)
    scores.append(state.score)
  assert scores == [150, 350, 600]
  assert state.combo == 3


def test_mismatch_resets_combo_without_points():
  state = flip(make_state(), 0, 1, 2, 3)
  assert state.combo == 2
  score = state.score

  state = flip(state, 4, 6)
  assert state.combo == 0
  assert state.score == score

  state = Action.settle().apply(state)
  state = flip(state, 4, 5)
  assert state.combo == 1
  assert state.score == score + 150


def test_settle_turns_mismatch_face_down():
  state = flip(make_state(), 0, 2)
  state = Action.settle().apply(state)
  assert state.phase == TurnPhase.IDLE
  assert state.flipped == ()
  assert not state.tiles[0].is_flipped
  assert not state.tiles[2].is_flipped
  assert state.moves == 1


def test_settle_outside_resolving_is_ignored():
  state = flip(make_state(), 0)
  assert Action.settle().apply(state) is state
