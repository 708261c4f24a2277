import pytest

from memo.consts import DIFFICULTIES, GameConfig
from memo.state import star_rating, time_bonus
from memo.typings import DifficultyId
from memo.utils import format_time

EASY = DIFFICULTIES[DifficultyId.EASY]
MEDIUM = DIFFICULTIES[DifficultyId.MEDIUM]


@pytest.mark.parametrize("elapsed, moves, stars", [
  (25, 8, 3),
  (30, 9, 3),
  (31, 9, 2),
  (25, 10, 2),
  (40, 11, 2),
  (45, 12, 2),
  (46, 5, 1),
  (55, 14, 1),
  (60, 0, 1),
])
def test_star_rating_easy(elapsed, moves, stars):
  assert star_rating(EASY, elapsed, moves) == stars


def test_star_rating_scales_with_difficulty():
  # medium: 120s limit, 30 move budget
  assert star_rating(MEDIUM, 60, 18) == 3
  assert star_rating(MEDIUM, 60, 19) == 2
  assert star_rating(MEDIUM, 90, 24) == 2
  assert star_rating(MEDIUM, 91, 24) == 1


def test_time_bonus():
  config = GameConfig()
  assert time_bonus(EASY, 0, config) == 600
  assert time_bonus(EASY, 45, config) == 150
  assert time_bonus(EASY, 60, config) == 0
  assert time_bonus(EASY, 75, config) == 0


@pytest.mark.parametrize("seconds, text", [
  (0, "0:00"),
  (9, "0:09"),
  (59, "0:59"),
  (61, "1:01"),
  (600, "10:00"),
])
def test_format_time(seconds, text):
  assert format_time(seconds) == text
