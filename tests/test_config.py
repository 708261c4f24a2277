import pytest

from memo.consts import DIFFICULTIES, SYMBOL_ASSETS_DEFAULT, GameConfig, SymbolAssets, get_difficulty
from memo.typings import Achievement, DifficultyId


def test_difficulty_catalog():
  assert [(d.pair_count, d.time_limit) for d in DIFFICULTIES.values()] == [(6, 60), (12, 120), (18, 180)]
  assert get_difficulty("hard") is DIFFICULTIES[DifficultyId.HARD]
  assert get_difficulty("extreme") is None


@pytest.mark.parametrize("kwargs", [
  {"mismatch_delay": 0},
  {"tick_interval": -1},
  {"leaderboard_size": 0},
  {"storage_key": ""},
])
def test_game_config_validation(kwargs):
  with pytest.raises(ValueError):
    GameConfig(**kwargs)


def test_game_config_serialization():
  config = GameConfig(mismatch_delay=0.5, leaderboard_size=5)
  assert GameConfig.deserialize(config.serialize()) == config


def test_default_symbols_cover_hardest_difficulty():
  assert SYMBOL_ASSETS_DEFAULT.max_pairs >= DIFFICULTIES[DifficultyId.HARD].pair_count
  assert len(set(SYMBOL_ASSETS_DEFAULT.symbols)) == SYMBOL_ASSETS_DEFAULT.max_pairs


def test_symbols_must_be_distinct():
  with pytest.raises(ValueError):
    SymbolAssets(symbols=("a", "b", "a"))


def test_achievement_text():
  assert Achievement.SPEED_MATCH.title == "Speed Demon"
  assert str(Achievement.STREAK_BONUS) == "🏆 Combo Master: Match 3 pairs in a row"
