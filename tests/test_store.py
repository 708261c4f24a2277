import json
import random

import pytest

from memo import FileStorage, MemoryStorage, ScoreStore
from memo.consts import GameConfig
from memo.typings import DifficultyId, ScoreEntry


def entry(score, difficulty=DifficultyId.EASY, moves=8, elapsed=30):
  return ScoreEntry(score=score, difficulty=difficulty, moves=moves, elapsed_seconds=elapsed)


def test_empty_store_has_no_entries():
  assert ScoreStore(MemoryStorage()).load_top() == []


def test_keeps_best_ten_sorted():
  store = ScoreStore(MemoryStorage())
  scores = list(range(10, 120, 10))
  random.Random(0).shuffle(scores)
  for score in scores:
    top = store.submit(entry(score))
  assert [e.score for e in top] == list(range(110, 10, -10))
  assert store.load_top() == top


def test_limit_comes_from_config():
  store = ScoreStore(MemoryStorage(), config=GameConfig(leaderboard_size=3))
  for score in (5, 1, 4, 2, 3):
    store.submit(entry(score))
  assert [e.score for e in store.load_top()] == [5, 4, 3]


def test_ties_keep_earlier_entry_first():
  store = ScoreStore(MemoryStorage())
  store.submit(entry(100, moves=6))
  store.submit(entry(100, moves=9))
  assert [e.moves for e in store.load_top()] == [6, 9]


def test_stored_record_format():
  storage = MemoryStorage()
  store = ScoreStore(storage)
  store.submit(entry(250, DifficultyId.HARD, moves=12, elapsed=75))
  records = json.loads(storage.get_item("memoryGameLeaderboard"))
  assert len(records) == 1
  record = records[0]
  assert set(record) == {"score", "difficulty", "moves", "time", "date"}
  assert record["difficulty"] == "hard"
  assert record["time"] == 75


def test_reads_records_by_stored_names():
  raw = json.dumps([
    {"score": 10, "difficulty": "easy", "moves": 20, "time": 50, "date": "2024-01-01T00:00:00Z"},
    {"score": 90, "difficulty": "medium", "moves": 15, "time": 80, "date": "2024-01-02T00:00:00Z"},
  ])
  store = ScoreStore(MemoryStorage({"memoryGameLeaderboard": raw}))
  top = store.load_top()
  assert [e.score for e in top] == [90, 10]
  assert top[0].difficulty == DifficultyId.MEDIUM
  assert top[0].elapsed_seconds == 80


@pytest.mark.parametrize("raw", ["not json", "{}", '{"a": 1}', '[{"score": "lots"}]', "null"])
def test_unreadable_data_is_an_empty_leaderboard(raw):
  storage = MemoryStorage({"memoryGameLeaderboard": raw})
  store = ScoreStore(storage)
  assert store.load_top() == []

  store.submit(entry(42))
  assert [e.score for e in store.load_top()] == [42]


def test_custom_key():
  storage = MemoryStorage()
  ScoreStore(storage, key="other").submit(entry(1))
  assert storage.get_item("memoryGameLeaderboard") is None
  assert storage.get_item("other") is not None


def test_file_storage_round_trip(tmp_path):
  store = ScoreStore(FileStorage(tmp_path / "scores"))
  assert store.load_top() == []
  first = entry(300)
  store.submit(first)
  store.submit(entry(200))

  reopened = ScoreStore(FileStorage(tmp_path / "scores"))
  top = reopened.load_top()
  assert [e.score for e in top] == [300, 200]
  assert top[0] == first
  assert (tmp_path / "scores" / "memoryGameLeaderboard.json").exists()


def test_undecodable_file_is_an_empty_leaderboard(tmp_path):
  (tmp_path / "memoryGameLeaderboard.json").write_bytes(b"\xff\xfe\x00garbage")
  store = ScoreStore(FileStorage(tmp_path))
  assert store.load_top() == []

  store.submit(entry(77))
  assert [e.score for e in ScoreStore(FileStorage(tmp_path)).load_top()] == [77]
