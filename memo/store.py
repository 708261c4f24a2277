"""Leaderboard persistence.

`ScoreStore` keeps the best results as one JSON array under a single
storage key. The record field names (`score`, `difficulty`, `moves`,
`time`, `date`) are part of the stored format.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .consts import GameConfig
from .typings import ScoreEntry

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[ScoreEntry])


class Storage(ABC):
  """A string key/value store, the shape of a browser's localStorage."""

  @abstractmethod
  def get_item(self, key: str) -> str | None:
    """Return the stored text, or None when the key was never written."""

  @abstractmethod
  def set_item(self, key: str, value: str) -> None:
    ...


class MemoryStorage(Storage):
  def __init__(self, items: dict[str, str] | None = None) -> None:
    self._items = dict(items or {})

  def get_item(self, key: str) -> str | None:
    return self._items.get(key)

  def set_item(self, key: str, value: str) -> None:
    self._items[key] = value


class FileStorage(Storage):
  """One `<key>.json` file per key inside `directory`."""

  def __init__(self, directory: str | Path) -> None:
    self.directory = Path(directory)

  def _path(self, key: str) -> Path:
    return self.directory / f"{key}.json"

  def get_item(self, key: str) -> str | None:
    path = self._path(key)
    if not path.exists():
      return None
    return path.read_text(encoding="utf-8")

  def set_item(self, key: str, value: str) -> None:
    self.directory.mkdir(parents=True, exist_ok=True)
    self._path(key).write_text(value, encoding="utf-8")


class ScoreStore:
  def __init__(self, storage: Storage | None = None, *, key: str | None = None, limit: int | None = None,
               config: GameConfig | None = None) -> None:
    config = config or GameConfig()
    self._storage = storage if storage is not None else MemoryStorage()
    self.key = key or config.storage_key
    self.limit = limit or config.leaderboard_size

  def load_top(self) -> list[ScoreEntry]:
    """Return the ranked leaderboard.

    Missing data is an empty leaderboard. Data that does not parse as a
    list of records is treated the same way instead of failing.
    """
    try:
      raw = self._storage.get_item(self.key)
      if raw is None:
        return []
      entries = _ENTRIES.validate_json(raw)
    except (UnicodeDecodeError, ValidationError) as e:
      logger.warning("discarding unreadable leaderboard %r: %s", self.key, e)
      return []
    return self._rank(entries)

  def submit(self, entry: ScoreEntry) -> list[ScoreEntry]:
    """Insert `entry`, keep the best `limit` results, persist and return them."""
    ranked = self._rank(self.load_top() + [entry])
    self._storage.set_item(self.key, _ENTRIES.dump_json(ranked, by_alias=True).decode("utf-8"))
    logger.debug("leaderboard %r now holds %d entries", self.key, len(ranked))
    return ranked

  def _rank(self, entries: list[ScoreEntry]) -> list[ScoreEntry]:
    # sorted() is stable, so earlier entries win ties
    return sorted(entries, key=lambda e: e.score, reverse=True)[:self.limit]
