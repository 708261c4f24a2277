import pytest

from memo import Engine, MemoryStorage, ScoreStore, VirtualScheduler

from helpers import RecordingSurface


@pytest.fixture
def scheduler() -> VirtualScheduler:
  return VirtualScheduler()


@pytest.fixture
def store() -> ScoreStore:
  return ScoreStore(MemoryStorage())


@pytest.fixture
def surface() -> RecordingSurface:
  return RecordingSurface()


@pytest.fixture
def engine(scheduler, store, surface) -> Engine:
  return Engine(scheduler=scheduler, store=store, surface=surface, difficulty="easy")
