"""Callback scheduling for the engine's timed triggers.

The engine never sleeps. It asks a `Scheduler` to run a callback later
and keeps the returned handle so the callback can be cancelled when the
round it belongs to ends or is replaced.

- `AsyncioScheduler` runs callbacks on an asyncio event loop.
- `VirtualScheduler` keeps its own clock that only moves when `advance`
  is called; simulations, the gym environment and tests use it.
"""
import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Handle(Protocol):
  def cancel(self) -> None: ...


class Scheduler(ABC):
  @abstractmethod
  def time(self) -> float:
    """Return the scheduler's current clock reading in seconds."""

  @abstractmethod
  def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Handle:
    """Run `callback(*args)` once after `delay` seconds."""


class AsyncioScheduler(Scheduler):
  """Schedule on an asyncio loop.

  When no loop is given the running loop is looked up on every call, so
  an engine can be built before the loop starts.
  """

  def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
    self._loop = loop

  @property
  def loop(self) -> asyncio.AbstractEventLoop:
    return self._loop if self._loop is not None else asyncio.get_running_loop()

  def time(self) -> float:
    return self.loop.time()

  def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> asyncio.TimerHandle:
    return self.loop.call_later(delay, callback, *args)


class VirtualHandle:
  __slots__ = ("when", "_callback", "_args", "_cancelled")

  def __init__(self, when: float, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
    self.when = when
    self._callback = callback
    self._args = args
    self._cancelled = False

  def cancel(self) -> None:
    self._cancelled = True

  def cancelled(self) -> bool:
    return self._cancelled

  def _run(self) -> None:
    self._callback(*self._args)


class VirtualScheduler(Scheduler):
  """A deterministic clock driven by explicit `advance` calls.

  Callbacks due at the same instant run in the order they were scheduled.
  A callback may schedule further callbacks; those also run within the
  same `advance` if they fall due before its deadline.
  """

  def __init__(self, start: float = 0.0) -> None:
    self._now = start
    self._queue: list[tuple[float, int, VirtualHandle]] = []
    self._seq = itertools.count()

  def time(self) -> float:
    return self._now

  def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> VirtualHandle:
    if delay < 0:
      raise ValueError(f"delay must not be negative, got {delay}")
    handle = VirtualHandle(self._now + delay, callback, args)
    heapq.heappush(self._queue, (handle.when, next(self._seq), handle))
    return handle

  def advance(self, seconds: float) -> int:
    """Move the clock forward, running every callback that falls due.

    Returns the number of callbacks that ran.
    """
    if seconds < 0:
      raise ValueError(f"cannot move the clock backwards by {seconds}")
    deadline = self._now + seconds
    ran = 0
    while self._queue and self._queue[0][0] <= deadline:
      when, _, handle = heapq.heappop(self._queue)
      if handle.cancelled():
        continue
      self._now = when
      handle._run()
      ran += 1
    self._now = deadline
    return ran

  def pending(self) -> int:
    """Number of scheduled callbacks that have not run or been cancelled."""
    return sum(1 for _, _, h in self._queue if not h.cancelled())
