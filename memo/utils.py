from typing import TypeVar

T = TypeVar('T')


def _replace_tuple(v: tuple[T, ...], i: int, d: T) -> tuple[T, ...]:
  """Return a new tuple where index `i` is replaced with `d`.

  This helper keeps code that needs to update a single element of an
  immutable tuple concise and avoids the common pattern `lst = list(t); lst[i]=d; t=tuple(lst)`.
  """
  if not (0 <= i < len(v)):
    raise IndexError("index out of range")
  return v[:i] + (d,) + v[i+1:]


def format_time(seconds: int) -> str:
  """Format a second count as `M:SS` (minutes are not padded)."""
  minutes, rest = divmod(max(0, int(seconds)), 60)
  return f"{minutes}:{rest:02d}"
