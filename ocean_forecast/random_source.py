"""Seeded 32-bit pseudo-random source (mulberry32)."""

from __future__ import annotations

from typing import Callable

_MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_SCALE = 4294967296.0

RandomSource = Callable[[], float]


def _imul(a: int, b: int) -> int:
  return (a * b) & _MASK32


def mulberry32(seed: int) -> RandomSource:
  """Creates a generator returning reproducible floats in [0, 1).

  The state is held as an unsigned 32-bit integer and every intermediate
  value is masked back to 32 bits, so the stream is bit-identical to the
  reference mulberry32 construction for any integer seed (negative seeds
  wrap the way a signed 32-bit cast does).
  """
  state = seed & _MASK32

  def next_float() -> float:
    nonlocal state
    state = (state + _INCREMENT) & _MASK32
    t = _imul(state ^ (state >> 15), state | 1)
    t = ((t + _imul(t ^ (t >> 7), t | 61)) & _MASK32) ^ t
    return ((t ^ (t >> 14)) & _MASK32) / _SCALE

  return next_float
