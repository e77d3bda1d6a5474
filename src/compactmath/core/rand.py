"""Uniform random helpers backed by one process-wide numpy Generator."""

from enum import IntEnum
from typing import MutableSequence, Optional, TypeVar

import numpy as np

T = TypeVar("T")

INT32_MAX = 2**31 - 1

_rng = np.random.default_rng()


class Coin(IntEnum):
    NONE = 0
    HEADS = 1
    TAILS = 2


def seed(value: Optional[int] = None) -> None:
    """Re-seed the shared generator (``None`` draws fresh OS entropy)."""
    global _rng
    _rng = np.random.default_rng(value)


def random_int(lo: Optional[int] = None, hi: Optional[int] = None) -> int:
    """Random integer in a half-open range.

    ``random_int()`` covers ``[0, 2**31 - 1)``, ``random_int(n)`` covers
    ``[0, n)`` and ``random_int(lo, hi)`` covers ``[lo, hi)``.
    """
    if lo is None:
        lo, hi = 0, INT32_MAX
    elif hi is None:
        lo, hi = 0, lo
    return int(_rng.integers(lo, hi))


def random_float(lo: Optional[float] = None, hi: Optional[float] = None) -> float:
    """Random float32 value in ``[0, 1)``, ``[0, lo)`` or ``[lo, hi)``."""
    value = _rng.random(dtype=np.float32)
    if lo is None:
        return float(value)
    if hi is None:
        return float(value * np.float32(lo))
    return float(value * np.float32(hi - lo) + np.float32(lo))


def random_bool(bias: Optional[float] = None) -> bool:
    """Fair coin by default; with ``bias`` the chance of True is ``bias``."""
    if bias is None:
        return random_int(2) == 0
    return random_float() <= bias


def die_roll() -> int:
    return random_int(1, 7)


def coin_flip() -> Coin:
    return Coin(random_int(1, 3))


def shuffle(items: MutableSequence[T], passes: int = 1) -> MutableSequence[T]:
    """Shuffle ``items`` in place by random swaps and return it.

    Each pass swaps every position with a uniformly chosen one; at least one
    pass is always made.
    """
    n = len(items)
    for _ in range(max(1, passes)):
        for i in range(n):
            r = random_int(n)
            items[i], items[r] = items[r], items[i]
    return items
