"""Seeded, reproducible pseudo-random generator (Mulberry32)."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from numbers import Integral, Real
from typing import TypeVar

T = TypeVar("T")

UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 0x1_0000_0000
_SEED_INCREMENT = 0x6D2B79F5


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _imul(a: int, b: int) -> int:
    return (a * b) & UINT32_MASK


class RNG:
    """Deterministic Mulberry32 generator.

    Not cryptographically secure. State is a single 32-bit integer, so equal
    seeds yield bit-identical draw sequences on every platform.
    """

    __slots__ = ("_initial_seed", "_seed")

    def __init__(self, seed: int) -> None:
        if not _is_int(seed):
            raise TypeError("seed must be an integer")
        self._initial_seed = self._seed = int(seed) & UINT32_MASK

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        if not _is_int(value):
            raise TypeError("seed must be an integer")
        self._initial_seed = self._seed = int(value) & UINT32_MASK

    @property
    def initial_seed(self) -> int:
        return self._initial_seed

    def reset(self) -> None:
        """Rewind to the initial seed."""
        self._seed = self._initial_seed

    def next(self) -> float:
        """Return the next float in [0, 1)."""
        self._seed = (self._seed + _SEED_INCREMENT) & UINT32_MASK
        a = self._seed
        t = _imul(a ^ (a >> 15), 1 | a)
        t ^= (t + _imul(t ^ (t >> 7), 61 | t)) & UINT32_MASK
        return ((t ^ (t >> 14)) & UINT32_MASK) / UINT32_RANGE

    def next_float(self, min_value: float, max_value: float) -> float:
        """Return a float in [min_value, max_value)."""
        for value in (min_value, max_value):
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise TypeError("bounds must be finite numbers")
        if min_value >= max_value:
            raise ValueError("invalid range: min >= max")
        return min_value + self.next() * (max_value - min_value)

    def next_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in [min_value, max_value)."""
        if not _is_int(min_value) or not _is_int(max_value):
            raise TypeError("bounds must be integers")
        if min_value >= max_value:
            raise ValueError("invalid range: min >= max")
        return int(min_value) + math.floor(self.next() * (max_value - min_value))

    def pick(self, sequence: Sequence[T]) -> T:
        """Return a uniformly selected element."""
        if not isinstance(sequence, Sequence):
            raise TypeError("pick requires a sequence")
        if not sequence:
            raise ValueError("cannot pick from an empty sequence")
        return sequence[self.next_int(0, len(sequence))]

    def shuffle(self, items: Iterable[T]) -> list[T]:
        """Return a Fisher-Yates shuffled copy; the input is left untouched."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.next_int(0, i + 1)
            result[i], result[j] = result[j], result[i]
        return result

    def clone(self) -> RNG:
        """Return an independent generator at the same position."""
        copy = RNG(self._initial_seed)
        copy._seed = self._seed
        return copy

    def __repr__(self) -> str:
        return f"RNG(initial_seed={self._initial_seed}, seed={self._seed})"
