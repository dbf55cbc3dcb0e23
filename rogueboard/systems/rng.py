"""Seeded draws for board generation and autoplay, hashed with xxhash.

A draw is addressed by a ``Domain`` (what is being decided), a key (the
level number, or 0 for run-wide draws) and an index (the draw's position
within that decision: cell index, item ordinal, input number). Generating
level 7 therefore yields the same board whether or not levels 1-6 were
generated first, and adding a draw to one domain never shifts another.
"""

from __future__ import annotations

import struct
from typing import Sequence, TypeVar

import xxhash

from rogueboard.core.enums import Domain

T = TypeVar("T")


class DeterministicRNG:
    """Run-scoped random source with no cursor to advance."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, level: int, draw: int) -> int:
        payload = struct.pack("<qiqi", self._seed, domain.value, level, draw)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, level: int, draw: int) -> float:
        """Uniform in [0.0, 1.0)."""
        return self._hash(domain, level, draw) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, level: int, draw: int, low: int, high: int) -> int:
        """Uniform over ``low..high``, both ends included (count draws, pool picks)."""
        f = self.next_float(domain, level, draw)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, level: int, draw: int, probability: float = 0.5) -> bool:
        return self.next_float(domain, level, draw) < probability

    def choice(self, domain: Domain, level: int, draw: int, items: Sequence[T]) -> T:
        """One element of a non-empty sequence, e.g. the next autoplay input."""
        return items[self.next_int(domain, level, draw, 0, len(items) - 1)]
