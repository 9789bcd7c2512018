"""Random integers of a fixed bit length drawn from a pluggable byte source.

Every randomized helper takes an optional ``rng``. When omitted the operating
system CSPRNG is used; tests pass a :class:`SeededRandomSource` instead.
"""

from __future__ import annotations

import random
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    def random_bytes(self, n: int) -> bytes:
        """Return ``n`` random bytes."""


class SystemRandomSource:
    """Cryptographically secure bytes from the operating system."""

    def random_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class SeededRandomSource:
    """Deterministic bytes for reproducible tests. Not for key material."""

    def __init__(self, seed: int | str | bytes) -> None:
        self.seed = seed
        self._rnd = random.Random(seed)

    def random_bytes(self, n: int) -> bytes:
        return self._rnd.randbytes(n)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"


system_random = SystemRandomSource()


def _resolve(rng: RandomSource | None) -> RandomSource:
    return system_random if rng is None else rng


def _sample(nbits: int, rng: RandomSource | None) -> int:
    if nbits < 0:
        raise ValueError("nbits must be >= 0")
    nbytes = (nbits + 7) // 8
    buf = _resolve(rng).random_bytes(nbytes)
    if len(buf) != nbytes:
        raise ValueError(f"random source returned {len(buf)} bytes, expected {nbytes}")
    # Drop the bits introduced by rounding up to whole bytes.
    return int.from_bytes(buf, byteorder="big", signed=False) >> (nbytes * 8 - nbits)


def random_up_to_bits(nbits: int, rng: RandomSource | None = None) -> int:
    """Uniform integer in ``[0, 2**nbits)``."""
    if nbits == 0:
        return 0
    return _sample(nbits, rng)


def random_exact_bits(nbits: int, rng: RandomSource | None = None) -> int:
    """Uniform integer whose bit length is exactly ``nbits`` (top bit forced)."""
    if nbits == 0:
        return 0
    return _sample(nbits, rng) | (1 << (nbits - 1))


def random_in_range(low: int, high: int, rng: RandomSource | None = None) -> int:
    """Uniform integer in the inclusive range ``[low, high]``."""
    if high < low:
        raise ValueError(f"empty range [{low}, {high}]")
    span = high - low + 1
    nbits = span.bit_length()
    while True:
        offset = random_up_to_bits(nbits, rng)
        if offset < span:
            return low + offset
