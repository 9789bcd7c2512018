"""Fixed table of small primes used for cheap trial division."""

from __future__ import annotations

from typing import List, Tuple

SMALL_PRIME_COUNT = 256


def _first_primes(count: int) -> List[int]:
    # The 257th prime is 1621, well inside the first limit.
    limit = 2048
    while True:
        sieve = bytearray([1]) * (limit + 1)
        sieve[0] = sieve[1] = 0
        for i in range(2, int(limit**0.5) + 1):
            if sieve[i]:
                sieve[i * i :: i] = bytearray(len(range(i * i, limit + 1, i)))
        primes = [i for i, flag in enumerate(sieve) if flag]
        if len(primes) >= count:
            return primes[:count]
        limit *= 2


_PRIMES = _first_primes(SMALL_PRIME_COUNT + 1)

SMALL_PRIMES: Tuple[int, ...] = tuple(_PRIMES[:-1])

# Everything after 2; the safe-prime sieve relies on sp being odd.
ODD_SMALL_PRIMES: Tuple[int, ...] = SMALL_PRIMES[1:]

LARGEST_SMALL_PRIME_BITS: int = SMALL_PRIMES[-1].bit_length()

# Trial division rejects every table prime, so the smallest prime a generator
# can return is the first one past the table.
MIN_PRIME_BITS: int = _PRIMES[-1].bit_length()

# q = (p - 1) / 2 must itself clear the table.
MIN_SAFE_PRIME_BITS: int = MIN_PRIME_BITS + 1
