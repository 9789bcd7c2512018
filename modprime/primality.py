"""Trial division and the Miller-Rabin probabilistic primality test."""

from __future__ import annotations

from .config import settings
from .random_source import RandomSource, random_in_range
from .small_primes import SMALL_PRIMES

_SMALL_PRIME_SET = frozenset(SMALL_PRIMES)


def trial_divide(n: int) -> bool:
    """Return False if any small prime divides ``n``.

    A table prime divides itself, so ``trial_divide(3)`` is False.
    """
    for sp in SMALL_PRIMES:
        if n % sp == 0:
            return False
    return True


def _split_power_of_two(m: int) -> tuple[int, int]:
    # m == 2**s * d with d odd
    s = (m & -m).bit_length() - 1
    return s, m >> s


def miller_rabin(n: int, trials: int, rng: RandomSource | None = None) -> bool:
    """Miller-Rabin test with ``trials`` random witnesses.

    False means ``n`` is composite. True means ``n`` is prime except with
    probability at most ``4**-trials``.
    """
    if n < 4:
        # No witness fits in [2, n-2].
        return n in (2, 3)

    n_minus_one = n - 1
    s, d = _split_power_of_two(n_minus_one)

    for _ in range(trials):
        a = random_in_range(2, n - 2, rng)
        x = pow(a, d, n)

        # Strong probable prime to base a.
        if x == 1 or x == n_minus_one:
            continue

        # x runs through a**(2**r * d) % n; each x is a square root of the next.
        for _r in range(s):
            x_was_minus_one = x == n_minus_one
            x = pow(x, 2, n)
            if x == 1:
                if not x_was_minus_one:
                    # Non-trivial square root of 1, impossible modulo a prime.
                    return False
                # Once 1, every further square stays 1.
                break
        else:
            # a**(n-1) % n != 1: fails the Fermat test.
            return False
    return True


def is_prime(n: int, trials: int | None = None, rng: RandomSource | None = None) -> bool:
    """Trial division followed by Miller-Rabin.

    ``trials`` defaults to ``settings.is_prime_trials``.
    """
    if n < 2:
        return False
    if n in _SMALL_PRIME_SET:
        return True
    if not trial_divide(n):
        return False
    return miller_rabin(n, settings.is_prime_trials if trials is None else trials, rng)
