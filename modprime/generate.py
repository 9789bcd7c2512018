"""Rejection-sampling generators for random primes and safe primes.

Candidates go through the cheap filters first (trial division, the safe-prime
sieve) and only survivors pay for Miller-Rabin. A rejected candidate is simply
discarded and a new one drawn; rejection is never reported as an error.
"""

from __future__ import annotations

import logging
import time

from .config import settings
from .metrics import generation_metrics
from .primality import miller_rabin, trial_divide
from .random_source import RandomSource, random_exact_bits
from .small_primes import MIN_PRIME_BITS, MIN_SAFE_PRIME_BITS, ODD_SMALL_PRIMES

logger = logging.getLogger(__name__)


def has_doomed_partner(q: int) -> bool:
    """Return True if ``2*q + 1`` is divisible by an odd small prime.

    ``q % sp == sp // 2`` is equivalent to ``2*q + 1 == 0 (mod sp)`` for odd
    ``sp``, so ``p`` never has to be reduced.
    """
    for sp in ODD_SMALL_PRIMES:
        if q % sp == sp >> 1:
            return True
    return False


def _check_bits(nbits: int, minimum: int, name: str) -> None:
    if nbits < minimum:
        raise ValueError(
            f"{name} must be >= {minimum} (no prime of that size survives trial division)"
        )


def random_prime(nbits: int, rng: RandomSource | None = None, *, trials: int | None = None) -> int:
    """Return a random probable prime with exactly ``nbits`` bits.

    ``trials`` defaults to ``settings.generation_trials``.
    """
    _check_bits(nbits, MIN_PRIME_BITS, "nbits")
    trials = settings.generation_trials if trials is None else trials

    started = time.perf_counter()
    attempts = 0
    while True:
        attempts += 1
        generation_metrics.record_candidate("prime")
        candidate = random_exact_bits(nbits, rng) | 1

        if not trial_divide(candidate):
            generation_metrics.record_rejection("prime", "trial_division")
            continue
        if not miller_rabin(candidate, trials, rng):
            generation_metrics.record_rejection("prime", "miller_rabin")
            continue

        elapsed = time.perf_counter() - started
        generation_metrics.record_accepted("prime", elapsed)
        logger.debug(
            "Generated prime",
            extra={"nbits": nbits, "attempts": attempts, "elapsed_ms": round(elapsed * 1000, 3)},
        )
        return candidate


def random_safe_prime(nbits: int, rng: RandomSource | None = None, *, trials: int | None = None) -> int:
    """Return a random safe prime ``p = 2q + 1`` with exactly ``nbits`` bits.

    Both ``p`` and the Sophie Germain prime ``q`` pass ``trials`` rounds of
    Miller-Rabin (default ``settings.generation_trials``).
    """
    _check_bits(nbits, MIN_SAFE_PRIME_BITS, "nbits")
    trials = settings.generation_trials if trials is None else trials

    started = time.perf_counter()
    attempts = 0
    while True:
        attempts += 1
        generation_metrics.record_candidate("safe_prime")
        q = random_exact_bits(nbits - 1, rng) | 1
        # q has its top bit set, so p has exactly nbits bits.
        p = (q << 1) + 1

        if not trial_divide(q):
            generation_metrics.record_rejection("safe_prime", "trial_division_q")
            continue
        if has_doomed_partner(q):
            generation_metrics.record_rejection("safe_prime", "safe_prime_sieve")
            continue
        if not trial_divide(p):
            generation_metrics.record_rejection("safe_prime", "trial_division_p")
            continue
        if not miller_rabin(q, trials, rng):
            generation_metrics.record_rejection("safe_prime", "miller_rabin_q")
            continue
        if not miller_rabin(p, trials, rng):
            generation_metrics.record_rejection("safe_prime", "miller_rabin_p")
            continue

        elapsed = time.perf_counter() - started
        generation_metrics.record_accepted("safe_prime", elapsed)
        logger.debug(
            "Generated safe prime",
            extra={"nbits": nbits, "attempts": attempts, "elapsed_ms": round(elapsed * 1000, 3)},
        )
        return p
