"""Arbitrary-precision modular arithmetic and probabilistic prime generation."""

from .errors import InvalidModulus, ModularArithmeticError, NoModularInverse
from .euclid import ExtendedEuclideanResult, extended_gcd, modular_divide, modular_inverse
from .generate import has_doomed_partner, random_prime, random_safe_prime
from .primality import is_prime, miller_rabin, trial_divide
from .random_source import (
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    random_exact_bits,
    random_in_range,
    random_up_to_bits,
)
from .small_primes import SMALL_PRIMES

__all__ = [
    "ExtendedEuclideanResult",
    "InvalidModulus",
    "ModularArithmeticError",
    "NoModularInverse",
    "RandomSource",
    "SMALL_PRIMES",
    "SeededRandomSource",
    "SystemRandomSource",
    "extended_gcd",
    "has_doomed_partner",
    "is_prime",
    "miller_rabin",
    "modular_divide",
    "modular_inverse",
    "random_exact_bits",
    "random_in_range",
    "random_prime",
    "random_safe_prime",
    "random_up_to_bits",
    "trial_divide",
]
