"""Error kinds raised by the modular arithmetic helpers."""

from __future__ import annotations


class ModularArithmeticError(ValueError):
    """Base class for precondition failures in modular arithmetic."""


class InvalidModulus(ModularArithmeticError):
    """Raised when a modulus is not strictly greater than 1."""

    def __init__(self, modulus: int) -> None:
        self.modulus = modulus
        super().__init__(f"modulus must be > 1 (got {modulus})")


class NoModularInverse(ModularArithmeticError):
    """Raised when a value shares a factor with the modulus."""

    def __init__(self, value: int, modulus: int, gcd: int) -> None:
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
        super().__init__(f"No modular inverse for a={value} mod p={modulus} (gcd={gcd}).")
