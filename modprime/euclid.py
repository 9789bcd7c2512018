"""Extended Euclidean algorithm plus modular inverse and division built on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidModulus, NoModularInverse


@dataclass(frozen=True, slots=True)
class ExtendedEuclideanResult:
    """``gcd == a*bezout_x + b*bezout_y``, ``a == gcd*reduced_a``, ``b == gcd*reduced_b``.

    When ``gcd == 1`` this also gives ``a*bezout_x == 1 (mod b)`` and
    ``b*bezout_y == 1 (mod a)``.
    """

    gcd: int
    bezout_x: int
    bezout_y: int
    reduced_a: int
    reduced_b: int


@dataclass(slots=True)
class _Step:
    # remainder == x*a + y*b
    remainder: int
    x: int
    y: int


def _div_rem_euclid(a: int, b: int) -> Tuple[int, int]:
    q, r = divmod(a, b)
    # divmod gives r the sign of b; shift to 0 <= r < |b|.
    if r < 0:
        q += 1
        r -= b
    return q, r


def extended_gcd(a: int, b: int) -> ExtendedEuclideanResult:
    """Run the remainder sequence of ``(a, b)`` tracking Bezout coefficients.

    ``extended_gcd(0, 0)`` is degenerate: it reports ``gcd == 0`` and the
    reduced values carry no meaning.
    """
    prev = _Step(remainder=a, x=1, y=0)  # a == 1*a + 0*b
    curr = _Step(remainder=b, x=0, y=1)  # b == 0*a + 1*b

    while curr.remainder != 0:
        q, r = _div_rem_euclid(prev.remainder, curr.remainder)
        prev, curr = curr, _Step(remainder=r, x=prev.x - q * curr.x, y=prev.y - q * curr.y)

    # At this point curr.y and curr.x are -/+ a/gcd and b/gcd.
    if (a < 0) != (curr.y < 0):
        curr.y = -curr.y
    if (b < 0) != (curr.x < 0):
        curr.x = -curr.x

    gcd, bezout_x, bezout_y = prev.remainder, prev.x, prev.y
    if gcd < 0:
        # Only reachable when a negative b divides a, or b == 0 and a < 0.
        gcd, bezout_x, bezout_y = -gcd, -bezout_x, -bezout_y

    return ExtendedEuclideanResult(
        gcd=gcd,
        bezout_x=bezout_x,
        bezout_y=bezout_y,
        reduced_a=curr.y,
        reduced_b=curr.x,
    )


def _require_modulus(p: int) -> None:
    if p <= 1:
        raise InvalidModulus(p)


def modular_inverse(a: int, p: int) -> int:
    """Return ``x`` in ``[0, p)`` with ``a*x % p == 1``.

    Raises:
        InvalidModulus: if ``p <= 1``.
        NoModularInverse: if ``gcd(a, p) != 1``.
    """
    _require_modulus(p)
    res = extended_gcd(a, p)
    if res.gcd != 1:
        raise NoModularInverse(a, p, res.gcd)
    return res.bezout_x % p


def modular_divide(a: int, b: int, p: int) -> int:
    """Divide ``a`` by ``b`` modulo ``p`` after cancelling their common factor.

    The result ``x`` satisfies ``reduced_b*x == reduced_a (mod p)``. When
    ``b`` divides ``a`` the exact quotient is returned without reduction.

    Raises:
        InvalidModulus: if ``p <= 1``.
        NoModularInverse: if the reduced divisor shares a factor with ``p``.
    """
    _require_modulus(p)
    res = extended_gcd(a, b)
    if res.reduced_b == 1:
        return res.reduced_a
    return res.reduced_a * modular_inverse(res.reduced_b, p) % p
