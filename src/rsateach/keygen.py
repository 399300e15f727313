"""Key derivation from two user-supplied primes.

Derives the textbook key pair (n, phi, e, d) and narrates every step, so the learner can follow how the private
exponent falls out of the extended Euclidean algorithm. The module holds no state: each call either returns a complete
`KeyMaterial` or raises, never anything in between.

Typical usage example:

    keys, steps = generate_keys(11, 13)
    print("\n".join(steps))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import typing

from rsateach import arith
from rsateach.errors import InvalidPrimeError
from rsateach.errors import NonCoprimeExponentError
from rsateach.errors import UnsupportedExponentError

PUBLIC_EXPONENT: int = 65537

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")


class Derivation(typing.NamedTuple, typing.Generic[T]):
    """A successful result together with the steps that produced it."""
    value: T
    steps: tuple[str, ...]


class KeyMaterial(typing.NamedTuple):
    """A derived RSA key. Immutable; a new generation replaces it as a whole.

    Attributes:
        p: First prime.
        q: Second prime.
        n: The modulus, p × q.
        phi: Euler's totient of n, (p-1) × (q-1).
        e: The public exponent.
        d: The private exponent, e⁻¹ mod phi.
    """
    p: int
    q: int
    n: int
    phi: int
    e: int
    d: int

    @property
    def public(self) -> tuple[int, int]:
        return self.n, self.e

    @property
    def private(self) -> tuple[int, int]:
        return self.n, self.d


def _check_primes(p, q) -> None:
    if not arith.is_prime(p):
        raise InvalidPrimeError("not_prime", "p", p)
    if not arith.is_prime(q):
        raise InvalidPrimeError("not_prime", "q", q)
    if p == q:
        raise InvalidPrimeError("equal", "p, q", p)


def generate_keys(p: int, q: int, pub: int = PUBLIC_EXPONENT) -> Derivation[KeyMaterial]:
    """Derives an RSA key pair from two distinct primes.

    Computes n and phi, checks that the public exponent shares no factor with phi, then inverts it with the extended
    Euclidean algorithm. The trace names n, phi, e and d in that order, each with its formula and value.

    Args:
        p: First prime.
        q: Second prime, distinct from `p`.
        pub: The public exponent. Defaults (and recommended) to use 65537.

    Returns:
        The key material and its derivation steps.

    Raises:
        InvalidPrimeError: If `p` or `q` is not prime, or `p == q`.
        UnsupportedExponentError: If `pub` is not an integer >= 2.
        NonCoprimeExponentError: If `pub` divides phi.
        NonInvertibleExponentError: If `pub` has no inverse modulo phi.
    """
    _check_primes(p, q)
    if not arith.is_integer(pub) or pub < 2:
        raise UnsupportedExponentError(f"Public exponent must be an integer >= 2, got {pub!r}")
    n = p * q
    p_1, q_1 = p - 1, q - 1
    phi = p_1 * q_1
    if phi % pub == 0:
        raise NonCoprimeExponentError(
            f"e = {pub} divides φ(n) = {phi}, so it has no inverse. Try different primes.")
    d = arith.modular_inverse(pub, phi)
    standard = " (standard value)" if pub == PUBLIC_EXPONENT else ""
    steps = (
        f"Step 1: Calculate N = p × q = {p} × {q} = {n}",
        f"Step 2: Calculate φ(n) = (p-1) × (q-1) = {p_1} × {q_1} = {phi}",
        f"Step 3: Choose public exponent e = {pub}{standard}",
        "Step 4: Calculate private exponent d ≡ e⁻¹ (mod φ(n))",
        f"        d ≡ {pub}⁻¹ (mod {phi}) = {d}",
    )
    logger.debug("Derived key pair for p=%d, q=%d: n=%d, e=%d", p, q, n, pub)
    return Derivation(KeyMaterial(p, q, n, phi, pub, d), steps)
