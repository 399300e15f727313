"""Exact integer arithmetic behind the RSA walkthrough.

Everything here works on Python's arbitrary-precision `int` and is a pure function of its arguments. Nothing is
delegated to `pow()` with negative exponents or to `math` helpers, so every step of the algebra can be read (and
traced) in this module.

Typical usage example:

    is_prime(13)
    primes_up_to(100)
    modular_inverse(65537, 120)
    mod_exp(88, 65537, 143)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsateach.errors import InvalidInputError
from rsateach.errors import InvalidModulusError
from rsateach.errors import NonInvertibleExponentError
from rsateach.errors import UnsupportedExponentError


def is_integer(value) -> bool:
    """True for real integers. Booleans are not accepted as numbers."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_integer(name: str, value) -> int:
    """Return `value` unchanged if it is an integer, raise `InvalidInputError` otherwise."""
    if not is_integer(value):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    return value


def parse_integer(text: str | int, name: str = "value") -> int:
    """Translate user text into an integer.

    Accepts plain decimal text as well as `0x`, `0o` and `0b` prefixed literals. Surrounding whitespace is ignored.

    Args:
        text: The text to parse. Integers pass through untouched.
        name: Name of the value, used in the error message.

    Returns:
        The parsed integer.

    Raises:
        InvalidInputError: If `text` is not an integer literal.
    """
    if is_integer(text):
        return text
    if not isinstance(text, str):
        raise InvalidInputError(f"{name} must be an integer, got {text!r}")
    cleaned = text.strip()
    body = cleaned.lstrip("+-")
    base = 0 if body[:2].lower() in ("0x", "0o", "0b") else 10
    try:
        return int(cleaned, base)
    except ValueError:
        raise InvalidInputError(f"{name} must be an integer, got {text!r}") from None


def is_prime(x) -> bool:
    """Deterministic primality test by trial division.

    Candidates 2 and 3 are handled up-front, then only divisors of the form 6k-1 and 6k+1 are tried, up to and
    including the integer square root of `x`. Works on the full-precision value, so it is exact for any size but only
    practical for teaching-scale inputs.

    Args:
        x: The candidate. Anything that is not an integer is rejected.

    Returns:
        True if `x` is prime, False otherwise.
    """
    if not is_integer(x) or x <= 1:
        return False
    if x <= 3:
        return True
    if x % 2 == 0 or x % 3 == 0:
        return False
    i = 5
    while i * i <= x:
        if x % i == 0 or x % (i + 2) == 0:
            return False
        i += 6
    return True


def primes_up_to(limit: int = 100) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Produces the table of small primes shown next to the key generation form, so learners can pick their p and q.
    Sieves odd numbers only, and only until root.

    Args:
        limit: Inclusive upper bound. Defaults to 100. Must be >= 0.

    Returns:
        Ascending list of primes up to `limit`.

    Raises:
        InvalidInputError: If `limit` is negative or not an integer.
    """
    require_integer("limit", limit)
    if limit < 0:
        raise InvalidInputError("limit must be >= 0")
    if limit < 2:
        return []
    i_size = (limit - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(int(limit**0.5) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]


def residue(number: int, modulus: int, trace: list[str] | None = None) -> int:
    """Reduces `number` onto the clock face of `modulus`.

    Negative numbers wrap around the same way positive ones do, so the result always lands in [0, modulus).

    Args:
        number: Any integer.
        modulus: Positive modulus, the number of positions on the clock.
        trace: Optional list that receives the division and the clock position.

    Returns:
        number mod modulus, in [0, modulus).

    Raises:
        InvalidModulusError: If `modulus` is zero or negative.
    """
    require_integer("number", number)
    require_integer("modulus", modulus)
    if modulus <= 0:
        raise InvalidModulusError(f"Modulus must be positive, got {modulus}")
    quotient, rest = divmod(number, modulus)
    if trace is not None:
        trace.append(f"{number} = {quotient} × {modulus} + {rest}")
        trace.append(f"{number} mod {modulus} = {rest}")
        trace.append(f"Clock position: {rest} of {modulus} ({rest * 360 / modulus:g}°)")
    return rest


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*s + b*t = g = gcd(a, b).

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The greatest common divisor, followed by the Bezout coefficients s and t.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    if r0 < 0:
        r0, s0, t0 = -r0, -s0, -t0
    return r0, s0, t0


def modular_inverse(a: int, m: int) -> int:
    """Computes the inverse of `a` modulo `m` with the Extended Euclidean Algorithm.

    Args:
        a: The value to invert.
        m: The modulus. Must be positive.

    Returns:
        The unique x in [0, m) with a*x = 1 (mod m).

    Raises:
        InvalidModulusError: If `m` is not positive.
        NonInvertibleExponentError: If gcd(a, m) != 1.
    """
    require_integer("a", a)
    require_integer("m", m)
    if m <= 0:
        raise InvalidModulusError(f"Modulus must be positive, got {m}")
    g, s, _ = egcd(a % m, m)
    if g != 1:
        raise NonInvertibleExponentError(f"{a} has no inverse modulo {m}: gcd({a}, {m}) = {g}")
    return s % m


def mod_exp(base: int, exponent: int, modulus: int, trace: list[str] | None = None) -> int:
    """Binary (square-and-multiply) modular exponentiation.

    Walks the exponent from its lowest bit upwards. The accumulator is multiplied by the current base whenever the
    bit is set, and the base is squared after every bit. Every intermediate is reduced into [0, modulus).

    Args:
        base: Any integer, reduced modulo `modulus` first.
        exponent: Non-negative exponent.
        modulus: Positive modulus.
        trace: Optional list that receives one line per processed exponent bit.

    Returns:
        base**exponent mod modulus, in [0, modulus).

    Raises:
        InvalidModulusError: If `modulus` is zero (or negative).
        UnsupportedExponentError: If `exponent` is negative.
    """
    require_integer("base", base)
    require_integer("exponent", exponent)
    require_integer("modulus", modulus)
    if modulus == 0:
        raise InvalidModulusError("Modulus must be non-zero")
    if modulus < 0:
        raise InvalidModulusError(f"Modulus must be positive, got {modulus}")
    if exponent < 0:
        raise UnsupportedExponentError("Negative exponents are not supported")
    base %= modulus
    result = 1 % modulus
    bit = 0
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
            if trace is not None:
                trace.append(f"  bit {bit} = 1: acc = acc × {base} mod {modulus} = {result}")
        elif trace is not None:
            trace.append(f"  bit {bit} = 0: acc = {result}")
        base = (base * base) % modulus
        exponent >>= 1
        bit += 1
    return result
