# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

import pytest
import sympy

from rsateach import arith
from rsateach import errors

base_primetest_cases = [
    # Edge Cases (neither)
    (0, False),
    (1, False),
    # Known Primes
    (2, True),
    (3, True),
    (5, True),
    (7, True),
    (101, True),
    (3571, True),
    (9973, True),
    # Composite
    (4, False),
    (6, False),
    (9, False),
    (25, False),
    (49, False),
    # Fermat Pseudoprimes (numbers that fool naive tests)
    (341, False),  # 11 * 31
    (561, False),  # 3 * 11 * 17 (Carmichael number)
    (1105, False),  # 5 * 13 * 17 (Carmichael number)
    # Squares of primes, caught only at the root itself
    (10201, False),  # 101 ** 2
    (62710561, False),  # 7919 ** 2
    # Semiprimes of classroom keys
    (143, False),
    (3233, False),
]

large_primetest_cases = [
    (2**31 - 1, True),
    ((2**31 - 1) * 3, False),
    (1000003 * 1000033, False),
    pytest.param(2**61 - 1, True, marks=pytest.mark.extreme, id="LargeInt-Mersenne61"),
]


def id_generator(param):
    if isinstance(param, int) and param > 1000000:
        return f"LargeInt-{param.bit_length()}bits"
    return str(param)


@pytest.mark.parametrize("num,expected", base_primetest_cases + large_primetest_cases, ids=id_generator)
def test_is_prime(num, expected):
    assert arith.is_prime(num) == expected


def test_is_prime_ground_truth():
    for num in range(1001):
        assert arith.is_prime(num) == sympy.isprime(num), num


@pytest.mark.slow
def test_is_prime_ground_truth_wide():
    for num in range(1001, 100000):
        assert arith.is_prime(num) == sympy.isprime(num), num


@pytest.mark.parametrize("num", [-1, -2, -7, -97, -(2**89 - 1)], ids=id_generator)
def test_is_prime_negative(num):
    assert not arith.is_prime(num)


@pytest.mark.parametrize("num", [7.0, 2.5, "7", "abc", None, True, False, [7], 7j])
def test_is_prime_rejects_non_integers(num):
    assert arith.is_prime(num) is False


def test_is_prime_keeps_precision():
    # 2**89 - 1 is prime; one above it is even. Float narrowing would blur the two.
    big = 2**89 - 1
    assert float(big) == float(big + 1)
    assert not arith.is_prime(big + 1)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 20, 50, 100, 1000, 5000, 10000])
def test_primes_up_to_sane(n):
    assert arith.primes_up_to(n) == list(sympy.primerange(0, n + 1))


def test_primes_up_to_default_grid():
    grid = arith.primes_up_to()
    assert len(grid) == 25
    assert grid[0] == 2
    assert grid[-1] == 97


@pytest.mark.parametrize("n", [-27358709381728, -10, -1, 2.5, "100"])
def test_primes_up_to_errors(n):
    with pytest.raises(errors.InvalidInputError):
        arith.primes_up_to(n)


@pytest.mark.parametrize("a,b", [(240, 46), (65537, 120), (17, 3120), (0, 5), (5, 0), (-12, 18), (2**127 - 1, 2**61 - 1)],
                         ids=id_generator)
def test_egcd(a, b):
    g, s, t = arith.egcd(a, b)
    assert g == math.gcd(a, b)
    assert a * s + b * t == g


@pytest.mark.parametrize("a,m,expected", [(65537, 120, 113), (17, 3120, 2753), (3, 7, 5), (65537, 3120, 2753),
                                          (1, 1, 0)])
def test_modular_inverse(a, m, expected):
    assert arith.modular_inverse(a, m) == expected


@pytest.mark.parametrize("a,m", [(65537, 7918 * 7906), (2**61 + 1, 2**127 - 1), (-3, 7)], ids=id_generator)
def test_modular_inverse_property(a, m):
    inv = arith.modular_inverse(a, m)
    assert 0 <= inv < m
    assert (a * inv) % m == 1


@pytest.mark.parametrize("a,m", [(4, 2), (6, 9), (0, 7), (65537 * 3, 65537 * 2)])
def test_modular_inverse_not_invertible(a, m):
    with pytest.raises(errors.NonInvertibleExponentError):
        arith.modular_inverse(a, m)


@pytest.mark.parametrize("m", [0, -1, -120])
def test_modular_inverse_bad_modulus(m):
    with pytest.raises(errors.InvalidModulusError):
        arith.modular_inverse(3, m)


@pytest.mark.parametrize("base,exponent,modulus", [
    (88, 65537, 143),
    (65, 65537, 3233),
    (2790, 2753, 3233),
    (0, 0, 7),
    (5, 0, 7),
    (5, 0, 1),
    (123456789, 987654321, 1),
    (-5, 3, 7),
    (2**200 + 3, 2**70 + 11, 2**127 - 1),
], ids=id_generator)
def test_mod_exp_matches_pow(base, exponent, modulus):
    assert arith.mod_exp(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mod_exp_canonical_range():
    for base in range(-20, 20):
        res = arith.mod_exp(base, 65537, 143)
        assert 0 <= res < 143


@pytest.mark.parametrize("base,exponent", [(0, 0), (7, 3), (-4, 65537), (2**70, 1)])
def test_mod_exp_zero_modulus(base, exponent):
    with pytest.raises(errors.InvalidModulusError):
        arith.mod_exp(base, exponent, 0)


def test_mod_exp_negative_modulus():
    with pytest.raises(errors.InvalidModulusError):
        arith.mod_exp(3, 3, -7)


@pytest.mark.parametrize("exponent", [-1, -2, -65537])
def test_mod_exp_negative_exponent(exponent):
    with pytest.raises(errors.UnsupportedExponentError):
        arith.mod_exp(3, exponent, 7)


def test_mod_exp_square_and_multiply():
    # One round per bit of 65537, not 65537 multiplications.
    trace = []
    assert arith.mod_exp(88, 65537, 143, trace) == pow(88, 65537, 143)
    assert len(trace) == 17
    assert sum("= 1:" in line for line in trace) == 2


def test_mod_exp_trace():
    trace = []
    assert arith.mod_exp(3, 5, 7, trace) == 5
    assert trace == [
        "  bit 0 = 1: acc = acc × 3 mod 7 = 3",
        "  bit 1 = 0: acc = 3",
        "  bit 2 = 1: acc = acc × 4 mod 7 = 5",
    ]


@pytest.mark.parametrize("args", [(3.0, 5, 7), (3, "5", 7), (3, 5, None), (True, 5, 7)])
def test_mod_exp_rejects_non_integers(args):
    with pytest.raises(errors.InvalidInputError):
        arith.mod_exp(*args)


@pytest.mark.parametrize("text,expected", [("143", 143), (" 88 ", 88), ("0x8f", 143), ("0b1011", 11), ("0o21", 17),
                                           ("-5", -5), ("+0x10", 16), ("1_000", 1000), (12, 12),
                                           ("340282366920938463463374607431768211457", 2**128 + 1)])
def test_parse_integer(text, expected):
    assert arith.parse_integer(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1.5", "0x", "12a", None, 1.0, True])
def test_parse_integer_errors(text):
    with pytest.raises(errors.InvalidInputError):
        arith.parse_integer(text, "message")


@pytest.mark.parametrize("number,modulus,expected", [(15, 12, 3), (12, 12, 0), (-5, 12, 7), (-24, 12, 0), (0, 1, 0),
                                                     (2**100 + 5, 2**61 - 1, (2**100 + 5) % (2**61 - 1))],
                         ids=id_generator)
def test_residue(number, modulus, expected):
    assert arith.residue(number, modulus) == expected


def test_residue_trace():
    trace = []
    assert arith.residue(-5, 12, trace) == 7
    assert trace == [
        "-5 = -1 × 12 + 7",
        "-5 mod 12 = 7",
        "Clock position: 7 of 12 (210°)",
    ]


@pytest.mark.parametrize("modulus", [0, -1, -12])
def test_residue_bad_modulus(modulus):
    with pytest.raises(errors.InvalidModulusError):
        arith.residue(15, modulus)


@pytest.mark.parametrize("args", [(1.5, 12), ("15", 12), (15, None)])
def test_residue_rejects_non_integers(args):
    with pytest.raises(errors.InvalidInputError):
        arith.residue(*args)
