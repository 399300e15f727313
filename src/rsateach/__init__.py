"""Textbook RSA for the classroom, with every step spelled out.

Derives RSA keys from two small primes of your choosing, then encrypts and decrypts integers while narrating the
algebra: the modulus, the totient, the private exponent from the extended Euclidean algorithm and the
square-and-multiply rounds of modular exponentiation. Not meant for protecting anything.

Typical usage example:

    keys, steps = generate_keys(11, 13)
    c, _ = encrypt(88, keys)
    m, _ = decrypt(c, keys)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsateach.arith import is_prime
from rsateach.arith import mod_exp
from rsateach.arith import modular_inverse
from rsateach.arith import parse_integer
from rsateach.arith import primes_up_to
from rsateach.arith import residue
from rsateach.errors import InvalidInputError
from rsateach.errors import InvalidModulusError
from rsateach.errors import InvalidPrimeError
from rsateach.errors import KeysNotGeneratedError
from rsateach.errors import MessageTooLargeError
from rsateach.errors import NonCoprimeExponentError
from rsateach.errors import NonInvertibleExponentError
from rsateach.errors import RSATeachError
from rsateach.errors import UnsupportedExponentError
from rsateach.keygen import Derivation
from rsateach.keygen import generate_keys
from rsateach.keygen import KeyMaterial
from rsateach.rsa import decrypt
from rsateach.rsa import encrypt
from rsateach.rsa import KeyContext
from rsateach.rsa import KeyState

__version__ = "0.1.0"
__all__ = [
    "is_prime",
    "mod_exp",
    "modular_inverse",
    "parse_integer",
    "primes_up_to",
    "residue",
    "generate_keys",
    "encrypt",
    "decrypt",
    "Derivation",
    "KeyMaterial",
    "KeyContext",
    "KeyState",
    "RSATeachError",
    "InvalidInputError",
    "InvalidModulusError",
    "InvalidPrimeError",
    "KeysNotGeneratedError",
    "MessageTooLargeError",
    "NonCoprimeExponentError",
    "NonInvertibleExponentError",
    "UnsupportedExponentError",
]
