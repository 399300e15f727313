"""Error kinds raised by the arithmetic engine.

Every error carries a `kind` (its class name) and a human-readable message, so the calling layer can surface both
without inspecting the exception type itself.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSATeachError(Exception):
    """Base class of all engine errors."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return str(self)


class InvalidInputError(RSATeachError, ValueError):
    """A value could not be read as a (non-negative) integer."""


class InvalidPrimeError(RSATeachError, ValueError):
    """A prime candidate is not prime, or both candidates are the same prime.

    Attributes:
        reason: Either "not_prime" or "equal".
        name: The offending argument, "p", "q" or "p, q".
        value: The offending value.
    """

    def __init__(self, reason: str, name: str, value) -> None:
        if reason == "equal":
            msg = f"p and q must be distinct primes, both are {value}"
        else:
            msg = f"{name} = {value!r} is not a prime number"
        super().__init__(msg)
        self.reason = reason
        self.name = name
        self.value = value


class NonCoprimeExponentError(RSATeachError, ValueError):
    """The public exponent divides the totient."""


class NonInvertibleExponentError(RSATeachError, ValueError):
    """No modular inverse exists for the exponent."""


class InvalidModulusError(RSATeachError, ValueError):
    """The modulus is zero or negative."""


class UnsupportedExponentError(RSATeachError, ValueError):
    """The exponent is negative, or unusable as a public exponent."""


class MessageTooLargeError(RSATeachError, ValueError):
    """The plaintext does not fit below the modulus."""


class KeysNotGeneratedError(RSATeachError, RuntimeError):
    """An operation needs key material but none has been generated."""

    def __init__(self, msg: str = "Keys not generated. Generate keys first.") -> None:
        super().__init__(msg)
