"""Textbook RSA encryption and decryption, plus the per-session key context.

`encrypt` and `decrypt` are plain functions of a message and a `KeyMaterial`. `KeyContext` is what a request handler
keeps per session: it owns the current key material, swaps it out whole on a new generation and logs each successful
operation into a small history.

Typical usage example:

    ctx = KeyContext()
    ctx.generate(11, 13)
    c = ctx.encrypt(88).value
    m = ctx.decrypt(c).value
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import datetime
import enum
import logging
import typing
import warnings

from rsateach import arith
from rsateach import keygen
from rsateach.errors import InvalidInputError
from rsateach.errors import KeysNotGeneratedError
from rsateach.errors import MessageTooLargeError
from rsateach.keygen import Derivation
from rsateach.keygen import KeyMaterial

HISTORY_LIMIT: int = 50

logger = logging.getLogger(__name__)


def encrypt(message: int, keys: KeyMaterial | None, detailed: bool = False) -> Derivation[int]:
    """Encrypts an integer message, C = M^e mod n.

    Args:
        message: The plaintext M, 0 <= M < n.
        keys: The current key material.
        detailed: Whether to include the square-and-multiply rounds in the steps.

    Returns:
        The ciphertext and the steps that produced it.

    Raises:
        KeysNotGeneratedError: If `keys` is None.
        InvalidInputError: If `message` is not a non-negative integer.
        MessageTooLargeError: If `message` >= n.
    """
    if keys is None:
        raise KeysNotGeneratedError()
    arith.require_integer("message", message)
    if message < 0:
        raise InvalidInputError(f"Message must be non-negative, got {message}")
    if message >= keys.n:
        raise MessageTooLargeError(f"Message M = {message} must be less than N = {keys.n}")
    if message in (0, 1, keys.n - 1):
        warnings.warn(f"M = {message} is a fixed point of RSA: the ciphertext equals the plaintext.", RuntimeWarning)
    rounds: list[str] | None = [] if detailed else None
    n, e = keys.public
    c = arith.mod_exp(message, e, n, rounds)
    steps = [f"C = {message}^{e} mod {n}"]
    if rounds:
        steps.append(f"Square-and-multiply over the {e.bit_length()} bits of e:")
        steps.extend(rounds)
    steps.append(f"Ciphertext C = {c}")
    logger.debug("Encrypted under n=%d", n)
    return Derivation(c, tuple(steps))


def decrypt(ciphertext: int, keys: KeyMaterial | None, detailed: bool = False) -> Derivation[int]:
    """Decrypts an integer ciphertext, M = C^d mod n.

    The ciphertext is not checked against n: any integer is reduced and decrypted.

    Args:
        ciphertext: The ciphertext C.
        keys: The current key material.
        detailed: Whether to include the square-and-multiply rounds in the steps.

    Returns:
        The plaintext and the steps that produced it.

    Raises:
        KeysNotGeneratedError: If `keys` is None.
    """
    if keys is None:
        raise KeysNotGeneratedError()
    arith.require_integer("ciphertext", ciphertext)
    rounds: list[str] | None = [] if detailed else None
    n, d = keys.private
    m = arith.mod_exp(ciphertext, d, n, rounds)
    steps = [f"M = {ciphertext}^{d} mod {n}"]
    if rounds:
        steps.append(f"Square-and-multiply over the {d.bit_length()} bits of d:")
        steps.extend(rounds)
    steps.append(f"Decrypted Message M = {m}")
    logger.debug("Decrypted under n=%d", n)
    return Derivation(m, tuple(steps))


class KeyState(enum.Enum):
    NO_KEYS = "NoKeys"
    KEYS_READY = "KeysReady"


class HistoryEntry(typing.NamedTuple):
    operation: str
    summary: str
    timestamp: datetime.datetime


class History:
    """Most recent operations of one session, oldest first.

    Attributes:
        limit: How many entries are kept before the oldest is dropped.
    """

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self._entries: list[HistoryEntry] = []

    def record(self, operation: str, summary: str) -> HistoryEntry:
        entry = HistoryEntry(operation, summary, datetime.datetime.now(datetime.timezone.utc))
        self._entries.append(entry)
        del self._entries[:-self.limit]
        return entry

    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class KeyContext:
    """Session-scoped key holder.

    Starts without keys. A successful `generate` moves it to KEYS_READY, replacing any earlier key material in a single
    assignment; a failed one leaves the previous keys untouched. Encryption and decryption never change the state.
    Not thread-safe: the owner must run at most one operation per context at a time.

    Attributes:
        history: The log of successful operations.
    """

    def __init__(self, history_limit: int = HISTORY_LIMIT) -> None:
        self._keys: KeyMaterial | None = None
        self.history = History(history_limit)

    @property
    def keys(self) -> KeyMaterial | None:
        return self._keys

    @property
    def state(self) -> KeyState:
        return KeyState.NO_KEYS if self._keys is None else KeyState.KEYS_READY

    def generate(self, p: int, q: int, pub: int = keygen.PUBLIC_EXPONENT) -> Derivation[KeyMaterial]:
        """Derives new keys and makes them current. See `keygen.generate_keys`."""
        result = keygen.generate_keys(p, q, pub)
        self._keys = result.value
        self.history.record("keygen", f"p = {p}, q = {q} → n = {result.value.n}, e = {pub}, d = {result.value.d}")
        logger.info("Key context moved to %s (n=%d)", self.state.value, result.value.n)
        return result

    def load(self, keys: KeyMaterial) -> None:
        """Makes previously derived (e.g. imported) key material current.

        Raises:
            InvalidInputError: If `keys` is not a `KeyMaterial`. The current keys are kept.
        """
        if not isinstance(keys, KeyMaterial):
            raise InvalidInputError(f"Expected derived key material, got {keys!r}")
        summary = f"n = {keys.n}, e = {keys.e}"
        self._keys = keys
        self.history.record("load", summary)

    def encrypt(self, message: int, detailed: bool = False) -> Derivation[int]:
        result = encrypt(message, self._keys, detailed)
        self.history.record("encrypt", f"M = {message} → C = {result.value}")
        return result

    def decrypt(self, ciphertext: int, detailed: bool = False) -> Derivation[int]:
        result = decrypt(ciphertext, self._keys, detailed)
        self.history.record("decrypt", f"C = {ciphertext} → M = {result.value}")
        return result
