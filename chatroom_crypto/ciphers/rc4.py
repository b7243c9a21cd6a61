"""
RC4 — Rivest Cipher 4 (stream)
==============================
Byte-oriented stream cipher: a key-scheduling pass (KSA) shuffles a
256-entry permutation, then the generator (PRGA) walks it to produce a
keystream that is XORed with the data. XOR is self-inverse, so the same
routine encrypts and decrypts.

Every call starts a fresh keystream from the key. Two messages sent
under the same key therefore reuse the keystream; this matches the chat
clients and is one of the reasons RC4 must not be used for real secrets.

Key:    any non-empty byte string (openssl backend: 5-256 bytes)
Output: same length as input

Dependencies: cryptography >= 43.0 (openssl backend only)
"""

import logging
from typing import Iterator, List

from cryptography.hazmat.decrepit.ciphers.algorithms import ARC4
from cryptography.hazmat.primitives.ciphers import Cipher

from ..errors import InvalidKeyLength

logger = logging.getLogger(__name__)


def _check_key(key: bytes) -> None:
    # key[i % len(key)] in the KSA is undefined for an empty key
    if not key:
        raise InvalidKeyLength("RC4 key must not be empty.")


def ksa(key: bytes) -> List[int]:
    """Key-scheduling algorithm: build the initial permutation S."""
    _check_key(key)
    s = list(range(256))
    j = 0
    for i in range(256):
        j = (j + s[i] + key[i % len(key)]) % 256
        s[i], s[j] = s[j], s[i]
    return s


def keystream(state: List[int]) -> Iterator[int]:
    """Pseudo-random generation algorithm. Mutates `state` as it goes."""
    x = y = 0
    while True:
        x = (x + 1) % 256
        y = (y + state[x]) % 256
        state[x], state[y] = state[y], state[x]
        yield state[(state[x] + state[y]) % 256]


def crypt(data: bytes, key: bytes) -> bytes:
    """XOR data with the RC4 keystream for key. Encrypts and decrypts."""
    stream = keystream(ksa(key))
    logger.debug(f"RC4: {len(data)}B keystream")
    return bytes(b ^ k for b, k in zip(data, stream))


class RC4Cipher:
    """RC4 with a per-call keystream."""

    MIN_OPENSSL_KEY = 5     # 40 bits
    MAX_OPENSSL_KEY = 256   # 2048 bits
    BACKENDS        = ("manual", "openssl")

    def __init__(self, key: bytes, backend: str = "manual"):
        if backend not in self.BACKENDS:
            raise ValueError(f"Unknown RC4 backend {backend!r}; choose from {self.BACKENDS}.")
        _check_key(key)
        if backend == "openssl" and not (
                self.MIN_OPENSSL_KEY <= len(key) <= self.MAX_OPENSSL_KEY):
            raise InvalidKeyLength(
                f"openssl RC4 key must be {self.MIN_OPENSSL_KEY}-{self.MAX_OPENSSL_KEY} "
                f"bytes, got {len(key)}."
            )
        self._key     = bytes(key)
        self._backend = backend

    @property
    def backend(self) -> str:
        return self._backend

    def encrypt(self, data: bytes) -> bytes:
        if self._backend == "manual":
            return crypt(data, self._key)
        enc = Cipher(ARC4(self._key), mode=None).encryptor()
        return enc.update(bytes(data)) + enc.finalize()

    # stream XOR is its own inverse
    decrypt = encrypt

    def __repr__(self):
        return f"RC4Cipher(backend={self._backend})"
