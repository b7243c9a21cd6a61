"""
Monoalphabetic Substitution Cipher
==================================
The key is a 26-letter rearrangement of the alphabet read positionally:
plain A maps to key[0], B to key[1], and so on. Case is preserved via
the same table; non-letters pass through.

A key that is not a permutation of A-Z (wrong length, repeated letter,
non-letter) cannot be inverted. The chat clients treat that as "no
cipher": text comes back unchanged and a warning is logged. Pass
strict=True to MonoalphabeticCipher to get InvalidKeyFormat instead.
"""

import logging
import string
from typing import Dict, Optional

from ..errors import InvalidKeyFormat

logger = logging.getLogger(__name__)

ALPHA = string.ascii_uppercase


def is_valid_key(key: Optional[str]) -> bool:
    key = (key or "").upper()
    return len(key) == 26 and set(key) == set(ALPHA)


def _table(key: str, inverse: bool) -> Dict[str, str]:
    key = key.upper()
    pairs = zip(key, ALPHA) if inverse else zip(ALPHA, key)
    table = {}
    for src, dst in pairs:
        table[src] = dst
        table[src.lower()] = dst.lower()
    return table


def _substitute(text: str, key: Optional[str], inverse: bool) -> str:
    if not is_valid_key(key):
        logger.warning("Monoalphabetic key is not a permutation of A-Z; text left unchanged")
        return text
    table = _table(key, inverse)
    return "".join(table.get(ch, ch) for ch in text)


def encrypt(text: str, key: Optional[str]) -> str:
    return _substitute(text, key, inverse=False)


def decrypt(text: str, key: Optional[str]) -> str:
    return _substitute(text, key, inverse=True)


class MonoalphabeticCipher:
    """Fixed-key substitution cipher."""

    def __init__(self, key: Optional[str], strict: bool = False):
        if strict and not is_valid_key(key):
            raise InvalidKeyFormat("Monoalphabetic key must be a permutation of the 26 letters A-Z.")
        self._key = (key or "").upper()

    def encrypt(self, plaintext: str) -> str:
        return encrypt(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> str:
        return decrypt(ciphertext, self._key)
