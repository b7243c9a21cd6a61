"""
Caesar Shift Cipher
===================
Every ASCII letter moves `shift` places along the alphabet, wrapping
at Z. Case is preserved and everything that is not a letter passes
through untouched.

Keys arrive from chat handshakes as strings, so parse_shift() turns the
raw key into a shift and says whether it had to fall back to the
default of 3 (the classic shift) because the key was not an integer.
Keys must fit a signed 32-bit int, as the chat clients parse them;
anything wider counts as unparsable.
"""

import logging
import re
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

DEFAULT_SHIFT = 3

_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class ShiftKey(NamedTuple):
    shift:     int
    defaulted: bool


def parse_shift(key: Optional[str], default: int = DEFAULT_SHIFT) -> ShiftKey:
    """Parse a Caesar key string. Unparsable input yields the default."""
    if key is not None and _INT_RE.fullmatch(key):
        try:
            value = int(key)
        except ValueError:
            value = None
        if value is not None and INT32_MIN <= value <= INT32_MAX:
            return ShiftKey(value % 26, False)
    logger.warning(f"Caesar key is not an integer; using shift {default}")
    return ShiftKey(default % 26, True)


def encrypt(text: str, shift: int) -> str:
    shift %= 26
    out = []
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(chr((ord(ch) - 65 + shift) % 26 + 65))
        elif "a" <= ch <= "z":
            out.append(chr((ord(ch) - 97 + shift) % 26 + 97))
        else:
            out.append(ch)
    return "".join(out)


def decrypt(text: str, shift: int) -> str:
    return encrypt(text, 26 - (shift % 26))


class CaesarCipher:
    """Caesar shift with a fixed key."""

    def __init__(self, shift: int = DEFAULT_SHIFT):
        self._shift = shift % 26

    @classmethod
    def from_key(cls, key: Optional[str]) -> "CaesarCipher":
        return cls(parse_shift(key).shift)

    @property
    def shift(self) -> int:
        return self._shift

    def encrypt(self, plaintext: str) -> str:
        return encrypt(plaintext, self._shift)

    def decrypt(self, ciphertext: str) -> str:
        return decrypt(ciphertext, self._shift)
