"""
Vigenère Polyalphabetic Cipher
==============================
Each letter is shifted by the matching letter of a repeating key
(a=0 ... z=25). The key index only advances on letters, so spaces and
punctuation pass through without consuming key material.

Key normalisation: lower-cased, non-letters dropped, and an empty
result falls back to "a" (a zero shift) rather than failing.

Historical note: Blaise de Vigenère, 1553. Broken by Kasiski in 1863.
"""

from typing import Optional


def normalize_key(key: Optional[str]) -> str:
    """'Ab3c' -> 'abc'; '' or '123' -> 'a'."""
    letters = "".join(c for c in (key or "").lower() if "a" <= c <= "z")
    return letters or "a"


def _shift_text(text: str, key: str, sign: int) -> str:
    key = normalize_key(key)
    out = []
    j = 0
    for ch in text:
        if "A" <= ch <= "Z" or "a" <= ch <= "z":
            base  = 65 if ch <= "Z" else 97
            shift = ord(key[j % len(key)]) - 97
            out.append(chr((ord(ch) - base + sign * shift) % 26 + base))
            j += 1
        else:
            out.append(ch)
    return "".join(out)


def encrypt(text: str, key: Optional[str]) -> str:
    return _shift_text(text, key, +1)


def decrypt(text: str, key: Optional[str]) -> str:
    return _shift_text(text, key, -1)


class VigenereCipher:
    """Vigenère cipher. Case and non-letters are preserved."""

    def __init__(self, key: Optional[str]):
        self._key = normalize_key(key)

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        return encrypt(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        return decrypt(ciphertext, self._key)
