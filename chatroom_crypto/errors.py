"""
Errors
======
Every failure the cipher engine reports derives from CipherError, which
is itself a ValueError so callers that already catch ValueError for bad
keys keep working.

All of these are deterministic, data-dependent failures raised at call
entry. Nothing is retried and no partial output is ever returned.
"""


class CipherError(ValueError):
    """Base class for all cipher engine errors."""


class InvalidKeyLength(CipherError):
    """DES key is not 8 bytes, or RC4 key is empty / out of range."""


class InvalidKeyFormat(CipherError):
    """Monoalphabetic key is not a permutation of A-Z (strict mode only)."""


class InvalidBlockLength(CipherError):
    """DES ciphertext length is not a multiple of the block size."""


class CharNotFound(CipherError, LookupError):
    """
    A character reached the Playfair matrix lookup without being in it.
    Plaintext preparation makes this unreachable; seeing it means a bug.
    """


class FormatError(CipherError):
    """Malformed hex transport text, or text outside the single-byte codec."""


class UnknownCipher(CipherError):
    """Cipher name not recognised (raised only when the dispatcher is strict)."""
