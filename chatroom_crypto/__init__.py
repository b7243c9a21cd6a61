"""
chatroom_crypto — Chat Session Cipher Engine
============================================
Six ciphers behind one encrypt/decrypt contract, chosen per chat
session by name and key. From Caesar's shift to a bit-level DES.

Ciphers:
    caesar     Caesar shift (key: integer, default 3)
    vigenere   Vigenère running key (key: letters)
    mono       Monoalphabetic substitution (key: 26-letter permutation)
    playfair   Playfair digraphs (key: letters)
    rc4        RC4 stream cipher (key: any non-empty string)
    des        DES, ECB-equivalent with zero padding (key: 8 bytes)

These are teaching ciphers reproduced exactly for interoperability with
the chat clients. None of them protects anything.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .dispatcher              import CipherKind, encrypt, decrypt
from .session                 import CipherSettings
from .ciphers.caesar          import CaesarCipher
from .ciphers.vigenere        import VigenereCipher
from .ciphers.monoalphabetic  import MonoalphabeticCipher
from .ciphers.playfair        import PlayfairCipher
from .ciphers.rc4             import RC4Cipher
from .ciphers.des             import DESCipher
from .errors import (
    CipherError,
    InvalidKeyLength,
    InvalidKeyFormat,
    InvalidBlockLength,
    CharNotFound,
    FormatError,
    UnknownCipher,
)

__all__ = [
    "CipherKind",
    "encrypt",
    "decrypt",
    "CipherSettings",
    "CaesarCipher",
    "VigenereCipher",
    "MonoalphabeticCipher",
    "PlayfairCipher",
    "RC4Cipher",
    "DESCipher",
    "CipherError",
    "InvalidKeyLength",
    "InvalidKeyFormat",
    "InvalidBlockLength",
    "CharNotFound",
    "FormatError",
    "UnknownCipher",
]
