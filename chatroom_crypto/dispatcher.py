"""
Cipher Dispatcher
=================
Single entry point used by chat sessions: pick a cipher by name, parse
the raw key string the way that cipher expects, run it.

    encrypt(data, "vigenere", "lemon")
    decrypt(data, "des", "SECRET12")

Text ciphers (caesar, vigenere, mono, playfair) work on str. If handed
bytes they decode with the single-byte codec and hand bytes back.

Byte ciphers (rc4, des) work on bytes. If handed str, encrypt returns
the uppercase hex transport form and decrypt expects that hex form and
returns str. DES plaintext keeps its zero padding; use
transport.strip_padding when the payload is known not to end in NULs.

An unrecognised cipher name is passed through untouched (logged at
WARNING), which is what the chat server has always done. Pass
strict=True to get UnknownCipher instead.
"""

import enum
import logging
from typing import Optional, Union

from .ciphers import caesar, monoalphabetic, playfair, vigenere
from .ciphers.des import DESCipher
from .ciphers.rc4 import RC4Cipher
from .errors import UnknownCipher
from .transport import bytes_to_text, from_hex, normalize_des_key, text_to_bytes, to_hex

logger = logging.getLogger(__name__)

Payload = Union[str, bytes]


class CipherKind(enum.Enum):
    CAESAR   = "caesar"
    VIGENERE = "vigenere"
    MONO     = "mono"
    PLAYFAIR = "playfair"
    RC4      = "rc4"
    DES      = "des"
    UNKNOWN  = "unknown"

    @classmethod
    def parse(cls, name: Optional[str]) -> "CipherKind":
        """Case-insensitive lookup; anything unrecognised is UNKNOWN."""
        name = (name or "").strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_text(self) -> bool:
        return self in (CipherKind.CAESAR, CipherKind.VIGENERE,
                        CipherKind.MONO, CipherKind.PLAYFAIR)


_ALIASES = {
    "monoalpha":      "mono",
    "monoalfabetica": "mono",
}

_TEXT_CIPHERS = {
    CipherKind.CAESAR: (
        lambda text, key: caesar.encrypt(text, caesar.parse_shift(key).shift),
        lambda text, key: caesar.decrypt(text, caesar.parse_shift(key).shift),
    ),
    CipherKind.VIGENERE: (vigenere.encrypt,       vigenere.decrypt),
    CipherKind.MONO:     (monoalphabetic.encrypt, monoalphabetic.decrypt),
    CipherKind.PLAYFAIR: (playfair.encrypt,       playfair.decrypt),
}


def _byte_cipher(kind: CipherKind, key: str):
    if kind is CipherKind.DES:
        return DESCipher(normalize_des_key(key))
    return RC4Cipher(text_to_bytes(key))


def _run(data: Payload, kind: CipherKind, key: str, encrypting: bool) -> Payload:
    if kind.is_text:
        fn = _TEXT_CIPHERS[kind][0 if encrypting else 1]
        if isinstance(data, (bytes, bytearray)):
            return text_to_bytes(fn(bytes_to_text(data), key))
        return fn(data, key)

    cipher = _byte_cipher(kind, key)
    if isinstance(data, (bytes, bytearray)):
        return cipher.encrypt(bytes(data)) if encrypting else cipher.decrypt(bytes(data))
    if encrypting:
        return to_hex(cipher.encrypt(text_to_bytes(data)))
    return bytes_to_text(cipher.decrypt(from_hex(data)))


def _dispatch(data: Payload, cipher: Optional[str], key: Optional[str],
              strict: bool, encrypting: bool) -> Payload:
    kind = CipherKind.parse(cipher)
    if kind is CipherKind.UNKNOWN:
        if strict:
            raise UnknownCipher(f"Unknown cipher {cipher!r}.")
        logger.warning(f"Unknown cipher {cipher!r}; passing payload through unchanged")
        return data
    logger.debug(f"{'encrypt' if encrypting else 'decrypt'} cipher={kind.value} "
                 f"payload={len(data)}")
    return _run(data, kind, key or "", encrypting)


def encrypt(plaintext: Payload, cipher: Optional[str], key: Optional[str],
            strict: bool = False) -> Payload:
    """Encrypt with the named cipher. See module docstring for types."""
    return _dispatch(plaintext, cipher, key, strict, encrypting=True)


def decrypt(ciphertext: Payload, cipher: Optional[str], key: Optional[str],
            strict: bool = False) -> Payload:
    """Decrypt with the named cipher. See module docstring for types."""
    return _dispatch(ciphertext, cipher, key, strict, encrypting=False)
