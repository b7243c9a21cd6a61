"""
Session Cipher Settings
=======================
Per-session choice of cipher and key, as announced in a chat handshake.
Missing fields fall back to the handshake defaults: caesar, empty key.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from . import dispatcher
from .dispatcher import CipherKind, Payload


@dataclass(frozen=True)
class CipherSettings:
    """
    cipher : cipher name as sent by the client (any case, aliases allowed)
    key    : raw key string; each cipher parses it its own way
    strict : raise UnknownCipher instead of passing unknown names through
    """
    cipher: str = "caesar"
    key:    str = ""
    strict: bool = False

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any], strict: bool = False) -> "CipherSettings":
        """Read `cipher` and `key` from a handshake-like mapping, any key case."""
        lowered = {str(k).lower(): v for k, v in fields.items()}
        cipher  = lowered.get("cipher")
        key     = lowered.get("key")
        if cipher is None:
            cipher = cls.cipher
        if key is None:
            key = cls.key
        return cls(cipher=str(cipher), key=str(key), strict=strict)

    @property
    def kind(self) -> CipherKind:
        return CipherKind.parse(self.cipher)

    def encrypt(self, data: Payload) -> Payload:
        return dispatcher.encrypt(data, self.cipher, self.key, strict=self.strict)

    def decrypt(self, data: Payload) -> Payload:
        return dispatcher.decrypt(data, self.cipher, self.key, strict=self.strict)
