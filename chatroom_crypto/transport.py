"""
Transport Adapter
=================
Glue between the byte-oriented ciphers (DES, RC4) and the text-based
chat messages that carry them.

    to_hex / from_hex     ciphertext <-> two uppercase hex digits per byte
    text_to_bytes / ...   str <-> bytes with a fixed one-byte-per-char codec
    normalize_des_key     any key -> exactly 8 bytes (space padded/truncated)
    strip_padding         drop DES zero padding after decryption
"""

import binascii
from typing import Union

from .errors import FormatError

CODEC       = "latin-1"
DES_KEY_LEN = 8


def to_hex(data: bytes) -> str:
    return bytes(data).hex().upper()


def from_hex(text: str) -> bytes:
    """Decode hex transport text. Odd length or non-hex input is rejected."""
    text = text.strip()
    if len(text) % 2:
        raise FormatError(f"Hex payload has odd length {len(text)}.")
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise FormatError(f"Hex payload is not valid hexadecimal: {e}") from e


def text_to_bytes(text: str) -> bytes:
    try:
        return text.encode(CODEC)
    except UnicodeEncodeError as e:
        raise FormatError(
            f"Character {text[e.start]!r} at {e.start} is outside the single-byte codec."
        ) from e


def bytes_to_text(data: bytes) -> str:
    return bytes(data).decode(CODEC)


def normalize_des_key(key: Union[str, bytes, None]) -> bytes:
    """Pad with spaces / truncate so DES always gets 8 key bytes."""
    raw = text_to_bytes(key or "") if not isinstance(key, (bytes, bytearray)) else bytes(key)
    return raw.ljust(DES_KEY_LEN, b" ")[:DES_KEY_LEN]


def strip_padding(data: Union[str, bytes]):
    """Remove trailing zero bytes (or NUL characters) left by DES padding."""
    if isinstance(data, str):
        return data.rstrip("\x00")
    return bytes(data).rstrip(b"\x00")
