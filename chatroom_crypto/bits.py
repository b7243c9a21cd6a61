"""
Bit Utilities
=============
Helpers for the DES engine. A bit sequence is a plain list of 0/1 ints,
most significant bit first within each byte.

Every function returns a fresh list; inputs are never modified.
"""

from typing import List, Sequence


def permute(bits: Sequence[int], table: Sequence[int]) -> List[int]:
    """Reorder/select bits by a 1-based index table. len(out) == len(table)."""
    return [bits[i - 1] for i in table]


def bits_from_bytes(data: bytes) -> List[int]:
    bits = []
    for byte in data:
        for i in range(7, -1, -1):
            bits.append((byte >> i) & 1)
    return bits


def bytes_from_bits(bits: Sequence[int]) -> bytes:
    if len(bits) % 8:
        raise ValueError(f"Bit count must be a multiple of 8, got {len(bits)}.")
    out = bytearray(len(bits) // 8)
    for i in range(len(out)):
        byte = 0
        for j in range(8):
            byte = (byte << 1) | (bits[i * 8 + j] & 1)
        out[i] = byte
    return bytes(out)


def rotate_left(bits: Sequence[int], n: int) -> List[int]:
    """Cyclic left rotation; n is taken modulo the sequence length."""
    if not bits:
        return []
    n %= len(bits)
    return list(bits[n:]) + list(bits[:n])


def xor_bits(a: Sequence[int], b: Sequence[int]) -> List[int]:
    if len(a) != len(b):
        raise ValueError(f"Cannot XOR {len(a)} bits with {len(b)} bits.")
    return [x ^ y for x, y in zip(a, b)]
