"""
DES — Data Encryption Standard (manual implementation)
======================================================
56-bit effective key, 64-bit blocks, 16-round Feistel network.

Everything here is done by hand at the bit level: permutation tables,
the PC1/PC2 key schedule, the E-expansion, the eight S-boxes and the
P permutation. Messages are zero-padded to a multiple of 8 bytes and
each block is processed on its own (ECB-equivalent: no chaining, no IV).

Decryption is the same transform with the subkeys in reverse order.
Padding is NOT removed on decrypt; a payload that legitimately ends in
zero bytes cannot be told apart from one that was padded. Callers strip
padding themselves (see transport.strip_padding).

WARNING: DES was broken by brute force in 1998 and ECB leaks plaintext
structure. This exists to interoperate with the chat clients, not to
protect anything.

Backends:
    manual   bit-level engine in this module (default)
    openssl  cryptography's TripleDES with K1=K2=K3, which is single DES

Dependencies: cryptography >= 43.0 (openssl backend only)
"""

import logging
from typing import List

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from ..bits import bits_from_bytes, bytes_from_bits, permute, rotate_left, xor_bits
from ..errors import InvalidBlockLength, InvalidKeyLength

logger = logging.getLogger(__name__)

BLOCK_SIZE = 8
KEY_SIZE   = 8
ROUNDS     = 16

# -- Tables (FIPS 46-3) -------------------------------------------------------

IP = [
    58, 50, 42, 34, 26, 18, 10, 2,
    60, 52, 44, 36, 28, 20, 12, 4,
    62, 54, 46, 38, 30, 22, 14, 6,
    64, 56, 48, 40, 32, 24, 16, 8,
    57, 49, 41, 33, 25, 17,  9, 1,
    59, 51, 43, 35, 27, 19, 11, 3,
    61, 53, 45, 37, 29, 21, 13, 5,
    63, 55, 47, 39, 31, 23, 15, 7,
]

FP = [
    40, 8, 48, 16, 56, 24, 64, 32,
    39, 7, 47, 15, 55, 23, 63, 31,
    38, 6, 46, 14, 54, 22, 62, 30,
    37, 5, 45, 13, 53, 21, 61, 29,
    36, 4, 44, 12, 52, 20, 60, 28,
    35, 3, 43, 11, 51, 19, 59, 27,
    34, 2, 42, 10, 50, 18, 58, 26,
    33, 1, 41,  9, 49, 17, 57, 25,
]

# 64 -> 56, drops the parity bits
PC1 = [
    57, 49, 41, 33, 25, 17,  9,
     1, 58, 50, 42, 34, 26, 18,
    10,  2, 59, 51, 43, 35, 27,
    19, 11,  3, 60, 52, 44, 36,
    63, 55, 47, 39, 31, 23, 15,
     7, 62, 54, 46, 38, 30, 22,
    14,  6, 61, 53, 45, 37, 29,
    21, 13,  5, 28, 20, 12,  4,
]

# 56 -> 48
PC2 = [
    14, 17, 11, 24,  1,  5,
     3, 28, 15,  6, 21, 10,
    23, 19, 12,  4, 26,  8,
    16,  7, 27, 20, 13,  2,
    41, 52, 31, 37, 47, 55,
    30, 40, 51, 45, 33, 48,
    44, 49, 39, 56, 34, 53,
    46, 42, 50, 36, 29, 32,
]

# 32 -> 48
E = [
    32,  1,  2,  3,  4,  5,
     4,  5,  6,  7,  8,  9,
     8,  9, 10, 11, 12, 13,
    12, 13, 14, 15, 16, 17,
    16, 17, 18, 19, 20, 21,
    20, 21, 22, 23, 24, 25,
    24, 25, 26, 27, 28, 29,
    28, 29, 30, 31, 32,  1,
]

P = [
    16,  7, 20, 21,
    29, 12, 28, 17,
     1, 15, 23, 26,
     5, 18, 31, 10,
     2,  8, 24, 14,
    32, 27,  3,  9,
    19, 13, 30,  6,
    22, 11,  4, 25,
]

SBOX = [
    [[14,  4, 13,  1,  2, 15, 11,  8,  3, 10,  6, 12,  5,  9,  0,  7],
     [ 0, 15,  7,  4, 14,  2, 13,  1, 10,  6, 12, 11,  9,  5,  3,  8],
     [ 4,  1, 14,  8, 13,  6,  2, 11, 15, 12,  9,  7,  3, 10,  5,  0],
     [15, 12,  8,  2,  4,  9,  1,  7,  5, 11,  3, 14, 10,  0,  6, 13]],

    [[15,  1,  8, 14,  6, 11,  3,  4,  9,  7,  2, 13, 12,  0,  5, 10],
     [ 3, 13,  4,  7, 15,  2,  8, 14, 12,  0,  1, 10,  6,  9, 11,  5],
     [ 0, 14,  7, 11, 10,  4, 13,  1,  5,  8, 12,  6,  9,  3,  2, 15],
     [13,  8, 10,  1,  3, 15,  4,  2, 11,  6,  7, 12,  0,  5, 14,  9]],

    [[10,  0,  9, 14,  6,  3, 15,  5,  1, 13, 12,  7, 11,  4,  2,  8],
     [13,  7,  0,  9,  3,  4,  6, 10,  2,  8,  5, 14, 12, 11, 15,  1],
     [13,  6,  4,  9,  8, 15,  3,  0, 11,  1,  2, 12,  5, 10, 14,  7],
     [ 1, 10, 13,  0,  6,  9,  8,  7,  4, 15, 14,  3, 11,  5,  2, 12]],

    [[ 7, 13, 14,  3,  0,  6,  9, 10,  1,  2,  8,  5, 11, 12,  4, 15],
     [13,  8, 11,  5,  6, 15,  0,  3,  4,  7,  2, 12,  1, 10, 14,  9],
     [10,  6,  9,  0, 12, 11,  7, 13, 15,  1,  3, 14,  5,  2,  8,  4],
     [ 3, 15,  0,  6, 10,  1, 13,  8,  9,  4,  5, 11, 12,  7,  2, 14]],

    [[ 2, 12,  4,  1,  7, 10, 11,  6,  8,  5,  3, 15, 13,  0, 14,  9],
     [14, 11,  2, 12,  4,  7, 13,  1,  5,  0, 15, 10,  3,  9,  8,  6],
     [ 4,  2,  1, 11, 10, 13,  7,  8, 15,  9, 12,  5,  6,  3,  0, 14],
     [11,  8, 12,  7,  1, 14,  2, 13,  6, 15,  0,  9, 10,  4,  5,  3]],

    [[12,  1, 10, 15,  9,  2,  6,  8,  0, 13,  3,  4, 14,  7,  5, 11],
     [10, 15,  4,  2,  7, 12,  9,  5,  6,  1, 13, 14,  0, 11,  3,  8],
     [ 9, 14, 15,  5,  2,  8, 12,  3,  7,  0,  4, 10,  1, 13, 11,  6],
     [ 4,  3,  2, 12,  9,  5, 15, 10, 11, 14,  1,  7,  6,  0,  8, 13]],

    [[ 4, 11,  2, 14, 15,  0,  8, 13,  3, 12,  9,  7,  5, 10,  6,  1],
     [13,  0, 11,  7,  4,  9,  1, 10, 14,  3,  5, 12,  2, 15,  8,  6],
     [ 1,  4, 11, 13, 12,  3,  7, 14, 10, 15,  6,  8,  0,  5,  9,  2],
     [ 6, 11, 13,  8,  1,  4, 10,  7,  9,  5,  0, 15, 14,  2,  3, 12]],

    [[13,  2,  8,  4,  6, 15, 11,  1, 10,  9,  3, 14,  5,  0, 12,  7],
     [ 1, 15, 13,  8, 10,  3,  7,  4, 12,  5,  6, 11,  0, 14,  9,  2],
     [ 7, 11,  4,  1,  9, 12, 14,  2,  0,  6, 10, 13, 15,  3,  5,  8],
     [ 2,  1, 14,  7,  4, 10,  8, 13, 15, 12,  9,  0,  3,  5,  6, 11]],
]

ROTATIONS = [1, 1, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 1]


# -- Key schedule -------------------------------------------------------------

def _check_key(key: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(f"DES key must be {KEY_SIZE} bytes, got {len(key)}.")


def generate_subkeys(key: bytes) -> List[List[int]]:
    """Derive the 16 round keys (48 bits each) from an 8-byte key."""
    _check_key(key)
    cd = permute(bits_from_bytes(key), PC1)
    c, d = cd[:28], cd[28:]
    subkeys = []
    for shift in ROTATIONS:
        c = rotate_left(c, shift)
        d = rotate_left(d, shift)
        subkeys.append(permute(c + d, PC2))
    return subkeys


# -- Feistel ------------------------------------------------------------------

def feistel(right: List[int], subkey: List[int]) -> List[int]:
    """f(R, K): expand, mix with the subkey, substitute, permute."""
    x = xor_bits(permute(right, E), subkey)
    out = []
    for i in range(8):
        group = x[6 * i:6 * i + 6]
        row = (group[0] << 1) | group[5]
        col = (group[1] << 3) | (group[2] << 2) | (group[3] << 1) | group[4]
        v = SBOX[i][row][col]
        out += [(v >> 3) & 1, (v >> 2) & 1, (v >> 1) & 1, v & 1]
    return permute(out, P)


def process_block(block: bytes, subkeys: List[List[int]], encrypt: bool = True) -> bytes:
    """Run one 8-byte block through IP, 16 rounds, the final swap and FP."""
    bits = permute(bits_from_bytes(block), IP)
    left, right = bits[:32], bits[32:]
    for i in range(ROUNDS):
        k = subkeys[i] if encrypt else subkeys[ROUNDS - 1 - i]
        left, right = right, xor_bits(left, feistel(right, k))
    return bytes_from_bits(permute(right + left, FP))


# -- Messages -----------------------------------------------------------------

def pad(data: bytes) -> bytes:
    """Zero-pad up to the next multiple of the block size."""
    return bytes(data) + b"\x00" * (-len(data) % BLOCK_SIZE)


def encrypt(data: bytes, key: bytes) -> bytes:
    subkeys = generate_subkeys(key)
    padded  = pad(data)
    logger.debug(f"DES encrypt: {len(data)}B -> {len(padded) // BLOCK_SIZE} blocks")
    return b"".join(
        process_block(padded[i:i + BLOCK_SIZE], subkeys, encrypt=True)
        for i in range(0, len(padded), BLOCK_SIZE)
    )


def decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt block by block. Trailing zero padding is left in place."""
    subkeys = generate_subkeys(key)
    if len(data) % BLOCK_SIZE:
        raise InvalidBlockLength(
            f"DES ciphertext must be a multiple of {BLOCK_SIZE} bytes, got {len(data)}."
        )
    logger.debug(f"DES decrypt: {len(data) // BLOCK_SIZE} blocks")
    return b"".join(
        process_block(data[i:i + BLOCK_SIZE], subkeys, encrypt=False)
        for i in range(0, len(data), BLOCK_SIZE)
    )


class DESCipher:
    """DES-ECB with zero padding behind the usual encrypt/decrypt pair."""

    KEY_SIZE   = KEY_SIZE
    BLOCK_SIZE = BLOCK_SIZE
    BACKENDS   = ("manual", "openssl")

    def __init__(self, key: bytes, backend: str = "manual"):
        if backend not in self.BACKENDS:
            raise ValueError(f"Unknown DES backend {backend!r}; choose from {self.BACKENDS}.")
        _check_key(key)
        self._key     = bytes(key)
        self._backend = backend
        logger.debug(f"DESCipher backend={backend}")

    @property
    def backend(self) -> str:
        return self._backend

    def _openssl(self):
        # K1=K2=K3 collapses EDE to single DES
        return Cipher(TripleDES(self._key * 3), modes.ECB())

    def encrypt(self, plaintext: bytes) -> bytes:
        """Returns ciphertext whose length is a multiple of 8."""
        if self._backend == "manual":
            return encrypt(plaintext, self._key)
        enc = self._openssl().encryptor()
        return enc.update(pad(plaintext)) + enc.finalize()

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Returns the padded plaintext."""
        if self._backend == "manual":
            return decrypt(ciphertext, self._key)
        if len(ciphertext) % BLOCK_SIZE:
            raise InvalidBlockLength(
                f"DES ciphertext must be a multiple of {BLOCK_SIZE} bytes, got {len(ciphertext)}."
            )
        dec = self._openssl().decryptor()
        return dec.update(bytes(ciphertext)) + dec.finalize()

    def __repr__(self):
        return f"DESCipher(backend={self._backend})"
