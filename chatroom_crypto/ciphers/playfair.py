"""
Playfair Digraph Cipher
=======================
Encrypts letter pairs using a 5x5 key square.

Square: key letters (upper-cased, J folded into I, duplicates skipped)
followed by the rest of the alphabet without J.

Plaintext preparation: upper-case, letters only, J -> I, then split into
digraphs. A pair of equal letters gets a filler inserted between them
and an odd trailing letter gets a filler appended. The filler is X, or
Q when the letter being split is itself X, so a digraph never holds two
identical letters. The C# chat client pads with X regardless and sends
XX digraphs, so messages with a doubled X or an odd trailing X encrypt
differently there; everything else matches it letter for letter.

Rules per digraph:
    same row      shift right (decrypt: left)
    same column   shift down  (decrypt: up)
    otherwise     swap columns (rectangle; self-inverse)

Output is upper-case letters only. Spaces, punctuation and case are not
recoverable, and decryption keeps the inserted fillers.

Historical note: Charles Wheatstone, 1854; promoted by Lord Playfair.
"""

import logging
import string
from typing import Dict, List, Optional, Tuple

from ..errors import CharNotFound

logger = logging.getLogger(__name__)

SIZE   = 5
FILLER = "X"
ALT_FILLER = "Q"

Matrix = List[List[str]]


def _letters(text: str) -> str:
    return "".join("I" if c == "J" else c
                   for c in (text or "").upper() if c in string.ascii_uppercase)


def build_matrix(key: Optional[str]) -> Matrix:
    seen = []
    for ch in _letters(key) + string.ascii_uppercase.replace("J", ""):
        if ch not in seen:
            seen.append(ch)
    return [seen[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]


def _positions(matrix: Matrix) -> Dict[str, Tuple[int, int]]:
    return {ch: (r, c) for r, row in enumerate(matrix) for c, ch in enumerate(row)}


def _find(positions: Dict[str, Tuple[int, int]], ch: str) -> Tuple[int, int]:
    try:
        return positions["I" if ch == "J" else ch]
    except KeyError:
        raise CharNotFound(f"Character {ch!r} is not in the Playfair matrix.") from None


def _filler_for(ch: str) -> str:
    return ALT_FILLER if ch == FILLER else FILLER


def prepare_plaintext(text: str) -> List[str]:
    """Return the digraphs that will be fed to the square."""
    letters = _letters(text)
    pairs = []
    i = 0
    while i < len(letters):
        a = letters[i]
        b = letters[i + 1] if i + 1 < len(letters) else None
        if b is None or a == b:
            pairs.append(a + _filler_for(a))
            i += 1
        else:
            pairs.append(a + b)
            i += 2
    return pairs


def _transform(pairs: List[str], matrix: Matrix, step: int) -> str:
    positions = _positions(matrix)
    out = []
    for a, b in pairs:
        ra, ca = _find(positions, a)
        rb, cb = _find(positions, b)
        if ra == rb:
            out.append(matrix[ra][(ca + step) % SIZE] + matrix[rb][(cb + step) % SIZE])
        elif ca == cb:
            out.append(matrix[(ra + step) % SIZE][ca] + matrix[(rb + step) % SIZE][cb])
        else:
            out.append(matrix[ra][cb] + matrix[rb][ca])
    return "".join(out)


def encrypt(text: str, key: Optional[str]) -> str:
    pairs = prepare_plaintext(text)
    logger.debug(f"Playfair encrypt: {len(pairs)} digraphs")
    return _transform(pairs, build_matrix(key), +1)


def decrypt(text: str, key: Optional[str]) -> str:
    """A trailing unpaired letter is ignored."""
    letters = _letters(text)
    pairs = [letters[i:i + 2] for i in range(0, len(letters) - 1, 2)]
    logger.debug(f"Playfair decrypt: {len(pairs)} digraphs")
    return _transform(pairs, build_matrix(key), -1)


class PlayfairCipher:
    """Playfair with the square rebuilt from the key on every call."""

    def __init__(self, key: Optional[str]):
        self._key = key or ""

    def encrypt(self, plaintext: str) -> str:
        return encrypt(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> str:
        return decrypt(ciphertext, self._key)
