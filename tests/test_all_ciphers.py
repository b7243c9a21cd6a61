"""
chatroom_crypto — Cipher Test Suite
===================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
import warnings

import pytest
from cryptography.exceptions import UnsupportedAlgorithm

from chatroom_crypto.bits                    import (bits_from_bytes, bytes_from_bits, permute,
                                                     rotate_left, xor_bits)
from chatroom_crypto.ciphers                 import caesar, monoalphabetic, playfair, rc4, vigenere
from chatroom_crypto.ciphers                 import des
from chatroom_crypto.ciphers.caesar          import CaesarCipher, ShiftKey, parse_shift
from chatroom_crypto.ciphers.des             import DESCipher
from chatroom_crypto.ciphers.monoalphabetic  import MonoalphabeticCipher
from chatroom_crypto.ciphers.playfair        import PlayfairCipher
from chatroom_crypto.ciphers.rc4             import RC4Cipher
from chatroom_crypto.ciphers.vigenere        import VigenereCipher
from chatroom_crypto.errors                  import (CharNotFound, InvalidBlockLength,
                                                     InvalidKeyFormat, InvalidKeyLength)

MSG   = b"The quick brown fox jumps over the lazy dog."
MSG_S = "Meet me at the usual place, 10pm!"
MONO_KEY = "QWERTYUIOPASDFGHJKLZXCVBNM"


def _openssl_has(factory) -> bool:
    try:
        factory()
        return True
    except UnsupportedAlgorithm:
        return False


HAS_OPENSSL_DES = _openssl_has(lambda: DESCipher(b"12345678", backend="openssl").encrypt(b"x"))
HAS_OPENSSL_RC4 = _openssl_has(lambda: RC4Cipher(b"12345", backend="openssl").encrypt(b"x"))

# ── Bit utilities ─────────────────────────────────────────────────────────────
def test_bits_msb_first():
    assert bits_from_bytes(b"\x80\x01") == [1, 0, 0, 0, 0, 0, 0, 0,
                                            0, 0, 0, 0, 0, 0, 0, 1]

def test_bits_roundtrip():
    data = bytes(range(256))
    assert bytes_from_bits(bits_from_bytes(data)) == data

def test_bits_unaligned_rejected():
    with pytest.raises(ValueError):
        bytes_from_bits([1, 0, 1])

def test_permute_one_based_and_fresh():
    bits = [1, 0, 1, 1]
    out  = permute(bits, [4, 1, 1])
    assert out == [1, 1, 1]
    out[0] = 0
    assert bits == [1, 0, 1, 1]

def test_rotate_left_modulo():
    assert rotate_left([1, 0, 0], 1) == [0, 0, 1]
    assert rotate_left([1, 0, 0], 4) == [0, 0, 1]
    assert rotate_left([], 3) == []

def test_xor_length_mismatch():
    assert xor_bits([1, 0], [1, 1]) == [0, 1]
    with pytest.raises(ValueError):
        xor_bits([1], [1, 0])

# ── DES ───────────────────────────────────────────────────────────────────────
def test_des_key_schedule_shape():
    subkeys = des.generate_subkeys(b"\x00" * 8)
    assert len(subkeys) == 16
    assert all(len(k) == 48 for k in subkeys)

def test_des_first_subkey_worked_example():
    subkeys = des.generate_subkeys(bytes.fromhex("133457799BBCDFF1"))
    expected = "000110110000001011101111111111000111000001110010"
    assert "".join(map(str, subkeys[0])) == expected

def test_des_block_worked_example():
    key = bytes.fromhex("133457799BBCDFF1")
    ct  = des.encrypt(bytes.fromhex("0123456789ABCDEF"), key)
    assert ct.hex().upper() == "85E813540F0AB405"

def test_des_fips81_ecb_vector():
    key = bytes.fromhex("0123456789ABCDEF")
    ct  = des.encrypt(b"Now is the time for all ", key)
    assert ct.hex().upper() == ("3FA40E8A984D4815"
                                "6A271787AB8883F9"
                                "893D51EC4B563B53")
    assert des.decrypt(ct, key) == b"Now is the time for all "

def test_des_fixed_fixture_12345678():
    c = DESCipher(b"12345678")
    assert c.encrypt(b"ABCDEFGH").hex().upper() == "96DE603EAED6256F"
    assert c.decrypt(bytes.fromhex("96DE603EAED6256F")) == b"ABCDEFGH"

def test_des_self_consistency_random_sample():
    rng = random.Random(20240601)
    for _ in range(25):
        key     = bytes(rng.randrange(256) for _ in range(8))
        block   = bytes(rng.randrange(256) for _ in range(8))
        subkeys = des.generate_subkeys(key)
        ct      = des.process_block(block, subkeys, encrypt=True)
        assert des.process_block(ct, subkeys, encrypt=False) == block

def test_des_zero_padding_kept():
    c  = DESCipher(b"SECRET12")
    ct = c.encrypt(b"HELLO")
    assert ct.hex().upper() == "EE188FCB36486E9D"
    assert c.decrypt(ct) == b"HELLO\x00\x00\x00"

@pytest.mark.parametrize("size,blocks", [(0, 0), (1, 1), (8, 1), (9, 2), (16, 2)])
def test_des_padding_sizes(size, blocks):
    assert len(des.encrypt(b"a" * size, b"12345678")) == blocks * 8

def test_des_ecb_identical_blocks():
    ct = des.encrypt(b"SAMEBLK!" * 2, b"12345678")
    assert ct[:8] == ct[8:]

@pytest.mark.parametrize("key", [b"", b"1234567", b"123456789"])
def test_des_bad_key_length(key):
    with pytest.raises(InvalidKeyLength):
        des.encrypt(b"data", key)
    with pytest.raises(InvalidKeyLength):
        DESCipher(key)

def test_des_bad_block_length():
    with pytest.raises(InvalidBlockLength):
        des.decrypt(b"\x00" * 7, b"12345678")

def test_des_unknown_backend():
    with pytest.raises(ValueError):
        DESCipher(b"12345678", backend="pycrypto")

@pytest.mark.skipif(not HAS_OPENSSL_DES, reason="OpenSSL build lacks DES")
@pytest.mark.parametrize("key,plaintext", [
    (b"12345678", b"ABCDEFGH"),
    (b"SECRET12", b"HELLO"),
    (b"k3y!k3y!", MSG),
])
def test_des_matches_openssl(key, plaintext):
    manual  = DESCipher(key)
    openssl = DESCipher(key, backend="openssl")
    ct = manual.encrypt(plaintext)
    assert ct == openssl.encrypt(plaintext)
    assert openssl.decrypt(ct) == manual.decrypt(ct)

@pytest.mark.skipif(not HAS_OPENSSL_DES, reason="OpenSSL build lacks DES")
def test_des_openssl_backend_no_deprecation_warning():
    c = DESCipher(b"12345678", backend="openssl")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        ct = c.encrypt(b"ABCDEFGH")
        assert c.decrypt(ct) == b"ABCDEFGH"
    assert ct.hex().upper() == "96DE603EAED6256F"

# ── RC4 ───────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("key,plaintext,expected", [
    (b"Key",    b"Plaintext",      "BBF316E8D940AF0AD3"),
    (b"Wiki",   b"pedia",          "1021BF0420"),
    (b"Secret", b"Attack at dawn", "45A01F645FC35B383552544B9BF5"),
])
def test_rc4_known_vectors(key, plaintext, expected):
    assert rc4.crypt(plaintext, key).hex().upper() == expected

def test_rc4_self_inverse_and_reproducible():
    c  = RC4Cipher(b"session-key")
    ct = c.encrypt(MSG)
    assert ct == c.encrypt(MSG)
    assert c.decrypt(ct) == MSG
    assert len(ct) == len(MSG)

def test_rc4_ksa_is_permutation():
    assert sorted(rc4.ksa(b"k")) == list(range(256))

def test_rc4_empty_key():
    with pytest.raises(InvalidKeyLength):
        rc4.crypt(b"data", b"")
    with pytest.raises(InvalidKeyLength):
        RC4Cipher(b"")

def test_rc4_openssl_key_range():
    with pytest.raises(InvalidKeyLength):
        RC4Cipher(b"abcd", backend="openssl")

@pytest.mark.skipif(not HAS_OPENSSL_RC4, reason="OpenSSL build lacks RC4")
def test_rc4_matches_openssl():
    key = b"Secret"
    assert RC4Cipher(key).encrypt(MSG) == RC4Cipher(key, backend="openssl").encrypt(MSG)

# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_vector():
    assert caesar.encrypt("Hello, World!", 3) == "Khoor, Zruog!"
    assert caesar.decrypt("Khoor, Zruog!", 3) == "Hello, World!"

@pytest.mark.parametrize("shift", range(-30, 60, 7))
def test_caesar_involution(shift):
    assert caesar.encrypt(caesar.encrypt(MSG_S, shift), 26 - shift) == MSG_S

@pytest.mark.parametrize("key,expected", [
    ("5",    ShiftKey(5, False)),
    ("-3",   ShiftKey(23, False)),
    (" 29 ", ShiftKey(3, False)),
    ("abc",  ShiftKey(3, True)),
    ("",     ShiftKey(3, True)),
    (None,   ShiftKey(3, True)),
    ("1_0",  ShiftKey(3, True)),
    ("9" * 5000,     ShiftKey(3, True)),
    ("2147483648",   ShiftKey(3, True)),
    ("-2147483649",  ShiftKey(3, True)),
    ("2147483647",   ShiftKey(23, False)),
    ("-2147483648",  ShiftKey(2, False)),
    ("000000000005", ShiftKey(5, False)),
])
def test_caesar_parse_shift(key, expected):
    assert parse_shift(key) == expected

def test_caesar_class_roundtrip():
    c = CaesarCipher.from_key("not a number")
    assert c.shift == 3
    assert c.decrypt(c.encrypt(MSG_S)) == MSG_S

# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_lemon():
    assert vigenere.encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"
    assert vigenere.encrypt("attack at dawn", "lemon") == "lxfopv ef rnhr"

@pytest.mark.parametrize("key,expected", [("Ab3c", "abc"), ("", "a"), ("123", "a"), (None, "a")])
def test_vigenere_key_normalization(key, expected):
    assert vigenere.normalize_key(key) == expected

def test_vigenere_roundtrip_preserves_case():
    v  = VigenereCipher("Chat Key 2")
    ct = v.encrypt(MSG_S)
    assert ct != MSG_S
    assert v.decrypt(ct) == MSG_S

def test_vigenere_empty_key_is_identity():
    assert vigenere.encrypt(MSG_S, "!!") == MSG_S

# ── Monoalphabetic ────────────────────────────────────────────────────────────
def test_mono_vector():
    assert monoalphabetic.encrypt("Hello, World!", MONO_KEY) == "Itssg, Vgksr!"

def test_mono_roundtrip_lowercase_key():
    m = MonoalphabeticCipher(MONO_KEY.lower())
    assert m.decrypt(m.encrypt(MSG_S)) == MSG_S

@pytest.mark.parametrize("key", [
    "ABCDEFGHIJKLMNOPQRSTUVWXYA",   # repeated letter
    "ABC",                          # too short
    "ABCDEFGHIJKLMNOPQRSTUVWXY1",   # non-letter
    "",
])
def test_mono_invalid_key_passthrough(key):
    assert monoalphabetic.encrypt(MSG_S, key) == MSG_S
    assert monoalphabetic.decrypt(MSG_S, key) == MSG_S

def test_mono_strict_rejects():
    with pytest.raises(InvalidKeyFormat):
        MonoalphabeticCipher("ABC", strict=True)

# ── Playfair ──────────────────────────────────────────────────────────────────
def test_playfair_matrix():
    m = playfair.build_matrix("playfair example")
    assert m[0] == list("PLAYF")
    assert m[1] == list("IREXM")
    flat = [c for row in m for c in row]
    assert len(flat) == 25 and len(set(flat)) == 25 and "J" not in flat

def test_playfair_matrix_empty_key():
    flat = "".join("".join(row) for row in playfair.build_matrix(""))
    assert flat == "ABCDEFGHIKLMNOPQRSTUVWXYZ"

def test_playfair_vector():
    ct = playfair.encrypt("Hide the gold in the tree stump", "playfair example")
    assert ct == "BMODZBXDNABEKUDMUIXMMOUVIF"
    assert playfair.decrypt(ct, "playfair example") == "HIDETHEGOLDINTHETREXESTUMP"

@pytest.mark.parametrize("text", ["balloon", "XX", "aaaa", "jiji", "x", "Hello, World!", ""])
def test_playfair_no_identical_digraph(text):
    for a, b in playfair.prepare_plaintext(text):
        assert a != b

def test_playfair_odd_and_double_x():
    assert playfair.prepare_plaintext("XX") == ["XQ", "XQ"]
    assert playfair.prepare_plaintext("abc") == ["AB", "CX"]

def test_playfair_roundtrip_letters():
    p  = PlayfairCipher("monarchy")
    ct = p.encrypt("instruments")
    assert p.decrypt(ct) == "INSTRUMENTSX"

def test_playfair_char_not_found():
    positions = playfair._positions(playfair.build_matrix("key"))
    with pytest.raises(CharNotFound):
        playfair._find(positions, "?")

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import time
    tests = [
        ("Bits  — MSB-first conversion",       test_bits_msb_first),
        ("Bits  — byte round trip",            test_bits_roundtrip),
        ("DES   — key schedule shape",         test_des_key_schedule_shape),
        ("DES   — worked example block",       test_des_block_worked_example),
        ("DES   — FIPS 81 ECB vector",         test_des_fips81_ecb_vector),
        ("DES   — self-consistency sample",    test_des_self_consistency_random_sample),
        ("DES   — zero padding kept",          test_des_zero_padding_kept),
        ("RC4   — self-inverse",               test_rc4_self_inverse_and_reproducible),
        ("Caesar — vector",                    test_caesar_vector),
        ("Vigenère — LEMON",                   test_vigenere_lemon),
        ("Mono  — vector",                     test_mono_vector),
        ("Playfair — vector",                  test_playfair_vector),
    ]

    print("\n" + "═" * 70)
    print("  chatroom_crypto — Cipher Test Suite")
    print("═" * 70)
    passed = failed = 0
    for name, fn in tests:
        t0 = time.perf_counter()
        try:
            fn()
            elapsed = time.perf_counter() - t0
            print(f"  ✓  {name:<45} {elapsed:.3f}s")
            passed += 1
        except Exception as e:
            print(f"  ✗  {name:<45} FAILED: {e}")
            failed += 1
    print("═" * 70)
    print(f"  {passed} passed  |  {failed} failed")
    print("═" * 70 + "\n")
    sys.exit(0 if failed == 0 else 1)
