"""
chatroom_crypto — Live Demo: All Six Ciphers
============================================
Run:  python examples/demo_all_ciphers.py

Sends one chat line through every cipher the way a session would,
printing ciphertext, round-trip result and timing for each.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from chatroom_crypto           import CipherSettings, DESCipher
from chatroom_crypto.transport import strip_padding

LINE = "═" * 70
MSG  = "Meet me at the usual place, 10pm!"

SESSIONS = [
    CipherSettings("caesar",   "3"),
    CipherSettings("vigenere", "lemon"),
    CipherSettings("mono",     "QWERTYUIOPASDFGHJKLZXCVBNM"),
    CipherSettings("playfair", "playfair example"),
    CipherSettings("rc4",      "chat-room-key"),
    CipherSettings("des",      "SECRET12"),
    CipherSettings("enigma",   "whatever"),
]


def header(name, key):
    print(f"\n{LINE}")
    print(f"  {name.upper()}  (key={key!r})")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  chatroom_crypto — Six-Cipher Demo")
    print(LINE)
    print(f"  Message: {MSG}")

    for s in SESSIONS:
        header(s.cipher, s.key)
        t0 = time.perf_counter()
        ct = s.encrypt(MSG)
        pt = s.decrypt(ct)
        elapsed = time.perf_counter() - t0
        ok("Kind",       s.kind.value)
        ok("Encrypted",  ct if len(ct) <= 48 else ct[:48] + "...")
        ok("Decrypted",  strip_padding(pt))
        ok("Round-trip", f"{elapsed*1000:.2f} ms")

    # ── DES backends ──────────────────────────────────────────────────────────
    header("des backends", "SECRET12")
    manual  = DESCipher(b"SECRET12")
    openssl = DESCipher(b"SECRET12", backend="openssl")
    ok("manual ", manual.encrypt(MSG.encode()).hex().upper()[:32] + "...")
    ok("openssl", openssl.encrypt(MSG.encode()).hex().upper()[:32] + "...")

    print(f"\n{LINE}")
    print("  ALL CIPHERS COMPLETE")
    print(LINE + "\n")
