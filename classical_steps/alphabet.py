"""
Alphabet Normalizer
===================
Every cipher in the package works on the 26-letter Latin alphabet and
nothing else. Input from the UI is free text, so before any algorithm runs
the text is filtered down to ASCII letters and upper-cased.

Bacon's decrypt path is the one exception: its ciphertext alphabet is the
two-symbol set {A, B}, so it keeps only those.

The padding helpers live here too because every grid cipher shares the
same filler policy: pad with 'X' on the way in, strip trailing 'X' on the
way out. Stripping is a heuristic: plaintext that genuinely ends in 'X'
loses those letters. That limitation is accepted and documented, not fixed.
"""

import string

LETTERS = string.ascii_letters
BINARY  = "ABab"
FILLER  = "X"


def normalize(text: str, keep: str = LETTERS) -> str:
    """Drop every character not in `keep`, then upper-case the remainder."""
    if not text:
        return ""
    # filter first: "ß".upper() == "SS" must not sneak through
    return "".join(ch for ch in text if ch in keep).upper()


def normalize_letters(text: str) -> str:
    return normalize(text, LETTERS)


def normalize_binary(text: str) -> str:
    """Bacon ciphertext: keep only A/B (either case)."""
    return normalize(text, BINARY)


def pad(text: str, length: int, filler: str = FILLER) -> str:
    return text.ljust(length, filler)


def strip_padding(text: str, filler: str = FILLER) -> str:
    """Remove trailing filler from decrypted output (best-effort)."""
    return text.rstrip(filler)


def letter_value(ch: str) -> int:
    return ord(ch) - ord("A")


def value_letter(n: int) -> str:
    return chr(n % 26 + ord("A"))


def check_filler(filler: str) -> str:
    if not isinstance(filler, str) or len(filler) != 1 or filler not in string.ascii_uppercase:
        raise ValueError("Filler must be a single uppercase letter A-Z.")
    return filler
