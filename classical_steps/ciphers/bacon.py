"""
Bacon's Cipher
==============
Each letter becomes a five-symbol group over {A, B}, a binary code three
centuries before ASCII. Bacon meant the A/B pattern to be hidden in an
innocent carrier text (two typefaces, say); here we show the raw code.

Alphabet: the historical 24-letter form. I and J share a code, as do U and
V, so decoding returns I and U for those groups.

Historical note: Francis Bacon, ~1605.
"""

import logging

from ..alphabet import normalize_binary, normalize_letters
from ..steps import (
    BinaryView, CipherRun, DecodingView, EncodingView, LetterCode,
    ResultView, StepTrace, TextView,
)
from .base import DECRYPT, ENCRYPT, StepCipher

logger = logging.getLogger(__name__)


BACON_TABLE = {
    "A": "AAAAA", "B": "AAAAB", "C": "AAABA", "D": "AAABB", "E": "AABAA",
    "F": "AABAB", "G": "AABBA", "H": "AABBB", "I": "ABAAA", "J": "ABAAA",
    "K": "ABAAB", "L": "ABABA", "M": "ABABB", "N": "ABBAA", "O": "ABBAB",
    "P": "ABBBA", "Q": "ABBBB", "R": "BAAAA", "S": "BAAAB", "T": "BAABA",
    "U": "BAABB", "V": "BAABB", "W": "BABAA", "X": "BABAB", "Y": "BABBA",
    "Z": "BABBB",
}

REVERSE_TABLE = {}
for _letter, _code in BACON_TABLE.items():
    REVERSE_TABLE.setdefault(_code, _letter)   # first wins: I over J, U over V

UNKNOWN    = "?"
BLOCK_SIZE = 5


def to_bits(code: str) -> str:
    """Display relabeling: A → 0, B → 1."""
    return code.replace("A", "0").replace("B", "1")


class BaconCipher(StepCipher):
    """Bacon's biliteral cipher. The key argument is ignored."""

    cipher_id = "bacon"
    name      = "Bacon's Cipher"

    def _encrypt_steps(self, text: str, key=None) -> CipherRun:
        clean = normalize_letters(text)
        if not clean:
            return CipherRun.empty()

        trace = StepTrace()
        trace.add(f'Plaintext: "{clean}"', TextView(text=clean))

        encodings  = []
        ciphertext = ""
        for i, letter in enumerate(clean):
            code = BACON_TABLE[letter]
            encodings.append(LetterCode(letter=letter, code=code))
            ciphertext += code
            trace.add(
                f'Encoding "{letter}" → {code}',
                EncodingView(encodings=tuple(encodings), current_index=i, partial=ciphertext),
            )

        trace.add("Binary representation (A=0, B=1)",
                  BinaryView(encodings=tuple(encodings), ciphertext=ciphertext,
                             bits=to_bits(ciphertext)))
        trace.add(f'Ciphertext complete: "{ciphertext}"',
                  ResultView(mode=ENCRYPT, output=ciphertext, encodings=tuple(encodings)))
        return trace.build(ciphertext)

    def _decrypt_steps(self, text: str, key=None) -> CipherRun:
        clean = normalize_binary(text)
        if not clean or len(clean) % BLOCK_SIZE:
            logger.debug(f"bacon decrypt: {len(clean)} symbols is not a multiple of {BLOCK_SIZE}")
            return CipherRun.empty()

        trace = StepTrace()
        trace.add(f'Ciphertext grouped into {BLOCK_SIZE}-symbol blocks: "{clean}"',
                  TextView(text=clean))

        groups    = []
        plaintext = ""
        for i in range(0, len(clean), BLOCK_SIZE):
            block  = clean[i:i + BLOCK_SIZE]
            letter = REVERSE_TABLE.get(block, UNKNOWN)
            groups.append(LetterCode(letter=letter, code=block))
            plaintext += letter
            trace.add(
                f'Decoding {block} → "{letter}"',
                DecodingView(groups=tuple(groups), current_index=len(groups) - 1,
                             partial=plaintext),
            )

        trace.add(f'Plaintext complete: "{plaintext}"',
                  ResultView(mode=DECRYPT, output=plaintext, encodings=tuple(groups)))
        return trace.build(plaintext)
