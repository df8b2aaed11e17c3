"""
Toy Feistel Network
===================
A four-round Feistel cipher on a single 8-letter block, small enough to
follow by hand. Letters stand in for bits and mod-26 addition stands in
for XOR.

Block:      8 letters, split into halves L and R (4 letters each).
Round key:  round r uses the key rotated left by (r - 1) positions.
F(half, k): letter-wise (half[i] + k[i mod len(k)]) mod 26.

    encrypt round r:  L, R = R, L + F(R, K_r)
    decrypt round r:  L, R = R - F(L, K_r), L      for r = rounds .. 1

Decryption runs the rounds backwards and subtracts where encryption adds,
so decrypt(encrypt(B, K), K) == B for every block and key.

Input shaping (the two modes differ on purpose):
    encrypt: pad with 'X' to 8 letters, then keep the first 8
    decrypt: keep the first 8 letters, pad short input with 'A'
Decrypted output has trailing 'X' stripped, which also strips any genuine
trailing X of the original plaintext.

Not a real cipher. No security is implied.
"""

import logging
from typing import Tuple

from ..alphabet import letter_value, normalize_letters, pad, strip_padding, value_letter
from ..steps import CipherRun, ResultView, RoundView, SplitView, StepTrace, TextView
from .base import DECRYPT, ENCRYPT, StepCipher

logger = logging.getLogger(__name__)


def round_key(key: str, round_no: int) -> str:
    """Key for round `round_no` (1-indexed): rotate left by round_no - 1."""
    shift = (round_no - 1) % len(key)
    return key[shift:] + key[:shift]


def round_function(half: str, key: str) -> str:
    return "".join(
        value_letter(letter_value(ch) + letter_value(key[i % len(key)]))
        for i, ch in enumerate(half)
    )


def add_halves(a: str, b: str) -> str:
    return "".join(value_letter(letter_value(x) + letter_value(y)) for x, y in zip(a, b))


def sub_halves(a: str, b: str) -> str:
    return "".join(value_letter(letter_value(x) - letter_value(y)) for x, y in zip(a, b))


class FeistelCipher(StepCipher):
    """Four-round letter Feistel network with per-phase trace steps."""

    cipher_id = "feistel"
    name      = "Feistel Network"

    ROUNDS         = 4
    BLOCK_SIZE     = 8
    DEFAULT_KEY    = "KEY"
    ENCRYPT_FILLER = "X"
    DECRYPT_FILLER = "A"

    def __init__(self, rounds: int = ROUNDS):
        if not isinstance(rounds, int) or rounds < 1:
            raise ValueError("Feistel rounds must be a positive integer.")
        self.rounds = rounds
        logger.debug(f"FeistelCipher rounds={rounds}")

    @property
    def half_size(self) -> int:
        return self.BLOCK_SIZE // 2

    def _key(self, key) -> str:
        return normalize_letters(key) or self.DEFAULT_KEY

    def _split(self, block: str) -> Tuple[str, str]:
        return block[:self.half_size], block[self.half_size:]

    def _start(self, trace: StepTrace, block: str, label: str) -> Tuple[str, str]:
        left, right = self._split(block)
        trace.add(f'Starting {label}: "{block}"', TextView(text=block))
        trace.add(f'Split "{block}" into L₀="{left}" and R₀="{right}"',
                  SplitView(left=left, right=right, round=0))
        return left, right

    def _encrypt_steps(self, text: str, key) -> CipherRun:
        clean = normalize_letters(text)
        if not clean:
            return CipherRun.empty()
        block = pad(clean, self.BLOCK_SIZE, self.ENCRYPT_FILLER)[:self.BLOCK_SIZE]
        key   = self._key(key)

        trace = StepTrace()
        left, right = self._start(trace, block, "encryption with plaintext")

        for r in range(1, self.rounds + 1):
            k = round_key(key, r)
            shown_key = k[:self.half_size]
            f_result  = round_function(right, k)
            new_left, new_right = right, add_halves(left, f_result)

            trace.add(
                f'Round {r}: F(R, K{r}) = F("{right}", "{shown_key}") = "{f_result}"',
                RoundView(round=r, key_round=r, phase="function", left=left, right=right,
                          round_key=shown_key, f_result=f_result),
            )
            trace.add(
                f'Round {r}: L + F(R, K) = "{left}" + "{f_result}" = "{new_right}"',
                RoundView(round=r, key_round=r, phase="add", left=left, right=right,
                          f_result=f_result, new_left=new_left, new_right=new_right),
            )
            left, right = new_left, new_right
            if r < self.rounds:
                trace.add(f'Round {r}: Swap → L{r}="{left}", R{r}="{right}"',
                          RoundView(round=r, key_round=r, phase="swap", left=left, right=right))
            else:
                trace.add(f'Round {r}: Final round → L{r}="{left}", R{r}="{right}"',
                          RoundView(round=r, key_round=r, phase="final", left=left, right=right))

        ciphertext = left + right
        trace.add(f'Ciphertext complete: "{ciphertext}"',
                  ResultView(mode=ENCRYPT, output=ciphertext, left=left, right=right))
        return trace.build(ciphertext)

    def _decrypt_steps(self, text: str, key) -> CipherRun:
        clean = normalize_letters(text)
        if not clean:
            return CipherRun.empty()
        block = pad(clean[:self.BLOCK_SIZE], self.BLOCK_SIZE, self.DECRYPT_FILLER)
        key   = self._key(key)

        trace = StepTrace()
        left, right = self._start(trace, block, "decryption with ciphertext")

        for step_no, r in enumerate(range(self.rounds, 0, -1), start=1):
            k = round_key(key, r)
            shown_key = k[:self.half_size]
            f_result  = round_function(left, k)
            new_left, new_right = sub_halves(right, f_result), left

            trace.add(
                f'Decrypt round {step_no}: F(L, K{r}) = F("{left}", "{shown_key}") = "{f_result}"',
                RoundView(round=step_no, key_round=r, phase="function", left=left, right=right,
                          round_key=shown_key, f_result=f_result),
            )
            trace.add(
                f'Decrypt round {step_no}: R - F(L, K) = "{right}" - "{f_result}" = "{new_left}"',
                RoundView(round=step_no, key_round=r, phase="subtract", left=left, right=right,
                          f_result=f_result, new_left=new_left, new_right=new_right),
            )
            left, right = new_left, new_right
            if r > 1:
                trace.add(f'Decrypt round {step_no}: Swap → L="{left}", R="{right}"',
                          RoundView(round=step_no, key_round=r, phase="swap", left=left, right=right))
            else:
                trace.add(f'Decrypt round {step_no}: Final round → L="{left}", R="{right}"',
                          RoundView(round=step_no, key_round=r, phase="final", left=left, right=right))

        plaintext = strip_padding(left + right, self.ENCRYPT_FILLER)
        trace.add(f'Plaintext complete: "{plaintext}"',
                  ResultView(mode=DECRYPT, output=plaintext, left=left, right=right))
        return trace.build(plaintext)
