"""
Common surface of every step generator
======================================
A cipher exposes one operation:

    generate_steps(text, key, mode) -> CipherRun

plus `encrypt()` / `decrypt()` shortcuts that return only the result string.
Subclasses implement `_encrypt_steps` and `_decrypt_steps`; this class owns
mode validation and the debug logging around a run.
"""

import logging
import re

from ..steps import CipherRun

logger = logging.getLogger(__name__)

ENCRYPT = "encrypt"
DECRYPT = "decrypt"
MODES   = (ENCRYPT, DECRYPT)


def check_mode(mode: str) -> str:
    normalized = (mode or "").strip().lower()
    if normalized not in MODES:
        raise ValueError(f"Mode must be 'encrypt' or 'decrypt', got {mode!r}.")
    return normalized


class StepCipher:
    """Base class for the five step generators."""

    cipher_id = ""
    name      = ""

    def generate_steps(self, text: str, key=None, mode: str = ENCRYPT) -> CipherRun:
        mode = check_mode(mode)
        if mode == ENCRYPT:
            run = self._encrypt_steps(text, key)
        else:
            run = self._decrypt_steps(text, key)
        if run.is_empty:
            logger.debug(f"{self.cipher_id} {mode}: insufficient input")
        else:
            logger.debug(f"{self.cipher_id} {mode}: {len(run)} steps -> {run.result!r}")
        return run

    def encrypt(self, plaintext: str, key=None) -> str:
        return self.generate_steps(plaintext, key, ENCRYPT).result

    def decrypt(self, ciphertext: str, key=None) -> str:
        return self.generate_steps(ciphertext, key, DECRYPT).result

    def _encrypt_steps(self, text: str, key) -> CipherRun:
        raise NotImplementedError

    def _decrypt_steps(self, text: str, key) -> CipherRun:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_columns(key, default: int) -> int:
    """
    Column count from a UI key field.

    Ints pass through. Strings use their leading integer ("4", " 5 cols");
    None, blank or non-numeric keys fall back to `default`.
    """
    if isinstance(key, bool):
        return default
    if isinstance(key, int):
        return key
    match = _LEADING_INT.match(key or "")
    return int(match.group(1)) if match else default
