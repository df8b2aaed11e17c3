"""
Scytale: Spartan rod transposition
==================================
A leather strip wound around a rod of fixed diameter. Write the message
along the rod, unwind the strip, and the letters come out in a different
order. On paper: write row by row into a grid with `cols` columns, read
column by column.

Key:      column count (2 to 64), the "diameter" of the rod.
Padding:  the final row is completed with the filler letter ('X').

Historical note: Sparta, ~7th century BCE. Only someone with a rod of the
same thickness could read the message back.
"""

import logging

from ..alphabet import FILLER, check_filler, normalize_letters, pad, strip_padding
from ..grid import blank_grid, fill_rows, grid_shape, read_column, read_row, snapshot
from ..steps import CipherRun, GridView, ResultView, StepTrace, TextView
from .base import DECRYPT, ENCRYPT, StepCipher, parse_columns

logger = logging.getLogger(__name__)


class ScytaleCipher(StepCipher):
    """Row-in, column-out transposition with step-by-step trace."""

    cipher_id = "scytale"
    name      = "Scytale Cipher"

    DEFAULT_COLUMNS = 4
    MIN_COLUMNS     = 2
    MAX_COLUMNS     = 64

    def __init__(self, filler: str = FILLER):
        self.filler = check_filler(filler)

    def _shape(self, text: str, key):
        clean = normalize_letters(text)
        cols  = parse_columns(key, self.DEFAULT_COLUMNS)
        if not clean or not self.MIN_COLUMNS <= cols <= self.MAX_COLUMNS:
            return clean, cols, 0
        return clean, cols, grid_shape(len(clean), cols)

    def _encrypt_steps(self, text: str, key) -> CipherRun:
        clean, cols, rows = self._shape(text, key)
        if not rows:
            return CipherRun.empty()
        padded = pad(clean, rows * cols, self.filler)
        logger.debug(f"scytale encrypt: {len(clean)} letters in {rows}x{cols}")

        trace = StepTrace()
        trace.add(f'Starting with plaintext: "{clean}"', TextView(text=clean))

        full = fill_rows(padded, cols)
        grid = []
        for r, row in enumerate(full):
            grid.append(list(row))
            trace.add(
                f'Writing row {r + 1}: "{"".join(row)}"',
                GridView(grid=snapshot(grid), rows=rows, cols=cols, highlight_row=r),
            )

        ciphertext = ""
        for c in range(cols):
            column = read_column(grid, c)
            ciphertext += column
            trace.add(
                f'Reading column {c + 1}: "{column}"',
                GridView(grid=snapshot(grid), rows=rows, cols=cols,
                         highlight_column=c, partial=ciphertext),
            )

        trace.add(f'Ciphertext complete: "{ciphertext}"',
                  ResultView(mode=ENCRYPT, output=ciphertext))
        return trace.build(ciphertext)

    def _decrypt_steps(self, text: str, key) -> CipherRun:
        clean, cols, rows = self._shape(text, key)
        if not rows:
            return CipherRun.empty()
        padded = pad(clean, rows * cols, self.filler)
        logger.debug(f"scytale decrypt: {len(clean)} letters in {rows}x{cols}")

        trace = StepTrace()
        trace.add(f'Starting with ciphertext: "{clean}"', TextView(text=clean))

        # the strip wraps the rod column by column
        grid = blank_grid(rows, cols)
        for c in range(cols):
            chunk = padded[c * rows:(c + 1) * rows]
            for r, ch in enumerate(chunk):
                grid[r][c] = ch
            trace.add(
                f'Filling column {c + 1}: "{chunk}"',
                GridView(grid=snapshot(grid), rows=rows, cols=cols, highlight_column=c),
            )

        plaintext = ""
        for r in range(rows):
            row = read_row(grid, r)
            plaintext += row
            trace.add(
                f'Reading row {r + 1}: "{row}"',
                GridView(grid=snapshot(grid), rows=rows, cols=cols,
                         highlight_row=r, partial=plaintext),
            )

        plaintext = strip_padding(plaintext, self.filler)
        trace.add(f'Plaintext complete: "{plaintext}"',
                  ResultView(mode=DECRYPT, output=plaintext))
        return trace.build(plaintext)
