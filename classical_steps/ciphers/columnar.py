"""
Columnar Transposition
======================
Write the plaintext under a keyword, one row at a time. Number the keyword
letters alphabetically, then read the columns out in that numbered order.

Column order for repeated keyword letters
-----------------------------------------
"BALLOON" has two L's and two O's. Ranks are assigned by sorting
(letter, original index) pairs, so equal letters keep their left-to-right
order and every column gets a distinct rank:

    B A L L O O N
    1 0 2 3 5 6 4

Sorting the bare letters and looking each one up with a first-match search
would hand both L's rank 2 and lose a column.

Historical note: in military and diplomatic use through both World Wars;
the German ADFGVX system paired it with a substitution step.
"""

import logging
from typing import List

from ..alphabet import FILLER, check_filler, normalize_letters, pad, strip_padding
from ..grid import blank_grid, fill_rows, grid_shape, read_column, read_row, snapshot
from ..steps import CipherRun, GridView, KeywordView, ResultView, StepTrace, TextView
from .base import DECRYPT, ENCRYPT, StepCipher

logger = logging.getLogger(__name__)


def column_order(keyword: str) -> List[int]:
    """
    Rank of each keyword column: order[i] = k means column i is read k-th.
    Ties between equal letters are broken by original position.
    """
    ranked = sorted(range(len(keyword)), key=lambda i: (keyword[i], i))
    order = [0] * len(keyword)
    for rank, index in enumerate(ranked):
        order[index] = rank
    return order


def reading_sequence(order: List[int]) -> List[int]:
    """Columns in the order they are read: inverse of column_order()."""
    sequence = [0] * len(order)
    for col, rank in enumerate(order):
        sequence[rank] = col
    return sequence


class ColumnarCipher(StepCipher):
    """Keyword columnar transposition with duplicate-safe column ranking."""

    cipher_id = "columnar"
    name      = "Columnar Transposition Cipher"

    MIN_KEY_LENGTH = 2
    MAX_KEY_LENGTH = 64

    def __init__(self, filler: str = FILLER):
        self.filler = check_filler(filler)

    def _prepare(self, text: str, key):
        clean   = normalize_letters(text)
        keyword = normalize_letters(key)
        if not clean or not self.MIN_KEY_LENGTH <= len(keyword) <= self.MAX_KEY_LENGTH:
            return None
        return clean, keyword, column_order(keyword)

    def _keyword_step(self, trace: StepTrace, keyword: str, order: List[int]) -> None:
        numbering = " ".join(str(rank + 1) for rank in order)
        trace.add(f'Keyword "{keyword}" numbered alphabetically: {numbering}',
                  KeywordView(keyword=keyword, order=tuple(order)))

    def _encrypt_steps(self, text: str, key) -> CipherRun:
        prepared = self._prepare(text, key)
        if prepared is None:
            return CipherRun.empty()
        clean, keyword, order = prepared
        cols = len(keyword)
        rows = grid_shape(len(clean), cols)
        grid = fill_rows(pad(clean, rows * cols, self.filler), cols)
        logger.debug(f"columnar encrypt: {len(clean)} letters, keyword={keyword} order={order}")

        trace = StepTrace()
        trace.add(f'Starting with plaintext: "{clean}"', TextView(text=clean))
        self._keyword_step(trace, keyword, order)

        frozen = snapshot(grid)
        trace.add("Plaintext written row by row under the keyword",
                  GridView(grid=frozen, rows=rows, cols=cols,
                           keyword=keyword, order=tuple(order)))

        ciphertext = ""
        for col in reading_sequence(order):
            chunk = read_column(grid, col)
            ciphertext += chunk
            trace.add(
                f'Reading column "{keyword[col]}" (#{order[col] + 1}): "{chunk}"',
                GridView(grid=frozen, rows=rows, cols=cols, keyword=keyword,
                         order=tuple(order), highlight_column=col, partial=ciphertext),
            )

        trace.add(f'Ciphertext complete: "{ciphertext}"',
                  ResultView(mode=ENCRYPT, output=ciphertext))
        return trace.build(ciphertext)

    def _decrypt_steps(self, text: str, key) -> CipherRun:
        prepared = self._prepare(text, key)
        if prepared is None:
            return CipherRun.empty()
        clean, keyword, order = prepared
        cols = len(keyword)
        rows = grid_shape(len(clean), cols)
        # short ciphertext: the last columns read are completed with filler
        stream = pad(clean, rows * cols, self.filler)
        logger.debug(f"columnar decrypt: {len(clean)} letters, keyword={keyword} order={order}")

        trace = StepTrace()
        trace.add(f'Starting with ciphertext: "{clean}"', TextView(text=clean))
        self._keyword_step(trace, keyword, order)

        grid  = blank_grid(rows, cols)
        index = 0
        for col in reading_sequence(order):
            for r in range(rows):
                grid[r][col] = stream[index]
                index += 1
            trace.add(
                f'Placing column "{keyword[col]}" (#{order[col] + 1}): "{read_column(grid, col)}"',
                GridView(grid=snapshot(grid), rows=rows, cols=cols, keyword=keyword,
                         order=tuple(order), highlight_column=col),
            )

        plaintext = ""
        for r in range(rows):
            plaintext += read_row(grid, r)
            trace.add(
                f'Reading row {r + 1}: "{read_row(grid, r)}"',
                GridView(grid=snapshot(grid), rows=rows, cols=cols, keyword=keyword,
                         order=tuple(order), highlight_row=r, partial=plaintext),
            )

        plaintext = strip_padding(plaintext, self.filler)
        trace.add(f'Plaintext complete: "{plaintext}"',
                  ResultView(mode=DECRYPT, output=plaintext))
        return trace.build(plaintext)
