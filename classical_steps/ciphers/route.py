"""
Route Cipher (spiral)
=====================
Write the plaintext into a grid row by row, then read it back following a
route through the grid. This implementation uses the clockwise spiral from
the top-left corner: the route itself is fixed, the column count is the key.

Decryption walks the same spiral, dropping ciphertext letters into the
cells in route order, then reads the grid row by row.

Historical note: Union forces used route ciphers heavily during the
American Civil War. Quick to apply in the field with pencil and paper.
"""

import logging

from ..alphabet import FILLER, check_filler, normalize_letters, pad, strip_padding
from ..grid import blank_grid, fill_rows, grid_shape, read_row, snapshot, spiral_route
from ..steps import CipherRun, GridView, ResultView, StepTrace, TextView
from .base import DECRYPT, ENCRYPT, StepCipher, parse_columns

logger = logging.getLogger(__name__)


class RouteCipher(StepCipher):
    """
    Spiral route transposition.

    `stride` controls animation granularity along the spiral: a step is
    emitted every `stride` positions and always at the last position.
    stride=1 shows every cell.
    """

    cipher_id = "route"
    name      = "Route Cipher"

    DEFAULT_COLUMNS = 4
    MIN_COLUMNS     = 2
    MAX_COLUMNS     = 64
    STRIDE          = 1

    def __init__(self, stride: int = STRIDE, filler: str = FILLER):
        if not isinstance(stride, int) or stride < 1:
            raise ValueError("Route stride must be a positive integer.")
        self.stride = stride
        self.filler = check_filler(filler)
        logger.debug(f"RouteCipher stride={stride} filler={filler}")

    def _shape(self, text: str, key):
        clean = normalize_letters(text)
        cols  = parse_columns(key, self.DEFAULT_COLUMNS)
        if not clean or not self.MIN_COLUMNS <= cols <= self.MAX_COLUMNS:
            return clean, cols, 0
        return clean, cols, grid_shape(len(clean), cols)

    def _shown(self, i: int, total: int) -> bool:
        return (i + 1) % self.stride == 0 or i == total - 1

    def _encrypt_steps(self, text: str, key) -> CipherRun:
        clean, cols, rows = self._shape(text, key)
        if not rows:
            return CipherRun.empty()
        padded = pad(clean, rows * cols, self.filler)
        logger.debug(f"route encrypt: {len(clean)} letters in {rows}x{cols}")

        trace = StepTrace()
        trace.add(f'Starting with plaintext: "{clean}"', TextView(text=clean))
        if padded != clean:
            trace.add(f'Padding text to fill {rows}×{cols} grid: "{padded}"',
                      TextView(text=padded))

        grid = []
        for r, row in enumerate(fill_rows(padded, cols)):
            grid.append(list(row))
            trace.add(
                f'Filling row {r + 1}: "{"".join(row)}"',
                GridView(grid=snapshot(grid), rows=rows, cols=cols,
                         route=(), highlight_row=r),
            )

        route = spiral_route(rows, cols)
        trace.add(
            f"Generated spiral route through {rows}×{cols} grid",
            GridView(grid=snapshot(grid), rows=rows, cols=cols,
                     route=tuple(route), show_route=True),
        )

        ciphertext = ""
        for i, (r, c) in enumerate(route):
            ciphertext += grid[r][c]
            if self._shown(i, len(route)):
                trace.add(
                    f"Position ({r + 1}, {c + 1}): read '{grid[r][c]}'",
                    GridView(grid=snapshot(grid), rows=rows, cols=cols,
                             route=tuple(route[:i + 1]), current_pos=(r, c),
                             partial=ciphertext),
                )

        trace.add(f'Ciphertext complete: "{ciphertext}"',
                  ResultView(mode=ENCRYPT, output=ciphertext, route=tuple(route)))
        return trace.build(ciphertext)

    def _decrypt_steps(self, text: str, key) -> CipherRun:
        clean, cols, rows = self._shape(text, key)
        if not rows:
            return CipherRun.empty()
        padded = pad(clean, rows * cols, self.filler)
        logger.debug(f"route decrypt: {len(clean)} letters in {rows}x{cols}")

        trace = StepTrace()
        trace.add(f'Starting with ciphertext: "{clean}"', TextView(text=clean))

        grid  = blank_grid(rows, cols)
        route = spiral_route(rows, cols)
        for i, (r, c) in enumerate(route):
            grid[r][c] = padded[i]
            if self._shown(i, len(route)):
                trace.add(
                    f"Position ({r + 1}, {c + 1}): place '{padded[i]}'",
                    GridView(grid=snapshot(grid), rows=rows, cols=cols,
                             route=tuple(route[:i + 1]), current_pos=(r, c)),
                )

        plaintext = ""
        for r in range(rows):
            row = read_row(grid, r)
            plaintext += row
            trace.add(
                f'Reading row {r + 1}: "{row}"',
                GridView(grid=snapshot(grid), rows=rows, cols=cols,
                         route=(), highlight_row=r, partial=plaintext),
            )

        plaintext = strip_padding(plaintext, self.filler)
        trace.add(f'Plaintext complete: "{plaintext}"',
                  ResultView(mode=DECRYPT, output=plaintext, route=tuple(route)))
        return trace.build(plaintext)
