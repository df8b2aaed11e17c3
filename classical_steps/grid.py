"""
Grid helpers shared by the transposition ciphers
================================================
Scytale, Route and Columnar all lay text out in a rows × cols character
matrix. The working grid while a generator runs is a mutable list of lists;
anything handed to a Step goes through `snapshot()` first.

Spiral route: peel the grid ring by ring, clockwise from the top-left
corner: top row left→right, right column downward, bottom row right→left,
left column upward, then shrink the bounding box and repeat.
"""

from typing import List, Tuple

from .steps import Grid

Coord = Tuple[int, int]


def grid_shape(length: int, cols: int) -> int:
    """Rows needed to hold `length` characters in `cols` columns."""
    return -(-length // cols)


def fill_rows(padded: str, cols: int) -> List[List[str]]:
    return [list(padded[i:i + cols]) for i in range(0, len(padded), cols)]


def blank_grid(rows: int, cols: int, fill: str = "") -> List[List[str]]:
    return [[fill] * cols for _ in range(rows)]


def snapshot(grid: List[List[str]]) -> Grid:
    return tuple(tuple(row) for row in grid)


def read_column(grid: List[List[str]], col: int) -> str:
    return "".join(row[col] for row in grid)


def read_row(grid: List[List[str]], row: int) -> str:
    return "".join(grid[row])


def spiral_route(rows: int, cols: int) -> List[Coord]:
    """Every (row, col) of a rows × cols grid exactly once, in spiral order."""
    route = []
    top, bottom, left, right = 0, rows - 1, 0, cols - 1

    while top <= bottom and left <= right:
        for c in range(left, right + 1):
            route.append((top, c))
        top += 1
        for r in range(top, bottom + 1):
            route.append((r, right))
        right -= 1
        # single remaining row/column: the return legs would revisit cells
        if top <= bottom:
            for c in range(right, left - 1, -1):
                route.append((bottom, c))
            bottom -= 1
        if left <= right:
            for r in range(bottom, top - 1, -1):
                route.append((r, left))
            left += 1

    return route
