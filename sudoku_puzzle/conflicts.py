"""
Row/column/box conflict detection.

`find_conflict` scans in a fixed order (row, then column, then box with
columns outermost) and reports the first clashing cell, so UIs always
highlight the same cell for the same board.
"""

from typing import Iterator, Optional

import numpy as np

from .grid import BOX_SIZE, GRID_SIZE, Coordinate, Grid, _check_digit


def box_origin(coord: Coordinate) -> Coordinate:
    return Coordinate((coord.x // BOX_SIZE) * BOX_SIZE, (coord.y // BOX_SIZE) * BOX_SIZE)


def find_conflict(grid: Grid, coord: Coordinate, digit: int) -> Optional[Coordinate]:
    """
    Find a cell that already holds `digit` in the row, column or box of `coord`.

    The target cell itself is never reported and need not be empty.

    Returns:
        Coordinate of the first conflicting cell, or None
    """
    digit = _check_digit(digit)
    board = grid.digits
    x, y = coord.x, coord.y

    for cx in np.flatnonzero(board[y, :] == digit):
        if cx != x:
            return Coordinate(int(cx), y)

    for cy in np.flatnonzero(board[:, x] == digit):
        if cy != y:
            return Coordinate(x, int(cy))

    origin = box_origin(coord)
    box = board[origin.y:origin.y + BOX_SIZE, origin.x:origin.x + BOX_SIZE]
    # Transposed so argwhere walks columns first
    for dx, dy in np.argwhere(box.T == digit):
        bx, by = origin.x + int(dx), origin.y + int(dy)
        if (bx, by) != (x, y):
            return Coordinate(bx, by)

    return None


def peers(coord: Coordinate) -> Iterator[Coordinate]:
    """Yield the 20 distinct cells sharing a row, column or box with `coord`."""
    seen = {coord}
    origin = box_origin(coord)
    candidates = (
        [Coordinate(i, coord.y) for i in range(GRID_SIZE)]
        + [Coordinate(coord.x, i) for i in range(GRID_SIZE)]
        + [Coordinate(origin.x + i % BOX_SIZE, origin.y + i // BOX_SIZE) for i in range(GRID_SIZE)]
    )
    for other in candidates:
        if other not in seen:
            seen.add(other)
            yield other


def is_consistent(grid: Grid) -> bool:
    """True when no two digits on the grid clash."""
    return not describe_duplicates(grid)


def describe_duplicates(grid: Grid) -> str:
    """Return a message naming the first row/column/box with a duplicate digit, or ''."""
    board = grid.digits
    for i in range(GRID_SIZE):
        row_vals = [v for v in board[i, :].tolist() if v != 0]
        if len(row_vals) != len(set(row_vals)):
            return f"Row {i+1} has duplicate digit"

        col_vals = [v for v in board[:, i].tolist() if v != 0]
        if len(col_vals) != len(set(col_vals)):
            return f"Column {i+1} has duplicate digit"

    for br in range(3):
        for bc in range(3):
            block = board[br*3:(br+1)*3, bc*3:(bc+1)*3].ravel().tolist()
            block_vals = [v for v in block if v != 0]
            if len(block_vals) != len(set(block_vals)):
                return f"3x3 block ({br+1},{bc+1}) has duplicate digit"

    return ""
