"""
Candidate tracking for empty cells.

Placing a digit only strikes that digit from the hints of its peers; it
never re-adds anything. Erasing a digit recomputes the vacated cell and
gives the digit back to peers that are no longer blocked by it.
"""

from typing import Optional

from .conflicts import find_conflict, peers
from .grid import DIGITS, Coordinate, Grid, Hints


def compute_hints(grid: Grid, coord: Coordinate) -> Hints:
    return Hints(tuple(find_conflict(grid, coord, d) is None for d in DIGITS))


def recompute_hints(grid: Grid, coord: Coordinate) -> None:
    """Overwrite the cell at `coord` with its freshly derived candidate set."""
    grid.set_hints(coord, compute_hints(grid, coord))


def recompute_all_hints(grid: Grid) -> None:
    for coord in grid.coords():
        if grid.digit_at(coord) is None:
            recompute_hints(grid, coord)


def place_digit(grid: Grid, coord: Coordinate, digit: int) -> None:
    """Write `digit` at `coord` and remove it from the hints of every peer."""
    for peer in peers(coord):
        if grid.has_hints(peer):
            grid.discard_hint(peer, digit)
    grid.set_digit(coord, digit)


def erase_digit(grid: Grid, coord: Coordinate) -> Optional[int]:
    """
    Remove the digit at `coord` and restore candidate information.

    Peers holding hints get the erased digit back only when nothing else in
    their own row, column or box still blocks it.

    Returns:
        The erased digit, or None if the cell held no digit
    """
    digit = grid.digit_at(coord)
    if digit is None:
        return None

    recompute_hints(grid, coord)
    for peer in peers(coord):
        if grid.has_hints(peer) and find_conflict(grid, peer, digit) is None:
            grid.restore_hint(peer, digit)
    return digit
