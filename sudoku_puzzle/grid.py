"""
Grid model for 9x9 Sudoku puzzles.

A cell holds exactly one kind of content:
- Digit(d): a placed or puzzle-given digit 1-9
- Hints(mask): the digits still feasible for an empty cell
- Empty: nothing at all (used while searching)

Storage is numpy-backed: a digit array (0 = no digit), a 9x9x9 hint mask
and a flag array telling which digit-less cells carry hints.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

GRID_SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, 10)


def _check_digit(digit) -> int:
    if isinstance(digit, bool) or not isinstance(digit, (int, np.integer)):
        raise ValueError(f"Digit must be an integer, got {digit!r}")
    if not 1 <= digit <= 9:
        raise ValueError(f"Digit must be in [1, 9], got {digit}")
    return int(digit)


@dataclass(frozen=True)
class Coordinate:
    """Grid position; x is the column, y is the row."""

    x: int
    y: int

    def __post_init__(self):
        for name, value in (("x", self.x), ("y", self.y)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Coordinate {name} must be an integer, got {value!r}")
            if not 0 <= value < GRID_SIZE:
                raise ValueError(f"Coordinate {name} must be in [0, 8], got {value}")
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    def __str__(self):
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Digit:
    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", _check_digit(self.value))


@dataclass(frozen=True)
class Hints:
    """Candidate set for an empty cell: mask[d - 1] is True when d is feasible."""

    mask: Tuple[bool, ...]

    def __post_init__(self):
        mask = tuple(bool(m) for m in self.mask)
        if len(mask) != GRID_SIZE:
            raise ValueError(f"Hints mask must have 9 entries, got {len(mask)}")
        object.__setattr__(self, "mask", mask)

    @classmethod
    def all(cls) -> "Hints":
        return cls((True,) * GRID_SIZE)

    @classmethod
    def from_digits(cls, digits) -> "Hints":
        chosen = {_check_digit(d) for d in digits}
        return cls(tuple(d in chosen for d in DIGITS))

    @property
    def digits(self) -> List[int]:
        return [d for d in DIGITS if self.mask[d - 1]]

    def __contains__(self, digit) -> bool:
        return self.mask[_check_digit(digit) - 1]

    def __len__(self):
        return sum(self.mask)


@dataclass(frozen=True)
class Empty:
    pass


CellContent = Union[Digit, Hints, Empty]


@dataclass(frozen=True)
class Cell:
    content: CellContent
    fixed: bool = False

    @property
    def digit(self) -> Optional[int]:
        if isinstance(self.content, Digit):
            return self.content.value
        return None


class Grid:
    """
    The 9x9 board. Owns every cell's content and its `fixed` flag.

    Grids are value-copyable through `copy()`; the solver works on copies so
    a failed search never touches the caller's grid.
    """

    def __init__(self):
        self._digits = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
        self._hints = np.ones((GRID_SIZE, GRID_SIZE, GRID_SIZE), dtype=bool)
        self._has_hints = np.ones((GRID_SIZE, GRID_SIZE), dtype=bool)
        self._fixed = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)

    @classmethod
    def from_array(cls, board, fixed: bool = False) -> "Grid":
        """
        Build a grid from a 9x9 array of ints (0 = no digit).

        Args:
            board: nested lists or numpy array, indexed [row][col]
            fixed (bool): mark every cell holding a digit as fixed

        Returns:
            Grid with digits placed and every other cell Empty
        """
        arr = np.asarray(board)
        if arr.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(f"Board must be 9x9, got shape {arr.shape}")
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"Board must hold integers, got dtype {arr.dtype}")
        if arr.min() < 0 or arr.max() > 9:
            raise ValueError("Board values must be in [0, 9]")

        grid = cls()
        grid._digits[:, :] = arr
        grid._has_hints[:, :] = False
        if fixed:
            grid._fixed[:, :] = arr != 0
        return grid

    @property
    def digits(self) -> np.ndarray:
        """Read-only view of the digit array, indexed [y, x]; 0 = no digit."""
        view = self._digits.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> np.ndarray:
        return self._digits.astype(int)

    def get(self, coord: Coordinate) -> Cell:
        y, x = coord.y, coord.x
        return Cell(content=self._content(x, y), fixed=bool(self._fixed[y, x]))

    def _content(self, x: int, y: int) -> CellContent:
        value = int(self._digits[y, x])
        if value:
            return Digit(value)
        if self._has_hints[y, x]:
            return Hints(tuple(self._hints[y, x]))
        return Empty()

    def digit_at(self, coord: Coordinate) -> Optional[int]:
        value = int(self._digits[coord.y, coord.x])
        return value or None

    def has_hints(self, coord: Coordinate) -> bool:
        return not self._digits[coord.y, coord.x] and bool(self._has_hints[coord.y, coord.x])

    def set_digit(self, coord: Coordinate, digit: int) -> None:
        """Write a digit with no propagation and no fixed-cell guard."""
        self._digits[coord.y, coord.x] = _check_digit(digit)
        self._has_hints[coord.y, coord.x] = False

    def set_hints(self, coord: Coordinate, hints: Hints) -> None:
        self._digits[coord.y, coord.x] = 0
        self._has_hints[coord.y, coord.x] = True
        self._hints[coord.y, coord.x] = hints.mask

    def clear(self, coord: Coordinate) -> None:
        """Reset the cell to Empty."""
        self._digits[coord.y, coord.x] = 0
        self._has_hints[coord.y, coord.x] = False

    def discard_hint(self, coord: Coordinate, digit: int) -> None:
        self._hints[coord.y, coord.x, _check_digit(digit) - 1] = False

    def restore_hint(self, coord: Coordinate, digit: int) -> None:
        self._hints[coord.y, coord.x, _check_digit(digit) - 1] = True

    def is_fixed(self, coord: Coordinate) -> bool:
        return bool(self._fixed[coord.y, coord.x])

    def set_fixed(self, coord: Coordinate, fixed: bool = True) -> None:
        self._fixed[coord.y, coord.x] = fixed

    def coords(self) -> Iterator[Coordinate]:
        """All coordinates in row-major order."""
        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                yield Coordinate(x, y)

    def filled_coords(self) -> List[Coordinate]:
        return [Coordinate(int(x), int(y)) for y, x in np.argwhere(self._digits != 0)]

    def first_empty(self) -> Optional[Coordinate]:
        positions = np.argwhere(self._digits == 0)
        if positions.size == 0:
            return None
        y, x = positions[0]
        return Coordinate(int(x), int(y))

    def count_digits(self) -> int:
        return int(np.count_nonzero(self._digits))

    def is_complete(self) -> bool:
        return self.count_digits() == GRID_SIZE * GRID_SIZE

    def copy(self) -> "Grid":
        other = Grid.__new__(Grid)
        other._digits = self._digits.copy()
        other._hints = self._hints.copy()
        other._has_hints = self._has_hints.copy()
        other._fixed = self._fixed.copy()
        return other

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        if not np.array_equal(self._digits, other._digits):
            return False
        if not np.array_equal(self._fixed, other._fixed):
            return False
        # Hint masks only matter where the cell actually carries hints
        mine = self._has_hints & (self._digits == 0)
        theirs = other._has_hints & (other._digits == 0)
        if not np.array_equal(mine, theirs):
            return False
        return bool(np.array_equal(self._hints[mine], other._hints[theirs]))

    __hash__ = None

    def __repr__(self):
        return f"Grid(digits={self.count_digits()}, fixed={int(self._fixed.sum())})"
