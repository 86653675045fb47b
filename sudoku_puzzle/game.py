"""Interactive editing state: selection, digit entry, erasing and reveal."""

from typing import Optional

from .conflicts import find_conflict, is_consistent
from .generator import Generator
from .grid import GRID_SIZE, Coordinate, Grid
from .hints import erase_digit, place_digit
from .solver import Solver


class Game:
    """
    A puzzle being played.

    Fixed cells are protected here, not in the grid: `enter` and `erase`
    leave them untouched.
    """

    def __init__(self, grid: Optional[Grid] = None, generator: Optional[Generator] = None,
                 solver: Optional[Solver] = None):
        self.generator = generator if generator is not None else Generator()
        self.solver = solver if solver is not None else self.generator.solver
        self.grid = grid if grid is not None else self.generator.generate()
        self.selected: Optional[Coordinate] = None
        self.conflicting: Optional[Coordinate] = None

    def select(self, coord: Coordinate) -> None:
        self.selected = coord

    def move(self, dx: int, dy: int) -> Coordinate:
        if self.selected is None:
            self.selected = Coordinate(0, 0)
        else:
            x = min(max(self.selected.x + dx, 0), GRID_SIZE - 1)
            y = min(max(self.selected.y + dy, 0), GRID_SIZE - 1)
            self.selected = Coordinate(x, y)
        return self.selected

    def enter(self, digit: int) -> Optional[Coordinate]:
        """
        Place `digit` in the selected cell.

        Returns:
            The clashing cell when the digit was refused, otherwise None
        """
        if self.selected is None or self.grid.is_fixed(self.selected):
            return None

        conflict = find_conflict(self.grid, self.selected, digit)
        if conflict is not None:
            self.conflicting = conflict
            return conflict

        place_digit(self.grid, self.selected, digit)
        self.conflicting = None
        return None

    def erase(self) -> Optional[int]:
        if self.selected is None or self.grid.is_fixed(self.selected):
            return None
        self.conflicting = None
        return erase_digit(self.grid, self.selected)

    def reveal(self) -> bool:
        solution = self.solver.reveal(self.grid)
        if solution is None:
            return False
        self.grid = solution
        self._reset_marks()
        return True

    def new_puzzle(self) -> Grid:
        self.grid = self.generator.generate()
        self._reset_marks()
        return self.grid

    def is_solved(self) -> bool:
        return self.grid.is_complete() and is_consistent(self.grid)

    def _reset_marks(self):
        self.selected = None
        self.conflicting = None
