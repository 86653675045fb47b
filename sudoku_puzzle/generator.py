"""
Puzzle generation: seed one digit, solve to a full board, then carve.

Carving removes one random digit at a time and keeps the removal while the
grid still has exactly one completion. The first removal that makes the
grid ambiguous is undone and carving stops there; earlier removals stay.
"""

from typing import Optional

from .grid import GRID_SIZE, Coordinate, Grid
from .hints import place_digit, recompute_hints
from .solver import Solver, make_rng


class Generator:
    """
    Builds uniquely solvable puzzles.

    Args:
        rng: numpy Generator or seed; shared with the default solver
        solver (Solver): solver used for filling and uniqueness tests
    """

    def __init__(self, rng=None, solver: Optional[Solver] = None):
        self.rng = make_rng(rng)
        self.solver = solver if solver is not None else Solver(rng=self.rng)

    def generate(self) -> Grid:
        grid = self.seed()
        grid = self.fill(grid)
        self.carve(grid)
        self.finalize(grid)
        return grid

    def seed(self) -> Grid:
        """Fresh all-hints grid with one random digit at one random cell."""
        grid = Grid()
        coord = Coordinate(int(self.rng.integers(GRID_SIZE)), int(self.rng.integers(GRID_SIZE)))
        place_digit(grid, coord, int(self.rng.integers(1, GRID_SIZE + 1)))
        return grid

    def fill(self, grid: Grid) -> Grid:
        solution = self.solver.reveal(grid)
        if solution is None:
            raise RuntimeError("Seeded grid has no solution")
        return solution

    def carve(self, grid: Grid) -> int:
        """
        Remove digits in place while the solution stays unique.

        Returns:
            Number of cells removed
        """
        removed = 0
        while True:
            filled = grid.filled_coords()
            if not filled:
                return removed

            coord = filled[int(self.rng.integers(len(filled)))]
            digit = grid.digit_at(coord)
            grid.clear(coord)

            if len(self.solver.find_solutions(grid, 2)) == 1:
                removed += 1
                continue

            grid.set_digit(coord, digit)
            return removed

    def finalize(self, grid: Grid) -> None:
        """Fix every remaining digit and derive hints for every other cell."""
        for coord in grid.coords():
            if grid.digit_at(coord) is not None:
                grid.set_fixed(coord, True)
            else:
                recompute_hints(grid, coord)


def generate(seed=None) -> Grid:
    return Generator(rng=seed).generate()
