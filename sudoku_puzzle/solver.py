"""
Randomized backtracking Sudoku solver.

The search fills the first empty cell in row-major order, trying digits in
a shuffled order, and stops as soon as `limit` full solutions have been
collected. limit=1 reveals a solution; limit=2 is the uniqueness test.
"""

from typing import List, Optional, Tuple

import numpy as np

from .conflicts import describe_duplicates, find_conflict
from .grid import GRID_SIZE, Grid


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search places more digits than its `max_steps` budget."""

    def __init__(self, steps: int, max_steps: int):
        super().__init__(f"Stopped after {steps} steps (limit {max_steps})")
        self.steps = steps
        self.max_steps = max_steps


def make_rng(rng=None) -> np.random.Generator:
    """Accept a numpy Generator, an integer seed or None."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class Solver:
    """
    Enumerates up to `limit` completions of a grid.

    Args:
        rng: numpy Generator or seed used to shuffle digit order
        max_steps (int): optional cap on digit placements per search
    """

    def __init__(self, rng=None, max_steps: Optional[int] = None):
        self.rng = make_rng(rng)
        self.max_steps = max_steps
        self.steps = 0

    def find_solutions(self, grid: Grid, limit: int) -> List[Grid]:
        """Return between 0 and `limit` full solutions of `grid`."""
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        self.steps = 0
        if describe_duplicates(grid):
            return []

        solutions: List[Grid] = []
        self._search(grid.copy(), solutions, limit)
        return solutions

    def _search(self, work: Grid, solutions: List[Grid], limit: int) -> bool:
        """Returns True when the caller must stop searching."""
        coord = work.first_empty()
        if coord is None:
            solutions.append(work.copy())
            return len(solutions) >= limit

        for digit in self.rng.permutation(GRID_SIZE) + 1:
            if find_conflict(work, coord, digit) is not None:
                continue
            self.steps += 1
            if self.max_steps is not None and self.steps > self.max_steps:
                raise SearchBudgetExceeded(self.steps, self.max_steps)
            work.set_digit(coord, digit)
            if self._search(work, solutions, limit):
                return True
            work.clear(coord)

        return False

    def reveal(self, grid: Grid) -> Optional[Grid]:
        solutions = self.find_solutions(grid, 1)
        if solutions:
            return solutions[0]
        return None

    def count_solutions(self, grid: Grid, limit: int = 2) -> int:
        return len(self.find_solutions(grid, limit))

    def has_unique_solution(self, grid: Grid) -> bool:
        return self.count_solutions(grid, 2) == 1


def solve_puzzle(grid: Grid, max_steps: int = 200000, rng=None) -> Tuple[Optional[Grid], str]:
    """
    Return a solved copy of the grid, or (None, reason) if unsolvable or invalid.
    Limits the search to max_steps placements to avoid runaway searches.
    """
    reason = describe_duplicates(grid)
    if reason:
        return None, reason

    solver = Solver(rng=rng, max_steps=max_steps)
    try:
        solution = solver.reveal(grid)
    except SearchBudgetExceeded as exc:
        return None, str(exc)

    if solution is not None:
        return solution, f"Solved in {solver.steps} steps"
    return None, "No solution found"
