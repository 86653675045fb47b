"""
Sudoku Puzzler - puzzle generation and validation

This package contains modules for:
- The 9x9 grid model and cell contents
- Row/column/box conflict checking
- Candidate (hint) tracking
- Randomized backtracking solving
- Uniquely solvable puzzle generation
- Text and image rendering, and an interactive session
"""

from .conflicts import find_conflict
from .generator import Generator, generate
from .grid import Cell, Coordinate, Digit, Empty, Grid, Hints
from .hints import erase_digit, place_digit, recompute_hints
from .solver import SearchBudgetExceeded, Solver, solve_puzzle

__version__ = "1.0.0"
