"""
Entry point for running the sudoku_puzzle package as a module.

Usage:
    python -m sudoku_puzzle --seed 42
"""

from .sudoku_app import main

if __name__ == '__main__':
    main()
