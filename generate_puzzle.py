#!/usr/bin/env python3
"""
Convenience script to generate a Sudoku puzzle.

This script provides a simple interface to the Sudoku Puzzler pipeline.

Usage:
    python generate_puzzle.py
    python generate_puzzle.py --seed 7 --output my_output/
"""

from sudoku_puzzle.sudoku_app import main

if __name__ == '__main__':
    main()
