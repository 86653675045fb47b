#!/usr/bin/env python3
"""
Generate a batch of Sudoku puzzles and summarize their clue counts.

Usage:
    python generate_batch.py 10
    python generate_batch.py 25 --seed 1
"""

import argparse

from sudoku_puzzle.generator import Generator
from sudoku_puzzle.solver import Solver


def main(argv=None):
    """Generate puzzles, check each one for a unique solution and print a summary."""
    parser = argparse.ArgumentParser(description='Generate a batch of Sudoku puzzles')
    parser.add_argument('count', type=int, nargs='?', default=10,
                        help='Number of puzzles to generate (default: 10)')
    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='Random seed for the whole batch')
    args = parser.parse_args(argv)

    if args.count < 1:
        print("Nothing to generate!")
        return

    print(f"Generating {args.count} puzzles")
    print("=" * 60)

    solver = Solver(rng=args.seed)
    generator = Generator(rng=solver.rng, solver=solver)
    checker = Solver(rng=args.seed)

    results = {
        'unique': [],
        'ambiguous': [],
    }
    clue_counts = []

    for i in range(1, args.count + 1):
        puzzle = generator.generate()
        clues = puzzle.count_digits()
        clue_counts.append(clues)

        if checker.has_unique_solution(puzzle):
            results['unique'].append(i)
            print(f"[{i}/{args.count}] {clues} givens ✓")
        else:
            results['ambiguous'].append(i)
            print(f"[{i}/{args.count}] {clues} givens ✗ not unique")

    # Print summary
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Unique:     {len(results['unique'])}/{args.count}")
    print(f"❌ Ambiguous:  {len(results['ambiguous'])}/{args.count}")
    print(f"Givens: min {min(clue_counts)}, "
          f"mean {sum(clue_counts) / len(clue_counts):.1f}, max {max(clue_counts)}")

    return results


if __name__ == '__main__':
    main()
