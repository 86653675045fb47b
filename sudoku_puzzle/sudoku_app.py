"""
Sudoku Puzzler - Main Application Module
"""

import argparse
import os
import sys
import time

import cv2

from .game import Game
from .generator import Generator
from .grid import Coordinate
from .render import format_board, format_hints, render_grid
from .solver import Solver

HELP_TEXT = """Commands:
  set X Y D    place digit D at column X, row Y (0-based)
  erase X Y    erase the digit at column X, row Y
  hints        list candidates for every empty cell
  show         print the board
  solve        reveal the solution
  new          start a new puzzle
  help         show this message
  quit         leave"""


class SudokuPuzzler:
    """
    Main class for the Sudoku Puzzler application.

    Runs puzzle generation step by step with progress output, and hosts the
    interactive text session.
    """

    def __init__(self, seed=None, cell_size=60, save_render=True, max_steps=None):
        """
        Initialize the Sudoku Puzzler.

        Args:
            seed (int): Random seed for reproducible puzzles (default: fresh entropy)
            cell_size (int): Cell size in pixels for rendered images (default: 60)
            save_render (bool): Whether to write puzzle/solution images
            max_steps (int): Optional placement budget for each solver search
        """
        self.seed = seed
        self.cell_size = cell_size
        self.save_render = save_render
        self.solver = Solver(rng=seed, max_steps=max_steps)
        self.generator = Generator(rng=self.solver.rng, solver=self.solver)
        self.images = {}

    def generate_puzzle(self, output_dir='output', show_solution=False, show_hints=False):
        """
        Generate one puzzle through the full pipeline.

        Pipeline steps:
        1. Seed a random digit
        2. Solve to a full board
        3. Carve cells while the solution stays unique
        4. Fix the givens and compute hints

        Args:
            output_dir (str): Directory to save rendered images
            show_solution (bool): Print the solution after the puzzle
            show_hints (bool): Print candidates for every empty cell

        Returns:
            dict: puzzle, solution, clue count, removed count and elapsed seconds
        """
        print(f"\n{'='*60}")
        print(f"Generating puzzle (seed: {self.seed if self.seed is not None else 'random'})")
        print(f"{'='*60}")
        started = time.perf_counter()

        print("\n[1/4] Seeding grid...")
        grid = self.generator.seed()
        coord = grid.filled_coords()[0]
        print(f"      Seed digit {grid.digit_at(coord)} at {coord}")

        print("\n[2/4] Solving to a full board...")
        grid = self.generator.fill(grid)
        solution = grid.copy()
        print(f"      ✓ Full board found ({self.solver.steps} steps)")

        print("\n[3/4] Carving cells while the solution stays unique...")
        removed = self.generator.carve(grid)
        print(f"      ✓ Removed {removed} cells")

        print("\n[4/4] Fixing givens and computing hints...")
        self.generator.finalize(grid)
        clues = grid.count_digits()
        print(f"      Givens: {clues}, empty cells: {81 - clues}")

        elapsed = time.perf_counter() - started

        print("\n      Puzzle:")
        print(format_board(grid))
        if show_hints:
            print("\n      Hints:")
            print(format_hints(grid))
        if show_solution:
            print("\n      Solution:")
            print(format_board(solution))

        if self.save_render:
            self.images['puzzle'] = render_grid(grid, self.cell_size)
            self.images['solution'] = render_grid(solution, self.cell_size)
            self._save_results(output_dir)

        print(f"\n{'='*60}")
        print(f"Generation complete in {elapsed:.2f}s")
        if self.save_render:
            print(f"Images saved to: {output_dir}/")
        print(f"{'='*60}\n")

        return {
            'puzzle': grid,
            'solution': solution,
            'clues': clues,
            'removed': removed,
            'elapsed': elapsed,
        }

    def _save_results(self, output_dir):
        """
        Save rendered images to disk.

        Args:
            output_dir (str): Output directory
        """
        os.makedirs(output_dir, exist_ok=True)
        for name, image in self.images.items():
            cv2.imwrite(os.path.join(output_dir, f"{name}.png"), image)

        print(f"\n      Saved {len(self.images)} images")

    def play(self, game=None, input_fn=input):
        """
        Run the interactive text session until `quit` or end of input.

        Returns:
            Game: the game as it stood when the session ended
        """
        if game is None:
            game = Game(generator=self.generator, solver=self.solver)
        print(format_board(game.grid))
        print(HELP_TEXT)

        while True:
            try:
                line = input_fn("> ")
            except EOFError:
                break
            parts = line.split()
            if not parts:
                continue
            command, args = parts[0].lower(), parts[1:]

            if command in ('quit', 'exit', 'q'):
                break
            if command == 'help':
                print(HELP_TEXT)
            elif command == 'show':
                print(format_board(game.grid))
            elif command == 'hints':
                print(format_hints(game.grid))
            elif command == 'solve':
                if game.reveal():
                    print(format_board(game.grid))
                else:
                    print("No solution exists for the current board")
            elif command == 'new':
                game.new_puzzle()
                print(format_board(game.grid))
            elif command in ('set', 'erase'):
                self._edit(game, command, args)
            else:
                print(f"Unknown command: {command} (type 'help')")

            if game.is_solved():
                print("Solved!")

        return game

    def _edit(self, game, command, args):
        expected = 3 if command == 'set' else 2
        try:
            values = [int(a) for a in args]
            if len(values) != expected:
                raise ValueError(f"{command} takes {expected} numbers")
            game.select(Coordinate(values[0], values[1]))
        except ValueError as e:
            print(f"Invalid input: {e}")
            return

        if game.grid.is_fixed(game.selected):
            print(f"Cell {game.selected} is a given and cannot be changed")
            return

        if command == 'erase':
            if game.erase() is None:
                print(f"Cell {game.selected} is already empty")
            return

        try:
            conflict = game.enter(values[2])
        except ValueError as e:
            print(f"Invalid input: {e}")
            return
        if conflict is not None:
            print(f"{values[2]} conflicts with the digit at {conflict}")
        else:
            print(format_board(game.grid))


def main(argv=None):
    """
    Main entry point for the Sudoku Puzzler application.

    Handles command-line arguments and generates or plays puzzles.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Puzzler - generate uniquely solvable puzzles',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Generate a puzzle:
    python -m sudoku_puzzle

  Reproducible puzzle with its solution:
    python -m sudoku_puzzle --seed 42 --solution

  Play in the terminal:
    python -m sudoku_puzzle --play
        """
    )

    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='Random seed for reproducible puzzles')
    parser.add_argument('--output', '-o', default='output',
                        help='Output directory (default: output)')
    parser.add_argument('--cell-size', type=int, default=60,
                        help='Cell size in pixels for rendered images (default: 60)')
    parser.add_argument('--no-save', action='store_true',
                        help='Do not save rendered images')
    parser.add_argument('--solution', action='store_true',
                        help='Print the solution after the puzzle')
    parser.add_argument('--hints', action='store_true',
                        help='Print candidates for every empty cell')
    parser.add_argument('--max-steps', type=int, default=None,
                        help='Abort any single solver search after this many placements')
    parser.add_argument('--play', action='store_true',
                        help='Play the puzzle interactively in the terminal')

    args = parser.parse_args(argv)

    if args.cell_size < 10:
        print(f"Error: cell size must be at least 10 pixels, got {args.cell_size}")
        sys.exit(1)

    puzzler = SudokuPuzzler(
        seed=args.seed,
        cell_size=args.cell_size,
        save_render=not args.no_save,
        max_steps=args.max_steps,
    )

    try:
        result = puzzler.generate_puzzle(args.output, show_solution=args.solution,
                                         show_hints=args.hints)
        if args.play:
            puzzler.play(Game(grid=result['puzzle'], generator=puzzler.generator,
                              solver=puzzler.solver))

    except Exception as e:
        print(f"\nError during generation: {str(e)}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
