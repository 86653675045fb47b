from sudoku_puzzle.conflicts import find_conflict, peers
from sudoku_puzzle.grid import DIGITS, Coordinate, Digit, Grid, Hints
from sudoku_puzzle.hints import (
    compute_hints,
    erase_digit,
    place_digit,
    recompute_all_hints,
    recompute_hints,
)


def test_recomputed_hints_match_conflict_checker(puzzle_grid):
    recompute_all_hints(puzzle_grid)
    for coord in puzzle_grid.coords():
        content = puzzle_grid.get(coord).content
        if isinstance(content, Digit):
            continue
        assert isinstance(content, Hints)
        for d in DIGITS:
            assert (d in content) == (find_conflict(puzzle_grid, coord, d) is None)


def test_known_candidates(puzzle_grid):
    # Row 0 holds 5 3 7, column 2 holds 8, box 0 holds 5 3 6 9 8
    assert compute_hints(puzzle_grid, Coordinate(2, 0)).digits == [1, 2, 4]


def test_recompute_overwrites_previous_content():
    grid = Grid()
    grid.set_digit(Coordinate(0, 0), 1)
    grid.set_digit(Coordinate(8, 8), 2)
    recompute_hints(grid, Coordinate(8, 8))
    assert grid.get(Coordinate(8, 8)).content == Hints.all()


def test_place_digit_strikes_peer_hints_only():
    grid = Grid()
    target = Coordinate(4, 4)
    place_digit(grid, target, 5)

    assert grid.digit_at(target) == 5
    for peer in peers(target):
        assert 5 not in grid.get(peer).content
        assert len(grid.get(peer).content) == 8
    assert grid.get(Coordinate(0, 0)).content == Hints.all()


def test_place_digit_leaves_digits_and_empty_cells_alone():
    grid = Grid()
    grid.set_digit(Coordinate(0, 4), 5)
    grid.clear(Coordinate(8, 4))
    place_digit(grid, Coordinate(4, 4), 5)
    assert grid.digit_at(Coordinate(0, 4)) == 5
    assert not grid.has_hints(Coordinate(8, 4))


def test_place_digit_never_re_adds_hints():
    grid = Grid()
    c = Coordinate(1, 0)
    grid.set_hints(c, Hints.from_digits([2, 3]))
    place_digit(grid, Coordinate(0, 0), 2)
    assert grid.get(c).content == Hints.from_digits([3])


def test_erase_restores_unblocked_peers():
    grid = Grid()
    place_digit(grid, Coordinate(0, 0), 5)
    place_digit(grid, Coordinate(4, 1), 5)

    assert erase_digit(grid, Coordinate(0, 0)) == 5
    assert 5 in grid.get(Coordinate(0, 0)).content
    assert 5 in grid.get(Coordinate(1, 0)).content
    assert 5 in grid.get(Coordinate(0, 7)).content
    # Still blocked by the 5 at (4,1)
    assert 5 not in grid.get(Coordinate(5, 0)).content


def test_erased_cell_hints_match_conflict_checker(puzzle_grid):
    recompute_all_hints(puzzle_grid)
    c = Coordinate(2, 0)
    place_digit(puzzle_grid, c, 4)
    erase_digit(puzzle_grid, c)
    assert puzzle_grid.get(c).content == compute_hints(puzzle_grid, c)
    for peer in peers(c):
        if puzzle_grid.has_hints(peer):
            assert puzzle_grid.get(peer).content == compute_hints(puzzle_grid, peer)


def test_erase_without_digit_is_a_no_op():
    grid = Grid()
    assert erase_digit(grid, Coordinate(3, 3)) is None
    assert grid.get(Coordinate(3, 3)).content == Hints.all()
