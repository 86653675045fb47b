import pytest

from sudoku_puzzle.conflicts import describe_duplicates, find_conflict, is_consistent, peers
from sudoku_puzzle.grid import DIGITS, Coordinate, Grid


def test_same_column_conflict_is_reported():
    grid = Grid()
    grid.set_digit(Coordinate(0, 0), 3)
    grid.set_digit(Coordinate(0, 1), 3)
    assert find_conflict(grid, Coordinate(0, 1), 3) == Coordinate(0, 0)


def test_no_conflict_on_empty_grid():
    grid = Grid()
    for d in DIGITS:
        assert find_conflict(grid, Coordinate(4, 4), d) is None


def test_target_cell_is_never_reported():
    grid = Grid()
    grid.set_digit(Coordinate(2, 2), 8)
    assert find_conflict(grid, Coordinate(2, 2), 8) is None


def test_row_is_scanned_before_column():
    grid = Grid()
    grid.set_digit(Coordinate(4, 0), 6)
    grid.set_digit(Coordinate(6, 3), 6)
    grid.set_digit(Coordinate(6, 7), 6)
    assert find_conflict(grid, Coordinate(6, 0), 6) == Coordinate(4, 0)


def test_column_is_scanned_before_box():
    grid = Grid()
    grid.set_digit(Coordinate(1, 1), 2)
    grid.set_digit(Coordinate(0, 8), 2)
    assert find_conflict(grid, Coordinate(0, 0), 2) == Coordinate(0, 8)


def test_box_is_scanned_column_by_column():
    grid = Grid()
    grid.set_digit(Coordinate(2, 1), 4)
    grid.set_digit(Coordinate(1, 2), 4)
    assert find_conflict(grid, Coordinate(0, 0), 4) == Coordinate(1, 2)


def test_invalid_digit_fails_fast():
    with pytest.raises(ValueError):
        find_conflict(Grid(), Coordinate(0, 0), 0)


def test_conflicts_are_mutual(puzzle_grid):
    for a in puzzle_grid.coords():
        if puzzle_grid.digit_at(a) is not None:
            continue
        for d in DIGITS:
            b = find_conflict(puzzle_grid, a, d)
            if b is None:
                continue
            assert puzzle_grid.digit_at(b) == d
            assert b in set(peers(a))

            swapped = puzzle_grid.copy()
            swapped.set_digit(a, d)
            back = find_conflict(swapped, b, d)
            assert back is not None
            assert back in set(peers(b))


def test_peers():
    coord = Coordinate(4, 4)
    result = list(peers(coord))
    assert len(result) == 20
    assert len(set(result)) == 20
    assert coord not in result
    assert Coordinate(4, 0) in result
    assert Coordinate(0, 4) in result
    assert Coordinate(3, 5) in result
    assert Coordinate(0, 0) not in result


def test_consistency_checks(solved_grid, puzzle_grid):
    assert is_consistent(solved_grid)
    assert is_consistent(puzzle_grid)
    assert describe_duplicates(solved_grid) == ""

    puzzle_grid.set_digit(Coordinate(2, 0), 5)
    assert not is_consistent(puzzle_grid)
    assert describe_duplicates(puzzle_grid) == "Row 1 has duplicate digit"


def test_duplicate_in_box_is_described():
    grid = Grid()
    grid.set_digit(Coordinate(3, 3), 9)
    grid.set_digit(Coordinate(5, 5), 9)
    assert describe_duplicates(grid) == "3x3 block (2,2) has duplicate digit"
