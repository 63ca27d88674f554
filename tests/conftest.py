"""Shared fixtures for sudoku_elim tests."""

import pytest

from sudoku_elim.board import Board


CLASSIC_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# Classic puzzle with five givens removed; the classic solution still completes it.
SPARSE_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 0, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 0],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [0, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 0, 0],
    [0, 0, 0, 4, 1, 0, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

# Row 0 leaves {3, 4} for the top-right box, but the 3 below removes 3 from it.
# Row 0 forces 9 into its last cell, but the 9 further down column 8 removes it.
UNSAT_9X9 = [
    [1, 2, 3, 4, 5, 6, 7, 8, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 9],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
]

UNSAT_4X4 = [
    [1, 2, 0, 0],
    [0, 0, 3, 0],
    [0, 0, 0, 0],
    [0, 0, 0, 0],
]


def grid_to_text(grid):
    return "\n".join(" ".join(str(v) for v in row) for row in grid) + "\n"


def peers(board, row, column):
    """All (r, c) sharing a row, column or box with (row, column), excluding itself."""
    order = board.order
    size = board.size()
    box_row = row // order * order
    box_col = column // order * order
    result = set()
    for i in range(size):
        result.add((row, i))
        result.add((i, column))
    for r in range(box_row, box_row + order):
        for c in range(box_col, box_col + order):
            result.add((r, c))
    result.discard((row, column))
    return result


@pytest.fixture
def classic_board():
    return Board(CLASSIC_PUZZLE)


@pytest.fixture
def empty_board():
    return Board()


@pytest.fixture
def puzzle_file(tmp_path):
    """Write a puzzle grid to tmp_path and return its path as a string."""
    def _write(grid, name="puzzle.txt"):
        path = tmp_path / name
        path.write_text(grid_to_text(grid), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def classic_puzzle():
    return [row[:] for row in CLASSIC_PUZZLE]


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def sparse_puzzle():
    return [row[:] for row in SPARSE_PUZZLE]


@pytest.fixture
def unsat_4x4():
    return [row[:] for row in UNSAT_4X4]


@pytest.fixture
def helpers():
    class Helpers:
        grid_to_text = staticmethod(grid_to_text)
        peers = staticmethod(peers)
    return Helpers


@pytest.fixture
def unsat_9x9():
    return [row[:] for row in UNSAT_9X9]
