from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .board import Board, Grid, order_of

logger = logging.getLogger(__name__)


# -----------------------------
# Constraint reasoning & search
# -----------------------------

def reasoning(board: Board) -> bool:
    """
    One scan over the grid applying naked singles and naked pairs.

    Returns True iff at least one naked single was fixed. Pair eliminations
    narrow candidates but are not reported as progress.
    """
    progress = False
    size = board.size()
    for row in range(size):
        pair_column = -1
        for column in range(size):
            cell = board.cell(row, column)
            # naked single
            if cell.cardinality() == 1 and not cell.filled():
                progress = True
                board.fix(row, column)
            # naked pair
            elif cell.cardinality() == 2:
                pair = board.cell(row, pair_column).constraint() if pair_column >= 0 else 0
                if pair == cell.constraint():
                    for other in range(size):
                        if other != pair_column and other != column:
                            board.eliminate_mask(row, other, pair)
                    pair_column = -1
                else:
                    pair_column = column
    return progress


def search(board: Board) -> Optional[Board]:
    """
    Branch on the first unfilled cell (row-major), trying each candidate in a
    fresh copy of the board. A board with no unfilled cell is returned as is;
    the caller still has to check contradict() on it.
    """
    size = board.size()
    for row in range(size):
        for column in range(size):
            cell = board.cell(row, column)
            if cell.filled():
                continue
            for value in cell.candidates():
                logger.debug("Trying %d at (%d,%d)", value, row, column)
                result = solve(board.copy().set(row, column, value))
                if result is not None:
                    return result
            logger.debug("Dead end at (%d,%d)", row, column)
            return None
    return board


def solve(board: Board) -> Optional[Board]:
    """Narrow `board` in place until reasoning stalls, then search."""
    while reasoning(board):
        pass
    return search(board)


# -----------------------------
# Grid-level helpers
# -----------------------------

def is_solution(grid: Sequence[Sequence[int]]) -> bool:
    """True iff every row, column and box holds each of 1..N exactly once."""
    n = len(grid)
    try:
        order = order_of(n)
    except ValueError:
        return False
    if any(len(row) != n for row in grid):
        return False

    rows = [0] * n
    cols = [0] * n
    boxes = [0] * n
    for r in range(n):
        for c in range(n):
            v = grid[r][c]
            if not 0 < v <= n:
                return False
            bit = 1 << (v - 1)
            rows[r] |= bit
            cols[c] |= bit
            boxes[r // order * order + c // order] |= bit

    full = (1 << n) - 1
    return all(mask == full for mask in rows + cols + boxes)


def solve_grid(grid: Sequence[Sequence[int]], order: Optional[int] = None) -> Optional[Grid]:
    """
    Solve a plain list-of-lists grid (0 = empty).
    Returns a NEW solved grid, or None if the puzzle has no solution.
    Raises InputFormatError when the givens are inconsistent.
    """
    if order is None:
        order = order_of(len(grid))

    board = Board(grid, order)
    answer = solve(board)
    if answer is None or answer.contradict():
        logger.info("No solution for %dx%d grid", board.size(), board.size())
        return None

    solution: List[List[int]] = answer.to_grid()
    logger.info("Solved %dx%d grid", board.size(), board.size())
    return solution
