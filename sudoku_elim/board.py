from __future__ import annotations

import math
from typing import List, Optional, Sequence

from .cell import Cell
from .errors import InputFormatError

Grid = List[List[int]]  # 0 = empty / unsolved, values 1..N

DEFAULT_ORDER = 3


def order_of(size: int) -> int:
    """Box side length for an N x N grid; N must be a perfect square."""
    order = math.isqrt(size) if size > 0 else 0
    if order == 0 or order * order != size:
        raise ValueError(f"Invalid size: {size}. Only perfect squares are supported (4, 9, 16, ...).")
    return order


class Board:
    """
    N x N grid of cells with row/column/box propagation.

    Givens are loaded in row-major order; each one is checked against the
    candidates left by the givens before it.
    """

    def __init__(self, grid: Optional[Sequence[Sequence[int]]] = None, order: int = DEFAULT_ORDER) -> None:
        if order < 1:
            raise ValueError(f"Invalid order: {order}")
        self.order = order
        self._size = order * order
        self.cells: List[List[Cell]] = [[Cell(self._size) for _ in range(self._size)] for _ in range(self._size)]

        if grid is None:
            return

        if len(grid) != self._size:
            raise InputFormatError(f"Expected {self._size} rows, got {len(grid)}.")
        for row, values in enumerate(grid):
            if len(values) != self._size:
                raise InputFormatError(f"Row {row + 1} has {len(values)} values, expected {self._size}.")
            for column, value in enumerate(values):
                if value == 0:
                    continue
                if not self.accept(row, column, value):
                    raise InputFormatError(
                        f"Invalid given {value} at ({row + 1},{column + 1}) "
                        f"(out of range or repeated in a row/column/box)."
                    )
                self.set(row, column, value)

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other.order = self.order
        other._size = self._size
        other.cells = [[c.copy() for c in row] for row in self.cells]
        return other

    def set(self, row: int, column: int, value: int) -> "Board":
        if not 0 < value <= self._size:
            return self
        self.cells[row][column].set(value)
        self._propagate(row, column, value)
        return self

    def get(self, row: int, column: int) -> int:
        cell = self.cells[row][column]
        return cell.get() if cell.filled() else 0

    def cell(self, row: int, column: int) -> Cell:
        return self.cells[row][column]

    def eliminate(self, row: int, column: int, *values: int) -> "Board":
        self.cells[row][column].eliminate(*values)
        return self

    def eliminate_mask(self, row: int, column: int, mask: int) -> "Board":
        self.cells[row][column].eliminate_mask(mask)
        return self

    def fix(self, row: int, column: int) -> None:
        """Promote a determined-but-unfilled cell to filled."""
        cell = self.cells[row][column]
        if not cell.filled() and cell.cardinality() == 1:
            self.set(row, column, cell.get())

    def accept(self, row: int, column: int, value: int) -> bool:
        return self.cells[row][column].accept(value)

    def contradict(self) -> bool:
        return any(c.contradict() for row in self.cells for c in row)

    def size(self) -> int:
        return self._size

    def to_grid(self) -> Grid:
        return [[self.get(r, c) for c in range(self._size)] for r in range(self._size)]

    def _propagate(self, row: int, column: int, value: int) -> None:
        # One pass covers the row, the column and the box; box peers on the
        # origin row or column were already handled by the first two.
        exclusion = 1 << (value - 1)
        box_row = row // self.order * self.order
        box_col = column // self.order * self.order
        for i in range(self._size):
            if i != column:
                self.cells[row][i].eliminate_mask(exclusion)
            if i != row:
                self.cells[i][column].eliminate_mask(exclusion)
            x = box_row + i // self.order
            y = box_col + i % self.order
            if x != row and y != column:
                self.cells[x][y].eliminate_mask(exclusion)

    def __str__(self) -> str:
        width = len(str(self._size))
        sep = "+".join(["-" * ((width + 1) * self.order + 1)] * self.order)
        lines: List[str] = []
        for r in range(self._size):
            if r and r % self.order == 0:
                lines.append(sep)
            parts: List[str] = []
            for c in range(self._size):
                if c and c % self.order == 0:
                    parts.append("|")
                v = self.get(r, c)
                parts.append(("." if v == 0 else str(v)).rjust(width))
            lines.append(" " + " ".join(parts) + " ")
        return "\n".join(lines)
