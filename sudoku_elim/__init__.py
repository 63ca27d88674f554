from .board import DEFAULT_ORDER, Board, Grid, order_of
from .cell import Cell
from .errors import InputFormatError, InvalidAssignmentError, SudokuError
from .solver import is_solution, reasoning, search, solve, solve_grid

__all__ = [
    "DEFAULT_ORDER",
    "Board",
    "Cell",
    "Grid",
    "InputFormatError",
    "InvalidAssignmentError",
    "SudokuError",
    "is_solution",
    "order_of",
    "reasoning",
    "search",
    "solve",
    "solve_grid",
]
