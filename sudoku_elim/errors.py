from __future__ import annotations

from typing import List


class SudokuError(Exception):
    """Base class for every error raised by sudoku_elim."""


class InputFormatError(SudokuError):
    """
    The supplied grid cannot become a board: wrong dimensions, a token that
    is not an integer, or givens that clash in a row, column or box.
    """


class InvalidAssignmentError(SudokuError):
    """A cell was assigned a digit that is no longer one of its candidates."""

    def __init__(self, value: int, candidates: List[int]) -> None:
        super().__init__(f"Cannot assign {value}: remaining candidates are {candidates}")
        self.value = value
        self.candidates = candidates
