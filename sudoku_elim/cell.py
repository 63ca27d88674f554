from __future__ import annotations

from typing import Iterator

from .errors import InvalidAssignmentError


class Cell:
    """
    Solution state of one grid position.

    Candidates are kept as an int bitmask: bit i set => digit i+1 is still
    permitted. The mask only ever loses bits.
    """

    __slots__ = ("size", "_filled", "_candidates")

    def __init__(self, size: int) -> None:
        self.size = size
        self._filled = False
        self._candidates = (1 << size) - 1

    def copy(self) -> "Cell":
        other = Cell.__new__(Cell)
        other.size = self.size
        other._filled = self._filled
        other._candidates = self._candidates
        return other

    def set(self, value: int) -> "Cell":
        """
        Assign value and narrow the candidates to it.
        Out-of-range values are ignored; a value that is no longer a
        candidate raises InvalidAssignmentError and leaves the cell as is.
        """
        if not self._check(value):
            return self
        if not self.accept(value):
            raise InvalidAssignmentError(value, list(self.candidates()))
        self._filled = True
        self._candidates &= 1 << (value - 1)
        return self

    def get(self) -> int:
        if self.cardinality() != 1:
            return 0
        return self._candidates.bit_length()

    def cardinality(self) -> int:
        return self._candidates.bit_count()

    def eliminate(self, *values: int) -> "Cell":
        mask = 0
        for v in values:
            if self._check(v):
                mask |= 1 << (v - 1)
        return self.eliminate_mask(mask)

    def eliminate_mask(self, mask: int) -> "Cell":
        self._candidates &= ~mask
        return self

    def constraint(self) -> int:
        return self._candidates

    def candidates(self) -> Iterator[int]:
        mask = self._candidates
        digit = 1
        while mask:
            if mask & 1:
                yield digit
            mask >>= 1
            digit += 1

    def filled(self) -> bool:
        return self._filled

    def accept(self, value: int) -> bool:
        return self._check(value) and bool(self._candidates & (1 << (value - 1)))

    def contradict(self) -> bool:
        return self._candidates == 0

    def _check(self, value: int) -> bool:
        return 0 < value <= self.size

    def __repr__(self) -> str:
        state = "filled" if self._filled else "open"
        return f"Cell({state}, candidates={list(self.candidates())})"
