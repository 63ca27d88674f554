from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from .board import DEFAULT_ORDER, Board, Grid
from .errors import InputFormatError

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".out"


@dataclass
class LoadResult:
    kind: str                       # "ok" | "format" | "io"
    board: Optional[Board] = None   # set when kind == "ok"
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == "ok"


# -----------------------------
# Reading
# -----------------------------

def parse_grid(text: str, order: int = DEFAULT_ORDER) -> Grid:
    """
    Parse size x size whitespace-separated integers (0 = empty), one row per
    line. Every line is a row, blank ones included; only the final newline
    is optional.
    """
    size = order * order
    lines = text.splitlines()

    if len(lines) != size:
        raise InputFormatError(f"Expected {size} rows, got {len(lines)}.")

    grid: Grid = []
    for r, line in enumerate(lines):
        tokens = line.split()
        if len(tokens) != size:
            raise InputFormatError(f"Row {r + 1} has {len(tokens)} values, expected {size}.")
        row: List[int] = []
        for c, token in enumerate(tokens):
            try:
                row.append(int(token))
            except ValueError:
                raise InputFormatError(f"Row {r + 1}, column {c + 1}: '{token}' is not an integer.") from None
        grid.append(row)
    return grid


def load_grid(path: str, order: int = DEFAULT_ORDER) -> LoadResult:
    """Read, parse and load a puzzle file. Failures come back as a result kind, not an exception."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        logger.warning("Rejected %s: %s", path, e)
        return LoadResult(kind="format", message=f"not UTF-8 text ({e.reason})")
    except OSError as e:
        logger.warning("Cannot read %s: %s", path, e)
        return LoadResult(kind="io", message=str(e))

    try:
        board = Board(parse_grid(text, order), order)
    except InputFormatError as e:
        logger.warning("Rejected %s: %s", path, e)
        return LoadResult(kind="format", message=str(e))

    logger.debug("Loaded %dx%d puzzle from %s", board.size(), board.size(), path)
    return LoadResult(kind="ok", board=board)


# -----------------------------
# Writing
# -----------------------------

def format_grid(board: Board) -> str:
    size = board.size()
    lines = [" ".join(str(board.get(r, c)) for c in range(size)).strip() for r in range(size)]
    return "\n".join(lines) + "\n"


def output_path_for(path: str, suffix: str = OUTPUT_SUFFIX) -> str:
    root, _ = os.path.splitext(path)
    return root + suffix


def save_grid(board: Board, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_grid(board))
    logger.debug("Wrote solution to %s", path)


def render_board(board: Board) -> str:
    return "\n" + str(board) + "\n"
