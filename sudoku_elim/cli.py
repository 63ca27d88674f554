"""
Command-line entry point.

Usage:
  sudoku-elim puzzle.txt

Solves the puzzle, prints the elapsed time and writes the answer next to
the input as puzzle.out.
"""
from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

from .config import Settings, setup_logging
from .gridio import load_grid, output_path_for, render_board, save_grid
from .solver import solve

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2
EXIT_IO_ERROR = 3


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sudoku-elim",
        description="Solve an N x N Sudoku by elimination and backtracking.",
    )
    parser.add_argument("input", help="puzzle file: N rows of N whitespace-separated integers, 0 = empty")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings.log_level)

    loaded = load_grid(args.input, settings.order)
    if loaded.kind == "io":
        print(f"File I/O failed: {loaded.message}")
        return EXIT_IO_ERROR
    if not loaded.ok:
        print(f"Input data is invalid: {loaded.message}")
        return EXIT_BAD_INPUT

    problem = loaded.board
    print(render_board(problem))

    start = time.perf_counter()
    answer = solve(problem)
    elapsed = (time.perf_counter() - start) * 1000
    print(f"Elapsed: {elapsed:.3f} (msec)")

    if answer is None or answer.contradict():
        print("No solution exists")
        return EXIT_NO_SOLUTION

    print("Solution found")
    print(render_board(answer))

    out_path = output_path_for(args.input, settings.output_suffix)
    try:
        save_grid(answer, out_path)
    except OSError as e:
        logger.warning("Cannot write %s: %s", out_path, e)
        print(f"File I/O failed: {e}")
        return EXIT_IO_ERROR

    print(f"Saved to {out_path}")
    return EXIT_SOLVED
