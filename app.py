from __future__ import annotations

import time
from typing import List, Optional

import streamlit as st

from sudoku_elim.board import Board, Grid
from sudoku_elim.errors import InputFormatError
from sudoku_elim.gridio import format_grid, parse_grid
from sudoku_elim.solver import reasoning, solve

ORDERS = {4: 2, 9: 3, 16: 4}
DEFAULT_SIZE = 9


def blank_text(n: int) -> str:
    return "\n".join(" ".join("0" for _ in range(n)) for _ in range(n))


def render_grid_html(grid: Grid, order: int, title: str, givens: Optional[Grid] = None) -> None:
    """
    Draw the grid as an HTML table with thick box borders. Digits that were
    not among the givens are styled as found.
    """
    n = order * order
    rows: List[str] = []
    for r in range(n):
        cells: List[str] = []
        for c in range(n):
            v = grid[r][c]
            cls = []
            if r % order == 0:
                cls.append("top")
            if c % order == 0:
                cls.append("left")
            if givens is not None and givens[r][c] == 0 and v != 0:
                cls.append("found")
            cells.append(f"<td class='{' '.join(cls)}'>{v or ''}</td>")
        rows.append("<tr>" + "".join(cells) + "</tr>")

    st.markdown(
        f"<div class='sudoku-title'>{title}</div><table class='sudoku'>{''.join(rows)}</table>",
        unsafe_allow_html=True,
    )


def candidate_counts(board: Board) -> Grid:
    """Remaining candidates per open cell after one round of reasoning (0 = filled)."""
    trial = board.copy()
    reasoning(trial)
    n = trial.size()
    return [[0 if trial.cell(r, c).filled() else trial.cell(r, c).cardinality() for c in range(n)] for r in range(n)]


def load_board(text: str, order: int) -> Optional[Board]:
    """Parse and load the puzzle text, reporting problems in the page."""
    try:
        return Board(parse_grid(text, order), order)
    except InputFormatError as e:
        st.error(f"Input data is invalid: {e}")
        return None


st.set_page_config(page_title="Sudoku Solver", layout="wide")
st.markdown(
    """
<style>
.sudoku-title { font-weight: 600; margin: 0.75rem 0 0.35rem 0; }
table.sudoku { border-collapse: collapse; border: 3px solid #444; }
table.sudoku td {
    width: 2.4rem; height: 2.4rem;
    text-align: center; font-size: 20px; font-weight: 600;
    border: 1px solid #bbb;
}
table.sudoku td.top { border-top: 3px solid #444; }
table.sudoku td.left { border-left: 3px solid #444; }
table.sudoku td.found { font-weight: 300; color: #1e5ac8; }
</style>
""",
    unsafe_allow_html=True,
)

st.title("Sudoku Solver")
st.caption("One row per line, digits separated by spaces, 0 for an empty cell.")

with st.sidebar:
    st.header("Settings")
    size = st.selectbox("Grid size", list(ORDERS), index=list(ORDERS).index(DEFAULT_SIZE))
    show_candidates = st.checkbox("Show candidate counts", value=False)
    uploaded = st.file_uploader("Load puzzle file", type=None)

order = ORDERS[size]
key = f"puzzle_{size}"
if uploaded is not None and st.session_state.get("uploaded_from") != (uploaded.name, uploaded.size, size):
    # only replace the text once per upload so later edits survive reruns
    st.session_state["uploaded_from"] = (uploaded.name, uploaded.size, size)
    st.session_state[key] = uploaded.getvalue().decode("utf-8", errors="replace")
elif key not in st.session_state:
    st.session_state[key] = blank_text(size)

with st.form("sudoku_form"):
    text = st.text_area("Puzzle", key=key, height=28 * size + 40)
    col_check, col_solve, _ = st.columns([1, 1, 3])
    check_clicked = col_check.form_submit_button("Check", use_container_width=True)
    solve_clicked = col_solve.form_submit_button("Solve", use_container_width=True)

if check_clicked or solve_clicked:
    board = load_board(text, order)
    if board is not None:
        givens = board.to_grid()
        render_grid_html(givens, order, "Puzzle")
        if show_candidates:
            render_grid_html(candidate_counts(board), order, "Candidates left per open cell")

        if solve_clicked:
            start = time.perf_counter()
            answer = solve(board)
            elapsed = (time.perf_counter() - start) * 1000
            if answer is None or answer.contradict():
                st.error(f"No solution exists ({elapsed:.1f} ms).")
            else:
                st.success(f"Solution found in {elapsed:.1f} ms")
                render_grid_html(answer.to_grid(), order, "Solution", givens=givens)
                st.download_button(
                    "Download solution",
                    data=format_grid(answer).encode("utf-8"),
                    file_name=f"sudoku_solution_{size}x{size}.out",
                    mime="text/plain",
                )
