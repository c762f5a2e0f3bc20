"""Vanilla terminal frontend — no third-party dependencies.

Prints every board of a solution in the puzzle's plain text form, or
with ANSI colours when ``color`` is set.
"""

from __future__ import annotations

import sys
from typing import TextIO

from slider.engine.puzzlesolver import Solver
from slider.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- entry point --------------------------------------------------------------


def run(solver: Solver, out: TextIO | None = None, color: bool = False) -> None:
    """Write the outcome of *solver* to *out* (stdout by default)."""
    out = out or sys.stdout

    if not solver.is_solvable():
        out.write("UNSOLVABLE!!!\n")
        out.write(str(solver.initial))
        return

    moves = solver.directions()
    for i, board in enumerate(solver.solution()):
        if color:
            label = "start" if i == 0 else f"move {i}/{len(moves)} ({moves[i - 1].value})"
            out.write(f"{_C}{label}{_R}\n{_render_board(board)}\n\n")
        else:
            out.write(str(board) + "\n")

    summary = (
        f"Solved in {solver.steps()} moves "
        f"(lower bound {solver.moves()}, expanded {solver.expanded} boards)"
    )
    out.write(f"{_Y}{summary}{_R}\n" if color else summary + "\n")
