#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py solve --tiles 0,1,3,4,2,5,7,8,6      # solve a 3×3 board
    python main.py solve -f rich -s 4 --mode astar      # random 4×4, Rich output
    python main.py solve --file board.json --parity-check
    python main.py generate -s 3 --seed 7 -o board.json
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slider.engine.puzzlegenerator import BoardGenerator  # noqa: E402
from slider.engine.puzzlesolver import Heuristic, SearchMode, Solver, SolverConfig  # noqa: E402
from slider.errors import InvalidArgumentError  # noqa: E402
from slider.models.board import Board  # noqa: E402
from slider.models.boardfile import load_board, parse_tiles, save_board  # noqa: E402

logger = logging.getLogger("slider")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _load_input(
    tiles: Optional[str],
    file: Optional[Path],
    size: int,
    shuffle: bool,
    seed: Optional[int],
) -> Board:
    if tiles and file:
        raise InvalidArgumentError("Pass either --tiles or --file, not both.")
    if tiles:
        return parse_tiles(tiles)
    if file:
        return load_board(file)

    rng = random.Random(seed)
    if shuffle:
        return BoardGenerator.random_board(size, rng)
    return BoardGenerator.generate(size, rng=rng)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding Puzzle Solver.")


@app.command()
def solve(
    tiles: Optional[str] = typer.Option(
        None, "-t", "--tiles",
        help="Row-major comma-separated tiles, 0 is the blank.",
    ),
    file: Optional[Path] = typer.Option(
        None, "--file",
        exists=True, dir_okay=False,
        help='JSON board file: {"size": n, "tiles": [[...], ...]}.',
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        help="Size of a generated board when no input is given.",
    ),
    shuffle: bool = typer.Option(
        False, "--random",
        help="Generate a plain shuffle (may be unsolvable) instead of a scramble.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for generated boards.",
    ),
    mode: SearchMode = typer.Option(
        SearchMode.GREEDY, "--mode",
        help="greedy orders by heuristic only; astar adds moves so far.",
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.MANHATTAN, "--heuristic",
        help="Heuristic used to order the frontier.",
    ),
    parity_check: bool = typer.Option(
        False, "--parity-check",
        help="Reject unsolvable boards by inversion parity before searching.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    color: bool = typer.Option(
        False, "--color",
        help="ANSI colours for the vanilla frontend.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve a board and print every step of the solution."""
    _setup_logging(verbose)
    try:
        board = _load_input(tiles, file, size, shuffle, seed)
    except InvalidArgumentError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    config = SolverConfig(mode=mode, heuristic=heuristic, parity_check=parity_check)
    solver = Solver(board, config)

    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.vanilla:
        mod.run(solver, color=color)
    else:
        mod.run(solver)

    if not solver.is_solvable():
        raise typer.Exit(code=1)


@app.command()
def generate(
    size: int = typer.Option(
        3, "-s", "--size",
        help="Board size.",
    ),
    shuffle: bool = typer.Option(
        False, "--random",
        help="Plain shuffle (may be unsolvable) instead of a scramble.",
    ),
    moves: Optional[int] = typer.Option(
        None, "--moves",
        min=0,
        help="Random-walk length for scrambles (default size² × 10).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output",
        dir_okay=False,
        help="Write the board as JSON instead of printing it.",
    ),
) -> None:
    """Generate a board."""
    rng = random.Random(seed)
    try:
        if shuffle:
            board = BoardGenerator.random_board(size, rng)
        else:
            board = BoardGenerator.generate(size, moves, rng)
    except InvalidArgumentError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    if output is None:
        typer.echo(str(board), nl=False)
    else:
        save_board(board, output)
        logger.debug("Wrote %s", output)


if __name__ == "__main__":
    app()
