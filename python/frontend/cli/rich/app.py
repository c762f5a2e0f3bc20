"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library to lay out each board of a solution as a
styled grid, followed by a summary of the search.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slider.engine.puzzlesolver import Solver
from slider.models.board import Board


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_stats(solver: Solver) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(solver.steps()), style="bold yellow")
    stats.append("    Lower bound: ", style="dim")
    stats.append(str(solver.moves()), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(solver.expanded), style="bold yellow")
    stats.append("    Mode: ", style="dim")
    stats.append(f"{solver.config.mode}/{solver.config.heuristic}", style="bold cyan")
    return stats


# -- entry point --------------------------------------------------------------


def run(solver: Solver, console: Console | None = None) -> None:
    """Print the outcome of *solver* to *console*."""
    console = console or Console()
    size = solver.initial.size

    if not solver.is_solvable():
        panel = Panel(
            Align.center(_render_board(solver.initial)),
            title=f"[bold red]Unsolvable  {size}×{size}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
        console.print(panel)
        console.print(Align.center(_render_stats(solver)))
        return

    moves = solver.directions()
    steps: list[Panel] = []
    for i, board in enumerate(solver.solution()):
        title = "start" if i == 0 else f"{i}: {moves[i - 1].value}"
        steps.append(
            Panel(
                _render_board(board),
                title=f"[cyan]{title}[/cyan]",
                border_style="cyan",
                expand=False,
            )
        )

    body = Group(Columns(steps), Text(""), _render_stats(solver))
    console.print(
        Panel(
            body,
            title=f"[bold green]Solved  {size}×{size}[/bold green]",
            border_style="green",
            padding=(1, 2),
        )
    )
