"""Solver test suite — fixture boards plus the known scenarios.

Boards are pre-built JSON fixtures under ``<project_root>/fixtures/``.
Every solution is replayed move by move through ``Board.slide`` to
verify that it is legal and reaches the goal state.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from slider.engine.puzzlesolver import Heuristic, SearchMode, Solver, SolverConfig, SolverState
from slider.errors import InvalidArgumentError
from slider.models.board import Board, Direction

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

SAMPLE = [[0, 1, 3], [4, 2, 5], [7, 8, 6]]
SWAPPED = [[1, 2, 3], [4, 5, 6], [8, 7, 0]]
GOAL_3 = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


# Loaded once at import time; each entry becomes one parametrised case.
_BOARDS = _load("2x2.json") + _load("3x3.json") + _load("4x4.json")


# -- helpers ------------------------------------------------------------------


def _board_from_data(data: dict) -> Board:
    return Board(size=data["size"], tiles=data["tiles"])


def _assert_solve(data: dict, config: SolverConfig | None = None) -> Solver:
    """Solve the board and verify the path and its moves reach the goal."""
    board = _board_from_data(data)

    solver = Solver(board, config)
    path = list(solver.solution())

    # ---- path sanity --------------------------------------------------------
    assert solver.is_solvable(), f"Solvable board reported unsolvable ({data['id']})"
    assert solver.state is SolverState.SOLVED
    assert path[0] == board
    assert path[-1].is_goal()
    assert solver.steps() == len(path) - 1

    for prev, nxt in zip(path, path[1:]):
        (pr, pc), (nr, nc) = prev.blank_pos, nxt.blank_pos
        assert abs(pr - nr) + abs(pc - nc) == 1
        assert nxt in list(prev.neighbors())

    # ---- replay directions --------------------------------------------------
    moves = solver.directions()
    assert len(moves) == solver.steps()
    assert all(isinstance(m, Direction) for m in moves)

    current = board
    for i, direction in enumerate(moves):
        after = current.slide(direction)
        assert after is not None, (
            f"Move {i} ({direction.value}) was invalid at blank "
            f"{current.blank_pos}  ({data['id']})"
        )
        current = after
    assert current.is_goal(), f"Board not solved after {len(moves)} moves ({data['id']})"
    return solver


# -- fixture boards -----------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_solve_greedy(board_data: dict) -> None:
    solver = _assert_solve(board_data)
    assert solver.steps() >= board_data["optimal"]


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_solve_astar_is_minimal(board_data: dict) -> None:
    solver = _assert_solve(board_data, SolverConfig(mode=SearchMode.ASTAR))
    assert solver.steps() == board_data["optimal"]


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_solve_with_hamming(board_data: dict) -> None:
    _assert_solve(board_data, SolverConfig(heuristic=Heuristic.HAMMING))


# -- known scenarios ----------------------------------------------------------


def test_sample_board_is_solved() -> None:
    solver = Solver(Board.from_rows(SAMPLE))

    assert solver.is_solvable()
    path = list(solver.solution())
    assert path[0] == Board.from_rows(SAMPLE)
    assert path[-1].to_rows() == GOAL_3
    assert solver.directions() == [
        Direction.LEFT,
        Direction.UP,
        Direction.LEFT,
        Direction.UP,
    ]


def test_goal_board_has_single_step_solution() -> None:
    board = Board.from_rows(GOAL_3)
    solver = Solver(board)

    assert solver.is_solvable()
    assert list(solver.solution()) == [board]
    assert solver.steps() == 0
    assert solver.moves() == 0
    assert solver.directions() == []
    assert solver.expanded == 0


def test_moves_reports_initial_heuristic_not_path_length() -> None:
    board = Board.from_rows(SAMPLE)

    greedy = Solver(board)
    astar = Solver(board, SolverConfig(mode=SearchMode.ASTAR))
    hamming = Solver(board, SolverConfig(heuristic=Heuristic.HAMMING))

    assert greedy.moves() == board.manhattan() == 4
    assert astar.moves() == 4
    assert hamming.moves() == board.hamming()


def test_solution_is_restartable() -> None:
    solver = Solver(Board.from_rows(SAMPLE))

    assert list(solver.solution()) == list(solver.solution())


def test_small_unsolvable_board_exhausts() -> None:
    board = Board.from_rows([[2, 1], [3, 0]])
    solver = Solver(board)

    assert not solver.is_solvable()
    assert solver.state is SolverState.EXHAUSTED
    assert list(solver.solution()) == []
    assert solver.steps() == -1
    assert solver.directions() == []
    # 4! / 2 configurations are reachable and none is the goal.
    assert solver.expanded == 12


@pytest.mark.timeout(600)
def test_swapped_tiles_exhaust_reachable_space() -> None:
    solver = Solver(Board.from_rows(SWAPPED))

    assert not solver.is_solvable()
    assert solver.state is SolverState.EXHAUSTED
    assert list(solver.solution()) == []
    assert solver.expanded == 181440  # 9! / 2


def test_parity_check_skips_search() -> None:
    solver = Solver(Board.from_rows(SWAPPED), SolverConfig(parity_check=True))

    assert not solver.is_solvable()
    assert solver.state is SolverState.EXHAUSTED
    assert solver.expanded == 0
    assert solver.moves() == 2


def test_parity_check_keeps_solvable_boards() -> None:
    solver = Solver(Board.from_rows(SAMPLE), SolverConfig(parity_check=True))

    assert solver.is_solvable()


def test_greedy_and_astar_diverge_on_deep_board() -> None:
    data = next(b for b in _BOARDS if b["id"] == "3x3-deepest")
    board = _board_from_data(data)

    greedy = Solver(board)
    astar = Solver(board, SolverConfig(mode=SearchMode.ASTAR))

    assert astar.steps() == data["optimal"] == 31
    assert greedy.steps() == data["greedy"] == 47
    assert greedy.steps() > astar.steps()
    # Both report the same lower bound regardless of the path found.
    assert greedy.moves() == astar.moves() == board.manhattan()


def test_statistics_are_recorded() -> None:
    solver = Solver(Board.from_rows(SAMPLE))

    assert solver.expanded == 4
    assert solver.generated >= solver.expanded
    assert solver.max_frontier >= 1


# -- errors -------------------------------------------------------------------


@pytest.mark.parametrize("value", [None, SAMPLE, "board", 3])
def test_non_board_is_rejected(value: object) -> None:
    with pytest.raises(InvalidArgumentError):
        Solver(value)  # type: ignore[arg-type]


def test_config_accepts_string_values() -> None:
    config = SolverConfig(mode="astar", heuristic="hamming")  # type: ignore[arg-type]

    assert config.mode is SearchMode.ASTAR
    assert config.heuristic is Heuristic.HAMMING

    board = Board.from_rows([[8, 6, 7], [2, 5, 4], [3, 0, 1]])
    by_name = Solver(board, SolverConfig(mode="astar"))  # type: ignore[arg-type]
    assert by_name.steps() == 31


@pytest.mark.parametrize(
    "kwargs",
    [{"mode": "depth-first"}, {"heuristic": "euclidean"}, {"mode": 3}],
)
def test_config_rejects_unknown_values(kwargs: dict) -> None:
    with pytest.raises(InvalidArgumentError):
        SolverConfig(**kwargs)
