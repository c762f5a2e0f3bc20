"""Search options for the puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from slider.errors import InvalidArgumentError
from slider.models.board import Board


class SearchMode(StrEnum):
    GREEDY = "greedy"  # priority = heuristic
    ASTAR = "astar"  # priority = moves so far + heuristic


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    HAMMING = "hamming"

    def score(self, board: Board) -> int:
        if self is Heuristic.HAMMING:
            return board.hamming()
        return board.manhattan()


@dataclass(frozen=True)
class SolverConfig:
    """How a :class:`Solver` orders and prunes its search.

    The defaults reproduce plain greedy best-first search on Manhattan
    distance with no parity shortcut. ``mode`` and ``heuristic`` also
    accept their string values.
    """

    mode: SearchMode = SearchMode.GREEDY
    heuristic: Heuristic = Heuristic.MANHATTAN
    parity_check: bool = False

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "mode", SearchMode(self.mode))
            object.__setattr__(self, "heuristic", Heuristic(self.heuristic))
        except ValueError as exc:
            raise InvalidArgumentError(str(exc)) from exc
