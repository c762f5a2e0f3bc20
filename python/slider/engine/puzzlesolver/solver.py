"""Best-first search over sliding puzzle boards."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import StrEnum

from slider.engine.frontier import PriorityQueue
from slider.engine.puzzlesolver.config import SearchMode, SolverConfig
from slider.errors import InvalidArgumentError
from slider.models.board import Board, Direction, Tiles

logger = logging.getLogger(__name__)


class SolverState(StrEnum):
    INITIALIZED = "initialized"
    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Solver:
    """Finds a path from *initial* to the goal board.

    The whole search runs inside the constructor. With the default
    config the frontier is ordered by the Manhattan distance of each
    board alone (greedy best-first): a solution is found whenever one
    exists, but it is not necessarily the shortest. ``SearchMode.ASTAR``
    orders by moves-so-far plus heuristic and yields a minimum-move path.

    An unsolvable board is searched until every reachable configuration
    has been seen, which is only practical for small sizes unless
    ``parity_check`` is enabled.
    """

    def __init__(self, initial: Board, config: SolverConfig | None = None) -> None:
        if not isinstance(initial, Board):
            raise InvalidArgumentError(
                f"Solver needs a Board, got {type(initial).__name__}."
            )
        self.initial = initial
        self.config = config or SolverConfig()
        self.state = SolverState.INITIALIZED

        self.expanded: int = 0
        self.generated: int = 0
        self.max_frontier: int = 0

        self._moves = self.config.heuristic.score(initial)
        self._solution: list[Board] = []

        if self.config.parity_check and not initial.is_solvable_parity():
            logger.info("Board fails the parity test; skipping search.")
            self.state = SolverState.EXHAUSTED
            return

        self._search()

    # -- queries --------------------------------------------------------------

    def moves(self) -> int:
        """Heuristic value of the initial board.

        This is a lower bound on the number of moves, not the length of
        the path found; see :meth:`steps` for that.
        """
        return self._moves

    def is_solvable(self) -> bool:
        return self.state is SolverState.SOLVED

    def solution(self) -> Iterator[Board]:
        """Yield boards from the initial one to the goal, inclusive."""
        yield from self._solution

    def steps(self) -> int:
        """Number of moves in the path found, or -1 if there is none."""
        return len(self._solution) - 1

    def directions(self) -> list[Direction]:
        """Return the tile slides that replay :meth:`solution`."""
        out: list[Direction] = []
        for prev, nxt in zip(self._solution, self._solution[1:]):
            (pr, pc), (nr, nc) = prev.blank_pos, nxt.blank_pos
            # The tile moves opposite to the blank.
            if nr > pr:
                out.append(Direction.UP)
            elif nr < pr:
                out.append(Direction.DOWN)
            elif nc > pc:
                out.append(Direction.LEFT)
            else:
                out.append(Direction.RIGHT)
        return out

    # -- search ---------------------------------------------------------------

    def _search(self) -> None:
        initial = self.initial
        score = self.config.heuristic.score
        astar = self.config.mode is SearchMode.ASTAR

        frontier: PriorityQueue[tuple[Board, int]] = PriorityQueue()
        predecessor: dict[Tiles, Board | None] = {initial.key: None}
        # Fewest moves known to reach each key; in greedy mode this is
        # just the visited set.
        depth: dict[Tiles, int] = {initial.key: 0}
        frontier.enqueue((initial, 0), score(initial))

        self.state = SolverState.SEARCHING
        logger.debug(
            "Searching %d×%d board: mode=%s heuristic=%s initial=%d",
            initial.size,
            initial.size,
            self.config.mode,
            self.config.heuristic,
            self._moves,
        )

        target: Board | None = None
        while frontier.size:
            self.max_frontier = max(self.max_frontier, frontier.size)
            board, moves = frontier.dequeue()
            if astar and moves > depth[board.key]:
                continue  # superseded by a shorter path
            if board.is_goal():
                target = board
                break

            self.expanded += 1
            for item in board.neighbors():
                self.generated += 1
                key = item.key
                if astar:
                    if moves + 1 >= depth.get(key, moves + 2):
                        continue
                    depth[key] = moves + 1
                    predecessor[key] = board
                    frontier.enqueue((item, moves + 1), moves + 1 + score(item))
                else:
                    if key in depth:
                        continue
                    depth[key] = moves + 1
                    predecessor[key] = board
                    frontier.enqueue((item, moves + 1), score(item))

        if target is None:
            self.state = SolverState.EXHAUSTED
        else:
            self.state = SolverState.SOLVED
            path: list[Board] = []
            node: Board | None = target
            while node is not None:
                path.append(node)
                node = predecessor[node.key]
            path.reverse()
            self._solution = path

        logger.debug(
            "Search %s: expanded=%d generated=%d steps=%d",
            self.state,
            self.expanded,
            self.generated,
            self.steps(),
        )
