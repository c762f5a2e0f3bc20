"""Generates sliding puzzle boards."""

from __future__ import annotations

import random

from slider.errors import InvalidArgumentError
from slider.models.board import MAX_SIZE, MIN_SIZE, Board


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgumentError(f"The size must be an int, got {size!r}.")
    if not MIN_SIZE <= size < MAX_SIZE:
        raise InvalidArgumentError(
            f"The size must be in a range [{MIN_SIZE}..{MAX_SIZE}), got {size}."
        )


class BoardGenerator:
    """Creates goal, shuffled, and scrambled boards."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        _check_size(size)
        return Board.goal(size)

    @staticmethod
    def random_board(size: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly shuffled board; about half of these are unsolvable."""
        _check_size(size)
        rng = rng or random.Random()
        flat = list(range(size * size))
        rng.shuffle(flat)
        return Board.from_flat(size, flat)

    @staticmethod
    def scramble(
        board: Board,
        moves: int | None = None,
        rng: random.Random | None = None,
    ) -> Board:
        """Return *board* after a random walk of the blank.

        The walk never immediately undoes its previous step (unless there
        is no other choice), and every step is a legal slide, so the
        result is solvable whenever *board* is.
        """
        rng = rng or random.Random()
        if moves is None:
            moves = board.size * board.size * 10
        prev_pos: tuple[int, int] | None = None

        for _ in range(moves):
            neighbors = list(board.neighbors())
            if len(neighbors) > 1:
                neighbors = [b for b in neighbors if b.blank_pos != prev_pos]
            prev_pos = board.blank_pos
            board = rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int,
        moves: int | None = None,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board of the given size."""
        _check_size(size)
        rng = rng or random.Random()
        board = BoardGenerator.scramble(Board.goal(size), moves, rng)

        # Ensure the board is not already solved
        if board.is_goal():
            board = rng.choice(list(board.neighbors()))
        return board
