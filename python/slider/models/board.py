"""Board model for the sliding-tile puzzle."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from slider.errors import InvalidArgumentError

MIN_SIZE = 2
MAX_SIZE = 127  # exclusive

Tiles = tuple[tuple[int, ...], ...]


class Direction(StrEnum):
    """The way a *tile* slides into the adjacent blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_SLIDE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank moves in neighbor emission order: up, down, left, right.
_BLANK_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _cell_width(size: int) -> int:
    if size < 4:
        return 2
    if size < 11:
        return 3
    if size < 31:
        return 4
    return 5


@dataclass(frozen=True, eq=False)
class Board:
    """One configuration of an ``n×n`` sliding puzzle.

    Tiles are stored as a tuple of row tuples; 0 represents the blank.
    Instances never change after construction: neighbors and slides
    return new boards. Both heuristics are computed on first request and
    cached on the instance.
    """

    size: int
    tiles: Tiles
    blank_pos: tuple[int, int] = field(init=False)
    _hamming: int = field(init=False, default=-1, repr=False)
    _manhattan: int = field(init=False, default=-1, repr=False)

    def __post_init__(self) -> None:
        size = self.size
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgumentError(f"Board size must be an int, got {size!r}.")
        if not MIN_SIZE <= size < MAX_SIZE:
            raise InvalidArgumentError(
                f"Board size must be in [{MIN_SIZE}, {MAX_SIZE}), got {size}."
            )
        try:
            rows = tuple(tuple(row) for row in self.tiles)
        except TypeError as exc:
            raise InvalidArgumentError("Tiles must be a grid of rows.") from exc

        if len(rows) != size or any(len(row) != size for row in rows):
            raise InvalidArgumentError(f"Expected a {size}×{size} grid of tiles.")

        seen = [False] * (size * size)
        blank_pos: tuple[int, int] | None = None
        for r, row in enumerate(rows):
            for c, v in enumerate(row):
                if isinstance(v, bool) or not isinstance(v, int):
                    raise InvalidArgumentError(
                        f"Tile at ({r}, {c}) is not an int: {v!r}."
                    )
                if not 0 <= v < size * size or seen[v]:
                    raise InvalidArgumentError(
                        f"Tiles must hold each of 0..{size * size - 1} exactly once; "
                        f"bad value {v} at ({r}, {c})."
                    )
                seen[v] = True
                if v == 0:
                    blank_pos = (r, c)

        object.__setattr__(self, "tiles", rows)
        object.__setattr__(self, "blank_pos", blank_pos)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from an ``n×n`` grid, inferring ``n``.

        Example::

            Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
        """
        try:
            size = len(rows)
        except TypeError as exc:
            raise InvalidArgumentError("Tiles must be a grid of rows.") from exc
        return cls(size=size, tiles=rows)

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list."""
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgumentError(f"Board size must be an int, got {size!r}.")
        if not isinstance(flat, Sequence):
            raise InvalidArgumentError(
                f"Tiles must be a flat sequence, got {type(flat).__name__}."
            )
        if len(flat) != size * size:
            raise InvalidArgumentError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        rows = [flat[r * size : (r + 1) * size] for r in range(size)]
        return cls(size=size, tiles=rows)

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (tiles in row-major order, blank last)."""
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgumentError(f"Board size must be an int, got {size!r}.")
        flat = list(range(1, size * size)) + [0]
        return cls.from_flat(size, flat)

    # -- queries --------------------------------------------------------------

    @property
    def key(self) -> Tiles:
        """Canonical, hashable identity of the tile grid."""
        return self.tiles

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def hamming(self) -> int:
        """Number of non-blank tiles out of place."""
        if self._hamming < 0:
            n = self.size
            count = 0
            for r, row in enumerate(self.tiles):
                for c, v in enumerate(row):
                    if v != 0 and v != r * n + c + 1:
                        count += 1
            object.__setattr__(self, "_hamming", count)
        return self._hamming

    def manhattan(self) -> int:
        """Sum of the grid distances of every non-blank tile to its goal cell."""
        if self._manhattan < 0:
            n = self.size
            total = 0
            for r, row in enumerate(self.tiles):
                for c, v in enumerate(row):
                    if v != 0:
                        goal_row, goal_col = divmod(v - 1, n)
                        total += abs(r - goal_row) + abs(c - goal_col)
            object.__setattr__(self, "_manhattan", total)
        return self._manhattan

    def is_goal(self) -> bool:
        return self.hamming() == 0

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def is_solvable_parity(self) -> bool:
        """Return True if the tile permutation can reach the goal.

        Odd sizes need an even inversion count. Even sizes need the
        inversion count plus the blank's row, counted from the bottom,
        to be even.
        """
        n = self.size
        flat = [v for row in self.tiles for v in row if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = n - 1 - self.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 0

    def equals(self, other: object) -> bool:
        return isinstance(other, Board) and self.tiles == other.tiles

    # -- moves ----------------------------------------------------------------

    def neighbors(self) -> Iterator[Board]:
        """Yield one new board per legal slide of the blank.

        The blank is tried up, down, left, then right.
        """
        n = self.size
        br, bc = self.blank_pos
        for dr, dc in _BLANK_STEPS:
            tr, tc = br + dr, bc + dc
            if 0 <= tr < n and 0 <= tc < n:
                yield self._swap((tr, tc))

    def slide(self, direction: Direction) -> Board | None:
        """Return the board after sliding a tile in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns None if no tile can slide that way.
        """
        br, bc = self.blank_pos
        dr, dc = _SLIDE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self._swap((tr, tc))

    # -- exports --------------------------------------------------------------

    def to_rows(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def to_flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.tiles)

    def __str__(self) -> str:
        width = _cell_width(self.size)
        lines = [f"{self.size}\n"]
        for row in self.tiles:
            cells = ",".join(f"{v:>{width}}" for v in row)
            lines.append(f"|{cells} |\n")
        return "".join(lines)

    # -- helpers --------------------------------------------------------------

    def _swap(self, target: tuple[int, int]) -> Board:
        br, bc = self.blank_pos
        tr, tc = target
        rows = [list(row) for row in self.tiles]
        rows[br][bc], rows[tr][tc] = rows[tr][tc], rows[br][bc]

        # A swap keeps the grid a valid permutation, so skip re-validation.
        board = object.__new__(Board)
        object.__setattr__(board, "size", self.size)
        object.__setattr__(board, "tiles", tuple(tuple(row) for row in rows))
        object.__setattr__(board, "blank_pos", target)
        object.__setattr__(board, "_hamming", -1)
        object.__setattr__(board, "_manhattan", -1)
        return board
