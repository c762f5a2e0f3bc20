"""Reading and writing boards as JSON or comma-separated text."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from slider.errors import InvalidArgumentError
from slider.models.board import Board


def board_from_data(data: Any) -> Board:
    """Reconstruct a ``Board`` from its JSON representation.

    Expects ``{"tiles": [[...], ...]}`` with an optional ``"size"`` that
    must agree with the grid.
    """
    if not isinstance(data, dict) or "tiles" not in data:
        raise InvalidArgumentError('Board data must be an object with a "tiles" key.')
    board = Board.from_rows(data["tiles"])
    if "size" in data and data["size"] != board.size:
        raise InvalidArgumentError(
            f"Declared size {data['size']!r} does not match a {board.size}×{board.size} grid."
        )
    return board


def board_to_data(board: Board) -> dict[str, Any]:
    return {"size": board.size, "tiles": board.to_rows()}


def load_board(filepath: Path) -> Board:
    try:
        data = json.loads(filepath.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidArgumentError(f"{filepath} is not valid JSON: {exc}") from exc
    return board_from_data(data)


def save_board(board: Board, filepath: Path) -> None:
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(json.dumps(board_to_data(board)) + "\n")


def parse_tiles(text: str) -> Board:
    """Parse row-major tiles such as ``"0,1,3,4,2,5,7,8,6"``; size is inferred."""
    try:
        flat = [int(part) for part in text.replace(" ", "").split(",") if part]
    except ValueError as exc:
        raise InvalidArgumentError(f"Tiles must be comma-separated ints: {text!r}") from exc
    size = math.isqrt(len(flat))
    if size * size != len(flat):
        raise InvalidArgumentError(f"{len(flat)} tiles do not form a square board.")
    return Board.from_flat(size, flat)
