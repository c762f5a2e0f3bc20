"""Generalized sliding-tile puzzle: board model, search and generators."""

from slider.errors import EmptyQueueError, InvalidArgumentError, SliderError
from slider.models.board import Board, Direction

__all__ = [
    "Board",
    "Direction",
    "EmptyQueueError",
    "InvalidArgumentError",
    "SliderError",
]
