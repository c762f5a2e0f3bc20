"""Exceptions raised by the puzzle library."""

from __future__ import annotations


class SliderError(Exception):
    """Base class for every error raised by ``slider``."""


class InvalidArgumentError(SliderError, ValueError):
    """Malformed board input, size out of range, or a non-Board argument."""


class EmptyQueueError(SliderError, IndexError):
    """A priority queue was read while holding no elements."""
