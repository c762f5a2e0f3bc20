from slider.models.board import MAX_SIZE, MIN_SIZE, Board, Direction

__all__ = ["Board", "Direction", "MAX_SIZE", "MIN_SIZE"]
