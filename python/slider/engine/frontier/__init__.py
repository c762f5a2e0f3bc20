from slider.engine.frontier.queue import PriorityQueue

__all__ = ["PriorityQueue"]
