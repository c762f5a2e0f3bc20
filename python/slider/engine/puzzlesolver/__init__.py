from slider.engine.puzzlesolver.config import Heuristic, SearchMode, SolverConfig
from slider.engine.puzzlesolver.solver import Solver, SolverState

__all__ = ["Heuristic", "SearchMode", "Solver", "SolverConfig", "SolverState"]
