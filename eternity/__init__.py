"""Edge-matching puzzle model, sequential and threaded solvers, and a solution checker."""

__version__ = "1.0.0"

__all__ = ["puzzle", "solver", "checker", "parallel"]