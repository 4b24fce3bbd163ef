"""Optimal mixed strategies of two-player zero-sum matrix games via the tableau simplex method."""

from .errors import (
    DegenerateSolution,
    InfeasibleTableau,
    GameError,
    InputError,
    InvalidDimensions,
    MalformedInput,
    NonConvergence,
    SolverError,
    UnboundedPivot,
    ZeroPivot,
)
from .solver import GameSolution, SolveHistory, extract_solution, run_simplex, solve_game
from .tableau import PivotResult, Tableau, build_initial_tableau, pivot

__version__ = "0.1.0"
