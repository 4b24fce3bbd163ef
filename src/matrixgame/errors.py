"""Typed failures raised while reading or solving a matrix game."""

from __future__ import annotations

from typing import Optional


class GameError(Exception):
    """Base class for every error raised by matrixgame."""


class InputError(GameError, ValueError):
    """The payoff matrix could not be accepted."""


class InvalidDimensions(InputError):
    def __init__(self, m: object, n: object):
        super().__init__(f"matrix dimensions must be integers greater than 0, got m={m!r}, n={n!r}")
        self.m = m
        self.n = n


class MalformedInput(InputError):
    def __init__(self, message: str, row: Optional[int] = None, token: Optional[str] = None):
        super().__init__(message)
        self.row = row
        self.token = token


class SolverError(GameError, RuntimeError):
    """The simplex iteration could not produce a solution."""


class UnboundedPivot(SolverError):
    def __init__(self, column: int):
        super().__init__(f"no pivot row with a positive ratio for column {column}")
        self.column = column


class NonConvergence(SolverError):
    def __init__(self, max_iterations: int):
        super().__init__(f"no optimal tableau after {max_iterations} pivots")
        self.max_iterations = max_iterations


class DegenerateSolution(SolverError):
    def __init__(self, v: float):
        super().__init__(f"terminal objective value is {v!r}; game value is undefined")
        self.v = v


class InfeasibleTableau(SolverError):
    def __init__(self, row: int, rhs: float):
        super().__init__(f"terminal tableau is infeasible: row {row} has RHS {rhs:.6g}")
        self.row = row
        self.rhs = rhs


class ZeroPivot(SolverError):
    def __init__(self, row: int, column: int):
        super().__init__(f"zero pivot encountered at row {row}, column {column}")
        self.row = row
        self.column = column
