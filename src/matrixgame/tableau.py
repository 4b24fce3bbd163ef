from __future__ import annotations

"""
Simplex tableau for a two-player zero-sum matrix game.

For an m x n payoff matrix A (row player maximizes) the column player's
program is

    maximize  x1 + ... + xn
    s.t.      (A + k) x <= 1,  x >= 0

with one slack variable per payoff row. The tableau layout per row is
[x1 .. xn, s1 .. sm, RHS] and the last row holds the objective.
k is the shift that makes every payoff entry at least 1.

- Entering column: most negative objective entry, first one on ties.
- Leaving row: minimum positive ratio RHS / entry, first one on ties.
- Each pivot builds a new tableau; tableaux are never modified in place.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .errors import ZeroPivot
from .payoff import validate_payoff

EPS = 1e-9

PIVOTED = "pivoted"
OPTIMAL = "optimal"
UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class Tableau:
    matrix: np.ndarray
    slack_count: int
    decision_count: int
    shift: float = 0.0

    def __post_init__(self):
        mat = np.array(self.matrix, dtype=float)
        expected = (self.slack_count + 1, self.decision_count + self.slack_count + 1)
        if mat.shape != expected:
            raise ValueError(f"tableau shape {mat.shape} does not match {expected}")
        mat.flags.writeable = False
        object.__setattr__(self, "matrix", mat)
        object.__setattr__(self, "shift", float(self.shift))

    @property
    def rows(self) -> int:
        return self.slack_count + 1

    @property
    def cols(self) -> int:
        return self.decision_count + self.slack_count + 1

    @property
    def objective_row(self) -> np.ndarray:
        return self.matrix[-1]

    @property
    def rhs(self) -> np.ndarray:
        return self.matrix[:, -1]

    @property
    def value_entry(self) -> float:
        """Objective RHS; converges to 1 / (game value + shift)."""
        return float(self.matrix[-1, -1])

    def var_names(self):
        return ([f"x{j+1}" for j in range(self.decision_count)]
                + [f"s{i+1}" for i in range(self.slack_count)])

    def choose_entering(self) -> Optional[int]:
        obj_row = self.objective_row
        best_j = None
        best_val = 0.0
        for j in range(self.cols):
            rc = obj_row[j]
            if rc < best_val:
                best_val = rc
                best_j = j
        return best_j

    def choose_leaving(self, enter_j: int) -> Optional[int]:
        # The objective row takes part in the scan; its ratio is never positive
        # for a game tableau, so it is not picked in practice.
        best_i = None
        best_ratio = np.inf
        for i in range(self.rows):
            aij = self.matrix[i, enter_j]
            if aij == 0:
                continue
            ratio = self.matrix[i, -1] / aij
            if ratio > 0 and ratio < best_ratio:
                best_ratio = ratio
                best_i = i
        return best_i

    def is_optimal(self) -> bool:
        return self.choose_entering() is None


@dataclass(frozen=True)
class PivotResult:
    status: str  # pivoted | optimal | unbounded
    tableau: Optional[Tableau] = None
    row: Optional[int] = None
    column: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.status == PIVOTED


def build_initial_tableau(payoff: Sequence[Sequence[float]]) -> Tableau:
    A = validate_payoff(payoff)
    m, n = A.shape

    min_payoff = float(A.min())
    shift = max(0.0, 1.0 - min_payoff)

    T = np.zeros((m + 1, n + m + 1))
    T[:m, :n] = A + shift
    T[:m, n:n + m] = np.eye(m)
    T[:m, -1] = 1.0
    T[m, :n] = -1.0
    # objective RHS starts at 0
    return Tableau(T, slack_count=m, decision_count=n, shift=shift)


def eliminate(tableau: Tableau, row: int, col: int) -> Tableau:
    """Gauss-Jordan step around (row, col) into a fresh tableau."""
    old = tableau.matrix
    piv = old[row, col]
    if abs(piv) < EPS:
        raise ZeroPivot(row, col)

    new = np.empty_like(old)
    new[row] = old[row] / piv
    for i in range(tableau.rows):
        if i == row:
            continue
        # uses the already normalized pivot row
        new[i] = old[i] - old[i, col] * new[row]
    return Tableau(new, tableau.slack_count, tableau.decision_count, shift=tableau.shift)


def pivot(tableau: Tableau) -> PivotResult:
    enter_j = tableau.choose_entering()
    if enter_j is None:
        return PivotResult(status=OPTIMAL)
    leave_i = tableau.choose_leaving(enter_j)
    if leave_i is None:
        return PivotResult(status=UNBOUNDED, column=enter_j)
    return PivotResult(status=PIVOTED, tableau=eliminate(tableau, leave_i, enter_j), row=leave_i, column=enter_j)
