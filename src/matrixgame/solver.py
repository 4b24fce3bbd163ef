from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .display import print_tableau
from .errors import DegenerateSolution, InfeasibleTableau, NonConvergence, UnboundedPivot
from .tableau import EPS, OPTIMAL, UNBOUNDED, Tableau, build_initial_tableau, pivot

# iteration cap = DEFAULT_CAP_FACTOR * rows * cols
DEFAULT_CAP_FACTOR = 10


@dataclass
class SolveHistory:
    tableaux: List[Tableau] = field(default_factory=list)
    pivot_rows: List[int] = field(default_factory=list)
    pivot_cells: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def initial(self) -> Tableau:
        return self.tableaux[0]

    @property
    def terminal(self) -> Tableau:
        return self.tableaux[-1]

    @property
    def iterations(self) -> int:
        return len(self.pivot_cells)

    def record(self, tableau: Tableau, row: int, col: int):
        self.tableaux.append(tableau)
        self.pivot_rows.append(row)
        self.pivot_cells.append((row, col))

    def basis(self) -> Dict[int, int]:
        """Map row -> basic column of the terminal tableau (slack rows omitted)."""
        basic: Dict[int, int] = {}
        for row, col in self.pivot_cells:
            for r, c in list(basic.items()):
                if c == col:
                    del basic[r]
            basic[row] = col
        return basic


@dataclass
class GameSolution:
    value: float
    player1: Tuple[float, ...]
    player2: Tuple[float, ...]
    history: SolveHistory

    @property
    def iterations(self) -> int:
        return self.history.iterations

    @property
    def shift(self) -> float:
        return self.history.initial.shift


def iteration_cap(tableau: Tableau) -> int:
    return DEFAULT_CAP_FACTOR * tableau.rows * tableau.cols


def run_simplex(initial: Tableau, max_iterations: Optional[int] = None, verbose=False) -> SolveHistory:
    if max_iterations is None:
        max_iterations = iteration_cap(initial)
    history = SolveHistory(tableaux=[initial])
    tableau = initial
    if verbose:
        print_tableau(tableau, header="Initial Tableau:")
    while True:
        result = pivot(tableau)
        if result.status == OPTIMAL:
            return history
        if result.status == UNBOUNDED:
            raise UnboundedPivot(result.column)
        if history.iterations >= max_iterations:
            raise NonConvergence(max_iterations)
        tableau = result.tableau
        history.record(tableau, result.row, result.column)
        if verbose:
            print_tableau(tableau, header=f"Tableau {history.iterations}:",
                          pivot_cell=(result.row, result.column))


def _clean(x: float) -> float:
    return 0.0 if abs(x) < EPS else float(x)


def extract_solution(history: SolveHistory) -> GameSolution:
    tab = history.terminal
    m, n = tab.slack_count, tab.decision_count
    v = tab.value_entry
    if abs(v) < EPS:
        raise DegenerateSolution(v)

    # a zero-ratio row skipped by the ratio test leaves a negative RHS behind
    for row in range(m):
        if tab.rhs[row] < -EPS:
            raise InfeasibleTableau(row, float(tab.rhs[row]))

    value = (1 / v) - tab.shift
    obj = tab.objective_row
    player1 = tuple(_clean(obj[n + i] / v) for i in range(m))

    # decision variables that ended up basic carry their RHS; others are 0
    player2 = [0.0] * n
    for row, col in history.basis().items():
        if col < n:
            player2[col] = _clean(tab.rhs[row] / v)

    for p in player1 + tuple(player2):
        if p < -EPS:
            raise DegenerateSolution(v)

    return GameSolution(value=float(value), player1=player1, player2=tuple(player2), history=history)


def solve_game(payoff: Sequence[Sequence[float]], max_iterations: Optional[int] = None, verbose=False) -> GameSolution:
    """Solve the zero-sum game with the given row-player payoff matrix."""
    initial = build_initial_tableau(payoff)
    history = run_simplex(initial, max_iterations=max_iterations, verbose=verbose)
    return extract_solution(history)
