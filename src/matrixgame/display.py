"""Text rendering of tableaux and game solutions."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import List, Optional, Sequence, Tuple

FRACTION = "fraction"
DECIMAL = "decimal"
STYLES = (FRACTION, DECIMAL)


def fmt_out(x: float) -> str:
    """Pretty-print a float as an integer or reduced fraction."""
    x = float(x)
    if math.isnan(x) or math.isinf(x):
        return str(x)
    if abs(x) < 1e-12:
        return "0"
    fr = Fraction.from_float(x).limit_denominator(10**6)
    if fr.denominator == 1:
        return str(fr.numerator)
    sign = '-' if fr.numerator * fr.denominator < 0 else ''
    return f"{sign}{abs(fr.numerator)}/{abs(fr.denominator)}"


def fmt_decimal(x: float, places: int = 2) -> str:
    x = float(x)
    if abs(x) < 0.5 * 10**-places:
        x = 0.0
    return f"{x:.{places}f}"


def fmt_num(x: float, style: str = FRACTION) -> str:
    if style == FRACTION:
        return fmt_out(x)
    if style == DECIMAL:
        return fmt_decimal(x)
    raise ValueError(f"style must be one of {', '.join(STYLES)}")


def format_tableau(tableau, header: str = "", pivot_cell: Optional[Tuple[int, int]] = None,
                   style: str = FRACTION) -> List[str]:
    n = tableau.decision_count
    headers = tableau.var_names() + ["RHS"]
    cells = []
    for i in range(tableau.rows):
        row_cells = []
        for j in range(tableau.cols):
            s = fmt_num(tableau.matrix[i, j], style)
            if pivot_cell is not None and (i, j) == tuple(pivot_cell):
                s = f"*{s}"
            row_cells.append(s)
        cells.append(row_cells)

    colw = max(6, max(len(s) for s in headers + [c for r in cells for c in r]) + 1)

    def join(row: Sequence[str]) -> str:
        out = ""
        for j, c in enumerate(row):
            # bars separate decision, slack and RHS blocks
            if j in (n, tableau.cols - 1):
                out += " |"
            out += f"{c:>{colw}}"
        return out

    lines = []
    if header:
        lines.append(header)
    lines.append(join(headers))
    width = len(lines[-1])
    lines.append("-" * width)
    for i, row_cells in enumerate(cells):
        if i == tableau.slack_count:
            lines.append("-" * width)
        lines.append(join(row_cells))
    return lines


def print_tableau(tableau, header: str = "", pivot_cell: Optional[Tuple[int, int]] = None,
                  style: str = FRACTION):
    print("\n".join(format_tableau(tableau, header, pivot_cell, style)))
    print()


def format_strategy(strategy: Sequence[float], style: str = FRACTION) -> str:
    return "( " + ", ".join(fmt_num(p, style) for p in strategy) + " )"


def print_history(history, style: str = FRACTION):
    last = len(history.tableaux) - 1
    for k, tab in enumerate(history.tableaux):
        if k == 0:
            title = "Initial Tableau:"
        elif k == last:
            title = "Final Tableau:"
        else:
            title = f"Tableau {k}:"
        cell = history.pivot_cells[k - 1] if k > 0 else None
        print_tableau(tab, header=title, pivot_cell=cell, style=style)


def print_solution(solution, style: str = FRACTION, show_tableaux: bool = True):
    if show_tableaux:
        print_history(solution.history, style=style)
    print("Player 1 Optimal Strategy:", format_strategy(solution.player1, style))
    print("Player 2 Optimal Strategy:", format_strategy(solution.player2, style))
    print("Value:", fmt_num(solution.value, style))
    print("Iterations:", solution.iterations)
