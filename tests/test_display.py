from __future__ import annotations

import pytest

from matrixgame import solve_game
from matrixgame.display import (
    fmt_decimal,
    fmt_num,
    fmt_out,
    format_strategy,
    format_tableau,
    print_solution,
)
from matrixgame.tableau import build_initial_tableau


def test_fmt_out():
    assert fmt_out(0.5) == "1/2"
    assert fmt_out(-2.0) == "-2"
    assert fmt_out(1 / 3) == "1/3"
    assert fmt_out(-1e-15) == "0"


def test_fmt_decimal():
    assert fmt_decimal(0.25) == "0.25"
    assert fmt_decimal(-0.001) == "0.00"
    assert fmt_num(2 / 3, "decimal") == "0.67"
    with pytest.raises(ValueError):
        fmt_num(1.0, "roman")


def test_format_strategy():
    assert format_strategy([0.5, 0.5]) == "( 1/2, 1/2 )"
    assert format_strategy([0.25, 0.75], "decimal") == "( 0.25, 0.75 )"


def test_format_tableau():
    tab = build_initial_tableau([[1, -1], [-1, 1]])
    lines = format_tableau(tab, header="Initial Tableau:", pivot_cell=(0, 0))
    assert lines[0] == "Initial Tableau:"
    for name in ("x1", "x2", "s1", "s2", "RHS"):
        assert name in lines[1]
    assert "*3" in lines[3]
    # header, labels, rule, two payoff rows, rule, objective row
    assert len(lines) == 7
    assert set(lines[5]) == {"-"}


def test_print_solution(capsys):
    print_solution(solve_game([[1, -1], [-1, 1]]))
    out = capsys.readouterr().out
    assert "Initial Tableau:" in out
    assert "Tableau 1:" in out
    assert "Final Tableau:" in out
    assert "Player 1 Optimal Strategy: ( 1/2, 1/2 )" in out
    assert "Player 2 Optimal Strategy: ( 1/2, 1/2 )" in out
    assert "Value: 0" in out


def test_print_solution_decimal_without_tableaux(capsys):
    print_solution(solve_game([[-4, -2], [-1, -3]]), style="decimal", show_tableaux=False)
    out = capsys.readouterr().out
    assert "Tableau" not in out
    assert "Player 2 Optimal Strategy: ( 0.25, 0.75 )" in out
    assert "Value: -2.50" in out
