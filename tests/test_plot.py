from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

from matrixgame import solve_game
from matrixgame.plot import plot_solution


def test_plot_solution():
    fig = plot_solution(solve_game([[0, -1, 1], [1, 0, -1], [-1, 1, 0]]))
    axes = fig.get_axes()
    assert len(axes) == 3
    assert len(axes[0].patches) == 3
    assert axes[2].get_title().startswith("Value")
