from __future__ import annotations

import numpy as np


def plot_solution(solution):
    """Bar charts of both mixed strategies and the objective RHS per iteration.

    Returns a matplotlib figure; the caller decides whether to show or embed it.
    """
    import matplotlib.pyplot as plt

    p1 = np.asarray(solution.player1, dtype=float)
    p2 = np.asarray(solution.player2, dtype=float)
    trace = [tab.value_entry for tab in solution.history.tableaux]

    fig, axes = plt.subplots(1, 3, figsize=(12, 4))

    ax = axes[0]
    ax.bar([f"r{i+1}" for i in range(len(p1))], p1, color='C0', alpha=0.8)
    ax.set_ylim(0, 1.05)
    ax.set_title('Player 1 (rows)')
    ax.set_ylabel('probability')

    ax = axes[1]
    ax.bar([f"c{j+1}" for j in range(len(p2))], p2, color='C1', alpha=0.8)
    ax.set_ylim(0, 1.05)
    ax.set_title('Player 2 (columns)')

    ax = axes[2]
    ax.plot(range(len(trace)), trace, 'o-', color='C2', label='objective RHS')
    target = trace[-1]
    if target > 0:
        ax.axhline(target, color='red', linestyle='--', alpha=0.6,
                   label=f"1/(v+k) = {target:.4g}")
    ax.set_xlabel('iteration')
    ax.set_title(f"Value = {solution.value:.4g}")
    ax.legend(loc='best', fontsize=8)
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    return fig
