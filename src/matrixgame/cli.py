from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .display import FRACTION, STYLES, print_solution
from .errors import InputError, SolverError
from .payoff import load_json, parse_dimensions, read_payoff
from .solver import solve_game

USAGE = """usage: matrixgame m n
\tm: number of rows, integer greater than 0
\tn: number of columns, integer greater than 0"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="matrixgame",
        description="Solve a two-player zero-sum matrix game with the tableau simplex method (shows iterations)",
    )
    p.add_argument("m", nargs="?", help="Number of rows (payoff matrix is then read from stdin)")
    p.add_argument("n", nargs="?", help="Number of columns")
    p.add_argument("--json", metavar="PATH", help='JSON file with {"payoff": [[...], ...]} instead of stdin')
    p.add_argument("--format", choices=STYLES, default=FRACTION, help="Number format for tableaux and results")
    p.add_argument("--no-verbose", action="store_true", help="Hide tableau printouts")
    p.add_argument("--max-iterations", type=int, default=None, help="Pivot limit (default: 10 * rows * cols)")
    p.add_argument("--graph", action="store_true", help="Plot strategies and objective progression")
    return p


def read_matrix(args, stdin=None) -> List[List[float]]:
    if args.json:
        with open(args.json, "r") as f:
            return load_json(f)
    if args.m is None or args.n is None:
        raise InputError(USAGE)
    m, n = parse_dimensions(args.m, args.n)
    stdin = stdin or sys.stdin
    if stdin.isatty():
        print(f"Enter the {m} by {n} payoff matrix below. Separate rows by new lines and columns by spaces: ")
    return read_payoff(stdin, m, n)


def main(argv: Optional[List[str]] = None, stdin=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        payoff = read_matrix(args, stdin=stdin)
    except InputError as e:
        if args.m is not None and args.n is not None and not args.json and getattr(e, "row", None) is not None:
            print(f"Please enter {args.n} valid numbers on each line.")
        elif args.json:
            print(f"Invalid payoff file: {e}")
        else:
            print(USAGE)
        return 2
    except OSError as e:
        print(f"Invalid payoff file: {e}")
        return 2

    try:
        solution = solve_game(payoff, max_iterations=args.max_iterations)
    except SolverError as e:
        print(f"Solver failed: {e}")
        return 1

    print_solution(solution, style=args.format, show_tableaux=not args.no_verbose)
    if args.graph:
        import matplotlib.pyplot as plt
        from .plot import plot_solution
        plot_solution(solution)
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
