"""Reading and validating payoff matrices.

Input contract:
- dimensions: two integers m, n greater than 0
- text: m lines, each with at least n whitespace separated numbers
  (extra tokens on a line are ignored)
- JSON: {"payoff": [[...], ...]} with one list per row
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import IO, Iterable, List, Sequence, Tuple

import numpy as np

from .errors import InvalidDimensions, MalformedInput


def parse_dimensions(m_text: str, n_text: str) -> Tuple[int, int]:
    try:
        m, n = int(m_text), int(n_text)
    except (TypeError, ValueError):
        raise InvalidDimensions(m_text, n_text) from None
    if m <= 0 or n <= 0:
        raise InvalidDimensions(m, n)
    return m, n


def parse_number(token: str, row: int) -> float:
    try:
        value = float(Decimal(token))
    except ArithmeticError:
        raise MalformedInput(f"row {row + 1}: {token!r} is not a number", row=row, token=token) from None
    if not math.isfinite(value):
        raise MalformedInput(f"row {row + 1}: {token!r} is not a finite number", row=row, token=token)
    return value


def parse_row(line: str, n: int, row: int = 0) -> List[float]:
    tokens = line.split()
    if len(tokens) < n:
        raise MalformedInput(f"row {row + 1}: expected {n} numbers, got {len(tokens)}", row=row)
    return [parse_number(tok, row) for tok in tokens[:n]]


def read_payoff(lines: Iterable[str], m: int, n: int) -> List[List[float]]:
    """Read m rows of n numbers, failing on the first bad row."""
    payoff: List[List[float]] = []
    it = iter(lines)
    for row in range(m):
        line = next(it, None)
        if line is None:
            raise MalformedInput(f"expected {m} rows, got {row}", row=row)
        payoff.append(parse_row(line, n, row))
    return payoff


def load_json(fp: IO[str]) -> List[List[float]]:
    # Parse floats as Decimal to avoid binary float artifacts
    try:
        cfg = json.load(fp, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise MalformedInput(f"invalid JSON: {e}") from None
    rows = cfg.get("payoff") if isinstance(cfg, dict) else cfg
    if not isinstance(rows, list):
        raise MalformedInput('JSON must contain a "payoff" list of rows')
    return validate_payoff(rows).tolist()


def validate_payoff(payoff: Sequence[Sequence[float]]) -> np.ndarray:
    """Return the payoff matrix as a 2-d float array or raise an InputError."""
    if isinstance(payoff, np.ndarray):
        rows = payoff.tolist() if payoff.ndim == 2 else None
    elif not isinstance(payoff, (list, tuple)):
        raise MalformedInput("payoff must be a list of rows")
    else:
        rows = [list(r) if isinstance(r, (list, tuple, np.ndarray)) else None for r in payoff]
    if not rows or any(r is None for r in rows):
        raise InvalidDimensions(len(rows or []), 0)
    n = len(rows[0])
    if n == 0:
        raise InvalidDimensions(len(rows), 0)
    for i, r in enumerate(rows):
        if len(r) != n:
            raise MalformedInput(f"row {i + 1}: expected {n} numbers, got {len(r)}", row=i)
    try:
        A = np.array([[float(v) for v in r] for r in rows], dtype=float)
    except (TypeError, ValueError) as e:
        raise MalformedInput(f"non-numeric payoff entry: {e}") from None
    if not np.all(np.isfinite(A)):
        raise MalformedInput("payoff entries must be finite")
    return A
