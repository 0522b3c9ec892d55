"""Log-odds substitution costs over the twenty amino acids plus the gap symbol."""

from __future__ import annotations

import math
from functools import lru_cache

AA: tuple[str, ...] = tuple("ACDEFGHIKLMNPQRSTVWY-")
AA_SIZE = len(AA)
AA_INDEX: dict[str, int] = {symbol: index for index, symbol in enumerate(AA)}

EPSILON = 1e-4

BACKGROUND: dict[str, float] = {
    "A": 0.078, "C": 0.019, "D": 0.053, "E": 0.062,
    "F": 0.040, "G": 0.073, "H": 0.023, "I": 0.053,
    "K": 0.058, "L": 0.091, "M": 0.023, "N": 0.044,
    "P": 0.052, "Q": 0.040, "R": 0.052, "S": 0.071,
    "T": 0.058, "V": 0.065, "W": 0.014, "Y": 0.034,
    "-": 0.020,
}


def _pair_probability(a: str, b: str) -> float:
    product = BACKGROUND[a] * BACKGROUND[b]
    if a == b:
        return product * 2.0
    if a == "-" or b == "-":
        return product * 0.2
    return product


@lru_cache(maxsize=1)
def _cost_table() -> tuple[tuple[float, ...], ...]:
    rows = []
    for a in AA:
        row = []
        for b in AA:
            expected = BACKGROUND[a] * BACKGROUND[b]
            ratio = (_pair_probability(a, b) + EPSILON) / (expected + EPSILON)
            row.append(-math.log2(ratio))
        rows.append(tuple(row))
    return tuple(rows)


def log_odds_matrix() -> list[list[float]]:
    """Return a fresh 21x21 cost matrix indexed in the order of ``AA``."""
    return [list(row) for row in _cost_table()]