"""Earth mover's style distance between two residue distributions."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache

from emdmsa.blosum import AA_SIZE, log_odds_matrix

MISSING_DISTANCE = 1e6
COST_FLOOR = -3.5


@lru_cache(maxsize=1)
def _clamped_costs() -> tuple[tuple[float, ...], ...]:
    return tuple(
        tuple(max(value, COST_FLOOR) for value in row) for row in log_odds_matrix()
    )


def calculate_emd(dist1: Sequence[float], dist2: Sequence[float]) -> float:
    """Greedy transport cost between two 21-symbol distributions, squashed by tanh.

    Returns ``MISSING_DISTANCE`` when either distribution sums to zero.
    """
    if len(dist1) != AA_SIZE or len(dist2) != AA_SIZE:
        raise ValueError(f"Distributions must be size {AA_SIZE}")

    sum1 = sum(dist1)
    sum2 = sum(dist2)
    if sum1 == 0 or sum2 == 0:
        return MISSING_DISTANCE

    supply = [value / sum1 for value in dist1]
    demand = [value / sum2 for value in dist2]
    costs = _clamped_costs()

    total = 0.0
    for i, row in enumerate(costs):
        for j, cost in enumerate(row):
            flow = min(supply[i], demand[j])
            total += flow * cost
            supply[i] -= flow
            demand[j] -= flow

    return math.tanh(total)