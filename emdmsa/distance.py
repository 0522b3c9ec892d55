"""Pairwise distances between unaligned sequences."""

from __future__ import annotations

import os
from collections.abc import Sequence

from emdmsa.emd import MISSING_DISTANCE, calculate_emd
from emdmsa.fasta import write_csv
from emdmsa.profile import compute_distributions

DEFAULT_CSV = "emd_distance_matrix.csv"


def compute_distance_matrix(
    seqs: Sequence[str],
    names: Sequence[str],
    csv_path: str | os.PathLike | None = DEFAULT_CSV,
) -> list[list[float]]:
    """Mean column-wise EMD between every pair of sequences.

    Positions past the shorter sequence are ignored; a pair with no shared
    positions gets ``MISSING_DISTANCE``. The matrix is also written as CSV
    to ``csv_path`` unless it is ``None``.
    """
    count = len(seqs)
    matrix = [[0.0] * count for _ in range(count)]
    distributions = [compute_distributions([seq]) for seq in seqs]

    for i in range(count):
        for j in range(i + 1, count):
            columns = list(zip(distributions[i], distributions[j]))
            if columns:
                value = sum(calculate_emd(a, b) for a, b in columns) / len(columns)
            else:
                value = MISSING_DISTANCE
            matrix[i][j] = matrix[j][i] = value

    if csv_path is not None:
        write_csv(matrix, names, csv_path)
    return matrix