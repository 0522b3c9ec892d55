"""Quality scores for finished alignments."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from emdmsa.blosum import AA_INDEX, log_odds_matrix

_SIMILARITY_FLOOR = -3.0


def _residue_index(symbol: str) -> int | None:
    if symbol == "-":
        return None
    return AA_INDEX.get(symbol)


def compute_cs_score(aligned: Sequence[str]) -> float:
    """Fraction of columns in which every row is similar to the first row."""
    if not aligned:
        return 0.0
    length = len(aligned[0])
    if length == 0:
        return 0.0

    costs = log_odds_matrix()
    matched = 0
    for column in zip(*aligned):
        ref_idx = _residue_index(column[0])
        if ref_idx is None:
            continue
        similar = True
        for symbol in column[1:]:
            idx = _residue_index(symbol)
            if idx is None or costs[ref_idx][idx] < _SIMILARITY_FLOOR:
                similar = False
                break
        if similar:
            matched += 1
    return matched / length


def compute_sps_score(
    aligned: Sequence[str],
    threshold: float = -3.0,
    use_blosum: bool = True,
    debug: bool = False,
) -> float:
    """Sum-of-pairs score: the fraction of residue pairs in a column that agree."""
    if len(aligned) < 2:
        return 0.0
    if len(aligned[0]) == 0:
        return 0.0

    costs = log_odds_matrix()
    total_pairs = 0
    matching_pairs = 0
    for column in zip(*aligned):
        for i, a in enumerate(column):
            a_idx = _residue_index(a)
            if a_idx is None:
                continue
            for b in column[i + 1:]:
                b_idx = _residue_index(b)
                if b_idx is None:
                    continue
                total_pairs += 1
                if use_blosum:
                    if costs[a_idx][b_idx] >= threshold:
                        matching_pairs += 1
                elif a == b:
                    matching_pairs += 1

    if total_pairs == 0:
        return 0.0
    if debug:
        print(f"Matched pairs: {matching_pairs}, Total pairs: {total_pairs}")
    return matching_pairs / total_pairs


def find_strong_columns(aligned: Sequence[str], mismatch_allow: int) -> list[int]:
    """Indices of columns where at most ``mismatch_allow`` rows differ from the
    most common residue (gaps count as differing)."""
    rows = len(aligned)
    strong = []
    for index, column in enumerate(zip(*aligned)):
        counts = Counter(symbol for symbol in column if symbol != "-")
        top = max(counts.values(), default=0)
        if rows - top <= mismatch_allow:
            strong.append(index)
    return strong