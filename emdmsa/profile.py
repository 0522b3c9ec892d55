"""Column profiles of alignments and the statistics derived from them."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from emdmsa.blosum import AA


@dataclass
class Profile:
    """Per-column residue frequencies of an alignment, with its rows."""

    freq: list[list[float]]
    size: int
    aligned: list[str] = field(default_factory=list)


def pick_consensus(profile: Sequence[float]) -> str:
    """Return the symbol with the highest weight; the first one wins ties."""
    best_weight = -1.0
    selected = "-"
    for symbol, weight in zip(AA, profile):
        if weight > best_weight:
            best_weight = weight
            selected = symbol
    return selected


def pick_strong_consensus(profile: Sequence[float], threshold: float = 0.7) -> str:
    """Return the first symbol holding at least ``threshold`` of the mass,
    falling back to the plain consensus."""
    total = sum(profile)
    if total > 0:
        for symbol, weight in zip(AA, profile):
            if weight / total >= threshold:
                return symbol
    return pick_consensus(profile)


def calc_entropy(p: Sequence[float]) -> float:
    """Shannon entropy in bits, ignoring non-positive entries."""
    return -sum(value * math.log2(value) for value in p if value > 0)


def compute_gap_vectors(
    profile: Sequence[Sequence[float]],
    go_max: float = 10.0,
    go_min: float = 5.0,
    ge_max: float = 5.0,
    ge_min: float = 2.5,
) -> tuple[list[float], list[float]]:
    """Return per-column gap-open and gap-extend penalties.

    Conserved (low entropy) columns get penalties near the maximum, variable
    ones near the minimum; all are scaled up for longer profiles.
    """
    if not profile:
        raise ValueError("profile has no columns")

    entropies = [calc_entropy(column) for column in profile]
    h_min = min(entropies)
    h_max = max(entropies)
    length_factor = 1.0 + math.log(1 + len(profile) / 100.0)

    gap_open: list[float] = []
    gap_extend: list[float] = []
    for entropy in entropies:
        if h_max > h_min:
            norm = (entropy - h_min) / (h_max - h_min + 1e-6)
        else:
            norm = 0.5
        norm = min(1.0, max(0.0, norm))
        gap_open.append((go_max - norm * (go_max - go_min)) * length_factor)
        gap_extend.append((ge_max - norm * (ge_max - ge_min)) * length_factor)
    return gap_open, gap_extend


def compute_distributions(aligned: Sequence[str]) -> list[list[float]]:
    """Return, for each column, the fraction of rows holding each symbol of ``AA``."""
    if not aligned:
        raise ValueError("no sequences given")
    length = len(aligned[0])
    if any(len(row) != length for row in aligned):
        raise ValueError("aligned sequences differ in length")

    total = len(aligned)
    distributions = []
    for column in zip(*aligned):
        counts = Counter(column)
        distributions.append([counts.get(symbol, 0) / total for symbol in AA])
    return distributions


def single_profile(seq: str) -> Profile:
    """Profile of a lone, unaligned sequence."""
    return Profile(compute_distributions([seq]), 1, [seq])