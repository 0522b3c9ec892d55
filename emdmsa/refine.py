"""Leave-one-out refinement of a progressive alignment."""

from __future__ import annotations

from collections.abc import Sequence

from emdmsa.aligner import align, align_from_tree, combine
from emdmsa.distance import compute_distance_matrix
from emdmsa.profile import Profile, compute_gap_vectors, single_profile
from emdmsa.scoring import compute_cs_score, find_strong_columns
from emdmsa.tree import build_guide_tree


def _realign_without(seqs: Sequence[str], names: Sequence[str], index: int) -> Profile:
    rest = [s for j, s in enumerate(seqs) if j != index]
    names_rest = [n for j, n in enumerate(names) if j != index]
    profiles = [single_profile(s) for s in rest]
    distances = compute_distance_matrix(rest, names_rest)
    tree, _ = build_guide_tree(distances)
    aligned_rest = align_from_tree(tree, profiles)

    to_add = single_profile(seqs[index])
    go1, ge1 = compute_gap_vectors(aligned_rest.freq, 10.0, 5.0, 5.0, 2.5)
    go2, ge2 = compute_gap_vectors(to_add.freq, 10.0, 5.0, 5.0, 2.5)
    _, columns = align(aligned_rest.freq, to_add.freq, go1, ge1, go2, ge2)
    return combine(aligned_rest, to_add, columns)


def iterative_refinement(
    seqs: Sequence[str],
    names: Sequence[str],
    initial: Profile,
    iterations: int = 3,
    verbose: bool = False,
) -> Profile:
    """Re-add each sequence to an alignment of the others, keeping improvements.

    A candidate replaces the current best when its column score rises or it
    keeps more than 70% of the original strongly conserved columns. Long or
    poorly conserved alignments are returned unchanged.
    """
    best = initial
    best_cs = compute_cs_score(best.aligned)
    if verbose:
        print(f"\nInitial CS Score: {best_cs:g}")

    anchors = set(find_strong_columns(best.aligned, 1))
    width = len(best.aligned[0])
    many = len(seqs) > 5

    if (best_cs < 0.08 and many) or width > 250 or (width > 200 and len(seqs) > 6):
        if verbose:
            print("Refinement skipped: ", end="")
        if best_cs < 0.1 and many:
            print("CS too low and seq count high.")
        elif width > 250:
            print("Alignment too long.")
        else:
            print("Long alignment + many sequences.")
        return best

    for iteration in range(iterations):
        if verbose:
            print(f"\nIteration {iteration + 1}")
        for index in range(len(seqs)):
            combined = _realign_without(seqs, names, index)
            cs = compute_cs_score(combined.aligned)
            overlap = sum(1 for col in find_strong_columns(combined.aligned, 1) if col in anchors)
            anchor_fraction = overlap / max(len(anchors), 1)
            if verbose:
                print(f"  > Anchor match: {anchor_fraction:g}")
                print(f"  > New CS after adding seq {index}: {cs:g}")
            if cs > best_cs or anchor_fraction > 0.7:
                best = combined
                best_cs = cs
                if verbose:
                    print("  CS updated!")
    return best