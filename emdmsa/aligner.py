"""Profile-profile alignment with affine, entropy-weighted gap penalties."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from emdmsa.blosum import AA_SIZE
from emdmsa.emd import calculate_emd
from emdmsa.profile import (
    Profile,
    calc_entropy,
    compute_gap_vectors,
    pick_strong_consensus,
)
from emdmsa.tree import TreeNode

_NEG_INF = -1e9
_CONSENSUS_BONUS = -3.0

Column = tuple[str, str]


class _Move(IntEnum):
    NONE = -1
    MATCH = 0
    GAP_IN_B = 1
    GAP_IN_A = 2


def align(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    go_a: Sequence[float],
    ge_a: Sequence[float],
    go_b: Sequence[float],
    ge_b: Sequence[float],
) -> tuple[float, list[Column]]:
    """Align two column profiles.

    Returns the final score and a list of columns, each a pair whose sides
    are ``"M"`` where that profile contributes a column and ``"-"`` where it
    gets a gap. The traceback stops at the first cell without a recorded move.
    """
    m, n = len(a), len(b)
    match = [[_NEG_INF] * (n + 1) for _ in range(m + 1)]
    gap_b = [[_NEG_INF] * (n + 1) for _ in range(m + 1)]
    gap_a = [[_NEG_INF] * (n + 1) for _ in range(m + 1)]
    trace = [[_Move.NONE] * (n + 1) for _ in range(m + 1)]
    match[0][0] = 0.0

    for i in range(1, m + 1):
        gap_b[i][0] = -go_a[i - 1] - (i - 1) * ge_a[i - 1]
    for j in range(1, n + 1):
        gap_a[0][j] = -go_b[j - 1] - (j - 1) * ge_b[j - 1]

    entropy_a = [calc_entropy(column) for column in a]
    entropy_b = [calc_entropy(column) for column in b]
    consensus_a = [pick_strong_consensus(column) for column in a]
    consensus_b = [pick_strong_consensus(column) for column in b]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            go = (go_a[i - 1] + go_b[j - 1]) / 2.0
            ge = (ge_a[i - 1] + ge_b[j - 1]) / 2.0

            emd_raw = calculate_emd(a[i - 1], b[j - 1])
            bonus = _CONSENSUS_BONUS if consensus_a[i - 1] == consensus_b[j - 1] else 0.0
            emd = -emd_raw + bonus

            best = emd + max(match[i - 1][j - 1], gap_b[i - 1][j - 1], gap_a[i - 1][j - 1])
            move = _Move.MATCH

            entropy_factor = 1.0 + 0.75 * (1.0 - min(entropy_a[i - 1], entropy_b[j - 1]))
            adj_go = go * entropy_factor
            adj_ge = ge * entropy_factor

            x_val = max(match[i - 1][j] - adj_go, gap_b[i - 1][j] - adj_ge)
            y_val = max(match[i][j - 1] - adj_go, gap_a[i][j - 1] - adj_ge)
            gap_b[i][j] = x_val
            gap_a[i][j] = y_val

            if x_val > best:
                best = x_val
                move = _Move.GAP_IN_B
            if y_val > best:
                best = y_val
                move = _Move.GAP_IN_A
            match[i][j] = best
            trace[i][j] = move

    columns: list[Column] = []
    i, j = m, n
    while i > 0 or j > 0:
        move = trace[i][j]
        if move == _Move.MATCH and i > 0 and j > 0:
            columns.append(("M", "M"))
            i -= 1
            j -= 1
        elif move == _Move.GAP_IN_B and i > 0:
            columns.append(("M", "-"))
            i -= 1
        elif move == _Move.GAP_IN_A and j > 0:
            columns.append(("-", "M"))
            j -= 1
        else:
            break

    columns.reverse()
    return match[m][n], columns


def combine(a: Profile, b: Profile, aln: Sequence[Column]) -> Profile:
    """Merge two profiles along an alignment produced by :func:`align`."""
    freq: list[list[float]] = []
    rows_a: list[list[str]] = [[] for _ in a.aligned]
    rows_b: list[list[str]] = [[] for _ in b.aligned]
    ai = bi = 0

    for side_a, side_b in aln:
        uses_a = side_a != "-"
        uses_b = side_b != "-"
        column = [0.0] * AA_SIZE
        total = 0
        if uses_a:
            column = [c + f * a.size for c, f in zip(column, a.freq[ai])]
            total += a.size
        if uses_b:
            column = [c + f * b.size for c, f in zip(column, b.freq[bi])]
            total += b.size
        if total > 0:
            column = [c / total for c in column]
        freq.append(column)

        for row, source in zip(rows_a, a.aligned):
            row.append(source[ai] if uses_a else "-")
        for row, source in zip(rows_b, b.aligned):
            row.append(source[bi] if uses_b else "-")

        if uses_a:
            ai += 1
        if uses_b:
            bi += 1

    aligned = ["".join(row) for row in rows_a + rows_b]
    return Profile(freq, a.size + b.size, aligned)


def align_from_tree(node: TreeNode, profiles: Sequence[Profile]) -> Profile:
    """Progressively align the leaf profiles following the guide tree."""
    if node.is_leaf():
        return profiles[node.id]

    left = align_from_tree(node.left, profiles)
    right = align_from_tree(node.right, profiles)

    go_left, ge_left = compute_gap_vectors(left.freq, 10.0, 5.0, 5.0, 2.5)
    go_right, ge_right = compute_gap_vectors(right.freq, 10.0, 5.0, 5.0, 2.5)

    _, columns = align(left.freq, right.freq, go_left, ge_left, go_right, ge_right)
    return combine(left, right, columns)