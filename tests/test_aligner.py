import pytest

from emdmsa.aligner import align, align_from_tree, combine
from emdmsa.blosum import AA
from emdmsa.profile import compute_gap_vectors, single_profile
from emdmsa.tree import TreeNode, build_guide_tree


def _align_seqs(s1, s2):
    p1, p2 = single_profile(s1), single_profile(s2)
    go1, ge1 = compute_gap_vectors(p1.freq)
    go2, ge2 = compute_gap_vectors(p2.freq)
    return align(p1.freq, p2.freq, go1, ge1, go2, ge2)


def test_identical_sequences_align_column_for_column():
    score, columns = _align_seqs("ACD", "ACD")
    assert columns == [("M", "M")] * 3
    assert score < 0


def test_substitution_keeps_columns_matched():
    _, columns = _align_seqs("ACD", "ACE")
    assert columns == [("M", "M")] * 3


@pytest.mark.parametrize("s1,s2", [("ACDEF", "ACF"), ("GG", "WWWWW"), ("ACDEFGH", "A")])
def test_alignment_never_overconsumes(s1, s2):
    _, columns = _align_seqs(s1, s2)
    used_a = sum(1 for a, _ in columns if a != "-")
    used_b = sum(1 for _, b in columns if b != "-")
    assert used_a <= len(s1)
    assert used_b <= len(s2)
    assert all(col in {("M", "M"), ("M", "-"), ("-", "M")} for col in columns)


def test_combine_inserts_gaps_and_weights_frequencies():
    a = single_profile("ACD")
    b = single_profile("AD")
    merged = combine(a, b, [("M", "M"), ("M", "-"), ("M", "M")])
    assert merged.aligned == ["ACD", "A-D"]
    assert merged.size == 2
    assert merged.freq[1] == a.freq[1]
    assert merged.freq[0][AA.index("A")] == 1.0
    for column in merged.freq:
        assert sum(column) == pytest.approx(1.0)


def test_combine_averages_differing_residues():
    merged = combine(single_profile("A"), single_profile("C"), [("M", "M")])
    assert merged.freq[0][AA.index("A")] == pytest.approx(0.5)
    assert merged.freq[0][AA.index("C")] == pytest.approx(0.5)
    assert merged.aligned == ["A", "C"]


def test_align_from_tree_leaf_returns_profile():
    profiles = [single_profile("ACD")]
    assert align_from_tree(TreeNode(0), profiles) is profiles[0]


def test_align_from_tree_identical_sequences():
    seqs = ["ACDE", "ACDE", "ACDE"]
    profiles = [single_profile(s) for s in seqs]
    zero = [[0.0, 0.5, 0.6], [0.5, 0.0, 0.7], [0.6, 0.7, 0.0]]
    root, _ = build_guide_tree(zero)
    result = align_from_tree(root, profiles)
    assert result.size == 3
    assert sorted(result.aligned) == seqs
    assert len(result.freq) == 4