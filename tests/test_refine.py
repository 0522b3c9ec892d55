from emdmsa.aligner import align_from_tree
from emdmsa.distance import compute_distance_matrix
from emdmsa.profile import Profile, single_profile
from emdmsa.refine import iterative_refinement
from emdmsa.tree import build_guide_tree


def _initial(seqs, names):
    distances = compute_distance_matrix(seqs, names, None)
    tree, _ = build_guide_tree(distances)
    return align_from_tree(tree, [single_profile(s) for s in seqs])


def test_long_alignment_is_returned_unchanged(capsys):
    row = "A" * 251
    initial = Profile(single_profile(row).freq, 1, [row])
    result = iterative_refinement([row], ["s"], initial, 3, False)
    assert result is initial
    assert "Alignment too long." in capsys.readouterr().out


def test_identical_sequences_stay_aligned(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    seqs = ["ACDE", "ACDE", "ACDE"]
    names = ["a", "b", "c"]
    result = iterative_refinement(seqs, names, _initial(seqs, names), 1, False)
    assert result.size == 3
    assert result.aligned == seqs
    assert (tmp_path / "emd_distance_matrix.csv").exists()


def test_verbose_reports_progress(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    seqs = ["ACDE", "ACDE", "ACDF"]
    names = ["a", "b", "c"]
    result = iterative_refinement(seqs, names, _initial(seqs, names), 1, True)
    out = capsys.readouterr().out
    assert "Initial CS Score" in out
    assert "Iteration 1" in out
    assert len(result.aligned) == 3
    assert len({len(row) for row in result.aligned}) == 1


def test_zero_iterations_keeps_initial(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    seqs = ["ACDE", "GHIK"]
    initial = _initial(seqs, ["a", "b"])
    assert iterative_refinement(seqs, ["a", "b"], initial, 0, False) is initial