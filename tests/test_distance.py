import pytest

from emdmsa.distance import compute_distance_matrix


def test_matrix_symmetric_with_zero_diagonal():
    seqs = ["ACDE", "ACDF", "WYV"]
    matrix = compute_distance_matrix(seqs, ["a", "b", "c"], None)
    assert len(matrix) == 3
    for i in range(3):
        assert matrix[i][i] == 0.0
        for j in range(3):
            assert matrix[i][j] == pytest.approx(matrix[j][i])


def test_identical_closer_than_different():
    matrix = compute_distance_matrix(["AC", "AC", "CA"], ["a", "b", "c"], None)
    assert matrix[0][1] < 0.0
    assert matrix[0][2] == 0.0
    assert matrix[0][1] < matrix[0][2]


def test_empty_sequence_gets_missing_distance():
    matrix = compute_distance_matrix(["", "AC"], ["a", "b"], None)
    assert matrix[0][1] == 1e6


def test_writes_csv(tmp_path):
    path = tmp_path / "dist.csv"
    matrix = compute_distance_matrix(["AC", "CA"], ["s1", "s2"], path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Seq1,Seq2,EMD"
    assert lines[1] == f"s1,s2,{matrix[0][1]:g}"
    assert len(lines) == 2


def test_default_csv_location(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    matrix = compute_distance_matrix(["A", "C"], ["p", "q"])
    assert len(matrix) == 2
    content = (tmp_path / "emd_distance_matrix.csv").read_text(encoding="utf-8")
    assert content == f"Seq1,Seq2,EMD\np,q,{matrix[0][1]:g}\n"


def test_no_csv_when_path_none(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    matrix = compute_distance_matrix(["A", "C"], ["p", "q"], None)
    assert matrix == [[0.0, 0.0], [0.0, 0.0]]
    assert list(tmp_path.iterdir()) == []