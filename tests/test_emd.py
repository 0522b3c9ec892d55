import pytest

from emdmsa.blosum import AA_INDEX, AA_SIZE
from emdmsa.emd import MISSING_DISTANCE, calculate_emd


def one_hot(symbol, weight=1.0):
    dist = [0.0] * AA_SIZE
    dist[AA_INDEX[symbol]] = weight
    return dist


def test_wrong_size_raises():
    with pytest.raises(ValueError):
        calculate_emd([1.0] * 20, [1.0] * 21)


def test_zero_distribution_returns_missing():
    assert calculate_emd([0.0] * AA_SIZE, one_hot("A")) == MISSING_DISTANCE
    assert calculate_emd(one_hot("A"), [0.0] * AA_SIZE) == 1e6


def test_identical_residues_negative():
    value = calculate_emd(one_hot("A"), one_hot("A"))
    assert -1.0 < value < 0.0


def test_different_residues_neutral():
    assert calculate_emd(one_hot("A"), one_hot("C")) == 0.0


def test_residue_against_gap_positive():
    value = calculate_emd(one_hot("L"), one_hot("-"))
    assert 0.0 < value < 1.0


def test_scale_invariant():
    dist = one_hot("A")
    dist[AA_INDEX["C"]] = 0.5
    scaled = [v * 3 for v in dist]
    assert calculate_emd(dist, one_hot("A")) == pytest.approx(
        calculate_emd(scaled, one_hot("A", 7.0))
    )


def test_identical_more_similar_than_gap():
    assert calculate_emd(one_hot("W"), one_hot("W")) < calculate_emd(
        one_hot("W"), one_hot("-")
    )