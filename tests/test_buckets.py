import pandas as pd
import pytest

from buckets import classify, classify_series
from constants import BUCKET_LABELS


@pytest.mark.parametrize("minutes, label", [
    (0, "0-15 mins"),
    (15, "0-15 mins"),
    (16, "15-25 mins"),
    (25, "15-25 mins"),
    (26, "25+ mins"),
    (600, "25+ mins"),
])
def test_boundaries(minutes, label):
    assert classify(minutes) == label


def test_monotonic_over_range():
    ranks = [BUCKET_LABELS.index(classify(m)) for m in range(0, 200)]
    assert ranks == sorted(ranks)
    assert set(ranks) == {0, 1, 2}


def test_negative_rejected():
    with pytest.raises(ValueError):
        classify(-1)


def test_series_matches_scalar():
    minutes = pd.Series([0, 15, 16, 25, 26, 90], index=[10, 11, 12, 13, 14, 15])
    tiers = classify_series(minutes)
    assert list(tiers.index) == [10, 11, 12, 13, 14, 15]
    assert tiers.astype(str).tolist() == [classify(m) for m in minutes]
    assert list(tiers.cat.categories) == BUCKET_LABELS


def test_series_empty():
    assert classify_series(pd.Series([], dtype="int64")).empty
