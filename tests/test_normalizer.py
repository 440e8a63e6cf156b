from __future__ import annotations

import pytest

from type_core.normalizer import normalize, strength_label


@pytest.mark.parametrize(
    "raw,expected",
    [(-20, 0), (0, 50), (20, 100), (-999, 0), (999, 100), (10, 75), (-10, 25)],
)
def test_normalize_boundaries(raw, expected):
    assert normalize(raw) == expected


def test_normalize_rounds_and_returns_int():
    assert normalize(0.25) == 51
    assert normalize(-0.25) == 49
    assert isinstance(normalize(3.3), int)
    assert 0 <= normalize(float("inf")) <= 100
    assert normalize(float("nan")) == 50


def test_strength_labels_follow_bands():
    assert strength_label(80) == "very strong"
    assert strength_label(75) == "very strong"
    assert strength_label(60) == "strong"
    assert strength_label(50) == "average"
    assert strength_label(25) == "weak"
    assert strength_label(10) == "very weak"
