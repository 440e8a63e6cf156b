from __future__ import annotations

import math
import random

import pytest

from type_core.classifier import (
    TypeClassifier,
    classify,
    coerce_scores,
    is_confident,
    mock_scores,
    rank_categories,
    stack_breakdown,
    validate_scores,
)
from type_core.typology import COGNITIVE_STACKS
from type_core.types import Category, Dimension

MOCK_VECTOR = {"Ni": 15, "Ne": -5, "Si": -10, "Se": -15, "Ti": 10, "Te": 5, "Fi": -5, "Fe": 0}


def _total(cat: Category, vec) -> float:
    v = coerce_scores(vec)
    return sum(v[d] * w for d, w in zip(COGNITIVE_STACKS[cat], (4.0, 2.0, 1.0, 0.5)))


def test_end_to_end_mock_vector():
    res = classify(MOCK_VECTOR)
    assert res.top_category is Category.INFJ
    assert res.runner_up_category is Category.INTJ
    assert res.category_scores[Category.INFJ] == pytest.approx(62.5)
    assert res.category_scores[Category.INTJ] == pytest.approx(57.5)
    others = [t for c, t in res.category_scores.items() if c is not res.top_category]
    assert all(res.top_score > t for t in others)
    # 100 * 5 / 120
    assert res.confidence == 4
    assert 0 <= res.confidence <= 100


def test_all_sixteen_totals_are_returned():
    res = classify(MOCK_VECTOR)
    assert set(res.category_scores) == set(Category)
    for cat, total in res.category_scores.items():
        assert total == pytest.approx(_total(cat, MOCK_VECTOR))


def test_zero_vector_ties_break_by_declaration_order():
    res = classify({})
    assert res.confidence == 0
    assert res.top_category is Category.INTJ
    assert res.runner_up_category is Category.INTP
    assert list(res.category_scores) == list(Category)


def test_equal_totals_keep_declaration_order_in_ranking():
    ranked = [row["type"] for row in rank_categories(MOCK_VECTOR)]
    # INFP/ISTJ tie at -37.5 and ISFJ/ISFP/ESTP at -32.5
    assert ranked.index("INFP") < ranked.index("ISTJ")
    assert ranked.index("ISFJ") < ranked.index("ISFP") < ranked.index("ESTP")
    assert ranked[0] == "INFJ" and ranked[-1] == "ESFP"


@pytest.mark.parametrize("seed", range(30))
def test_total_order_and_confidence_bounds_for_random_vectors(seed):
    r = random.Random(seed)
    vec = {d: r.uniform(-20, 20) for d in Dimension}
    res = classify(vec)
    totals = res.category_scores
    assert all(res.top_score >= t for t in totals.values())
    assert all(res.runner_up_score >= t for c, t in totals.items() if c is not res.top_category)
    assert 0 <= res.confidence <= 100


def test_missing_unknown_and_bad_values_count_as_zero():
    vec = {"Ni": 10, "Zz": 100, Dimension.Te: "high", "Fi": float("nan"), "Se": True}
    coerced = coerce_scores(vec)
    assert coerced[Dimension.Ni] == 10.0
    assert coerced[Dimension.Te] == 0.0
    assert coerced[Dimension.Fi] == 0.0
    assert coerced[Dimension.Se] == 0.0
    res = classify(vec)
    assert res.category_scores == classify({"Ni": 10}).category_scores


def test_non_mapping_input_is_treated_as_zero_vector():
    res = classify(None)
    assert res.confidence == 0
    assert classify([1, 2, 3]).top_category is Category.INTJ


@pytest.mark.parametrize("cat", list(Category))
def test_mock_scores_classify_as_their_type(cat):
    res = classify(mock_scores(cat))
    assert res.top_category is cat
    assert is_confident(res) in (True, False)


def test_mock_scores_unknown_type_returns_none():
    assert mock_scores("XXXX") is None
    assert mock_scores("intj")[Dimension.Ni] == 15.0


def test_negative_totals_still_produce_bounded_confidence():
    vec = {d: -20.0 for d in Dimension}
    res = classify(vec)
    assert res.confidence == 0
    vec[Dimension.Ni] = -5.0
    res = classify(vec)
    assert 0 <= res.confidence <= 100


def test_stack_breakdown_rows():
    rows = stack_breakdown(Category.INTJ, MOCK_VECTOR)
    assert [r["function"] for r in rows] == ["Ni", "Te", "Fi", "Se"]
    assert [r["position"] for r in rows] == ["Dominant", "Auxiliary", "Tertiary", "Inferior"]
    assert rows[0]["weighted_score"] == pytest.approx(60.0)
    assert rows[3]["normalized_score"] == 13


def test_validate_scores_reports_problems():
    assert validate_scores({d.value: 0.0 for d in Dimension}) == []
    errs = validate_scores({"Ni": "x", "Ne": math.inf})
    assert any("Ni score is not a number" in e for e in errs)
    assert any("Ne score is not finite" in e for e in errs)
    assert any("missing function Fe" in e for e in errs)
    assert validate_scores(None) == ["scores is not a mapping"]


def test_custom_stack_table_is_used():
    swapped = dict(COGNITIVE_STACKS)
    swapped[Category.INTJ], swapped[Category.INFJ] = COGNITIVE_STACKS[Category.INFJ], COGNITIVE_STACKS[Category.INTJ]
    res = classify(MOCK_VECTOR, swapped)
    assert res.top_category is Category.INTJ
    assert TypeClassifier(swapped).classify(MOCK_VECTOR).top_category is Category.INTJ
