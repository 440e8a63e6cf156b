from __future__ import annotations

import pytest

from type_core.classifier import TypeClassifier
from type_core.config import STACK_WEIGHTS
from type_core.errors import ConfigurationError
from type_core.typology import COGNITIVE_STACKS, FUNCTION_INFO, TYPE_PROFILES, validate_tables
from type_core.types import Category, Dimension


def test_shipped_tables_are_well_formed():
    validate_tables(COGNITIVE_STACKS, STACK_WEIGHTS, TYPE_PROFILES)
    assert len(COGNITIVE_STACKS) == 16
    assert set(FUNCTION_INFO) == set(Dimension)
    assert list(STACK_WEIGHTS) == [4.0, 2.0, 1.0, 0.5]


def test_each_stack_pairs_perceiving_and_judging_functions():
    perceiving = {Dimension.Ni, Dimension.Ne, Dimension.Si, Dimension.Se}
    for cat, stack in COGNITIVE_STACKS.items():
        dom, aux = stack[0], stack[1]
        assert (dom in perceiving) != (aux in perceiving), cat


def test_missing_category_is_rejected():
    partial = dict(COGNITIVE_STACKS)
    partial.pop(Category.ESFP)
    with pytest.raises(ConfigurationError):
        TypeClassifier(partial)


@pytest.mark.parametrize(
    "stack",
    [
        (Dimension.Ni, Dimension.Te, Dimension.Fi),
        (Dimension.Ni, Dimension.Ni, Dimension.Fi, Dimension.Se),
        (Dimension.Ni, Dimension.Te, Dimension.Fi, "Qq"),
    ],
)
def test_malformed_stacks_are_rejected(stack):
    bad = dict(COGNITIVE_STACKS)
    bad[Category.INTJ] = stack
    with pytest.raises(ConfigurationError):
        validate_tables(bad)


@pytest.mark.parametrize("weights", [(4.0, 2.0, 2.0, 0.5), (4.0, 2.0, 1.0), (0.5, 1.0, 2.0, 4.0)])
def test_weights_must_be_four_strictly_decreasing(weights):
    with pytest.raises(ConfigurationError):
        TypeClassifier(COGNITIVE_STACKS, weights)
