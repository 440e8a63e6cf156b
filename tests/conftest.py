from __future__ import annotations

import random

import pytest

from type_core.question_bank import DIMENSIONS
from type_core.types import Dimension, Question


def build_synthetic_bank(
    *,
    dimensions: list[Dimension] | None = None,
    per_dimension: int = 3,
    reversed_every: int = 0,
) -> list[Question]:
    """Create a deterministic synthetic bank for tests and smoke runs.

    ``reversed_every=n`` marks every n-th question of a dimension as reversed.
    """

    items: list[Question] = []
    target = dimensions or list(DIMENSIONS)
    for dim in target:
        for idx in range(per_dimension):
            items.append(
                Question(
                    id=f"{dim.value}_{idx}",
                    text=f"{dim.value} statement #{idx}",
                    dimension=dim,
                    is_reversed=bool(reversed_every) and (idx + 1) % reversed_every == 0,
                )
            )
    return items


@pytest.fixture
def synthetic_bank() -> list[Question]:
    return build_synthetic_bank()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
