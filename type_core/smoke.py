"""Quick end-to-end sanity check of the scoring model.

Run with ``python -m type_core.smoke``; exits 0 when every check passes.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, List, Tuple

from . import config
from .classifier import classify, mock_scores
from .scoring import score_item
from .typology import COGNITIVE_STACKS, FUNCTION_INFO, TYPE_PROFILES, validate_tables
from .types import Category

log = logging.getLogger(__name__)

SMOKE_VECTOR = {"Ni": 15, "Ne": -5, "Si": -10, "Se": -15, "Ti": 10, "Te": 5, "Fi": -5, "Fe": 0}


def _check_constants() -> None:
    validate_tables(COGNITIVE_STACKS, config.STACK_WEIGHTS, TYPE_PROFILES)
    assert 1.0 <= config.SCORE_EMPHASIS_EXPONENT <= 2.0, "emphasis exponent out of range"
    assert config.NORM_RAW_MIN < config.NORM_RAW_MAX, "normalization range is empty"
    assert config.NORM_OUT_MIN < config.NORM_OUT_MAX, "display range is empty"
    assert len(FUNCTION_INFO) == 8, "function table incomplete"


def _check_scoring() -> None:
    s5, s1 = score_item(5, False), score_item(1, False)
    assert s5 > 0 and s1 < 0, f"unexpected signs: score5={s5}, score1={s1}"
    log.info("positive score %.2f, negative score %.2f", s5, s1)


def _check_reversal() -> None:
    rev = score_item(5, True)
    assert rev < 0, f"reversed item not inverted: {rev}"
    log.info("reversed score %.2f", rev)


def _check_classification() -> None:
    res = classify(SMOKE_VECTOR)
    assert isinstance(res.top_category, Category)
    assert 0 <= res.confidence <= 100, f"confidence out of range: {res.confidence}"
    for cat in Category:
        mocked = classify(mock_scores(cat))
        assert mocked.top_category is cat, f"mock {cat.value} classified as {mocked.top_category.value}"
    log.info("classified %s with %d%% confidence", res.top_category.value, res.confidence)


CHECKS: List[Tuple[str, Callable[[], None]]] = [
    ("constants", _check_constants),
    ("scoring", _check_scoring),
    ("reversal", _check_reversal),
    ("classification", _check_classification),
]


def run_smoke() -> bool:
    ok = True
    for name, fn in CHECKS:
        try:
            fn()
        except (AssertionError, ValueError) as exc:
            log.error("smoke check %s failed: %s", name, exc)
            ok = False
        else:
            log.info("smoke check %s ok", name)
    return ok


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    return 0 if run_smoke() else 1


if __name__ == "__main__":  # pragma: no cover - developer utility
    sys.exit(main())
