"""Stack-weighted type classification.

Every category owns an ordered stack of four functions.  A category's total is
the weighted sum of the respondent's raw function scores along its stack
(weights 4, 2, 1, 0.5 for dominant to inferior).  The highest total wins; the
gap to the runner-up, relative to their combined magnitude, is the confidence.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, List, Mapping, Optional, Sequence

from . import config
from .normalizer import normalize
from .typology import COGNITIVE_STACKS, FUNCTION_INFO, STACK_POSITIONS, validate_tables
from .types import Category, ClassificationResult, Dimension, ScoreVector

log = logging.getLogger(__name__)

__all__ = [
    "TypeClassifier",
    "classify",
    "coerce_scores",
    "rank_categories",
    "stack_breakdown",
    "mock_scores",
    "validate_scores",
    "is_confident",
]


def _as_number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    f = float(value)
    return f if math.isfinite(f) else 0.0


def coerce_scores(scores: Optional[Mapping[object, object]]) -> ScoreVector:
    """Return a full eight-key vector; missing, unknown or non-numeric entries score 0."""

    out: ScoreVector = {d: 0.0 for d in Dimension}
    if not isinstance(scores, Mapping):
        if scores is not None:
            log.warning("score vector is not a mapping (%s); treating as all zero", type(scores).__name__)
        return out
    for key, value in scores.items():
        dim = Dimension.parse(key)
        if dim is None:
            continue
        out[dim] = _as_number(value)
    return out


class TypeClassifier:
    """Classifier bound to one stack table and one weight vector.

    The tables are checked once here; ``classify`` itself never raises.
    """

    def __init__(
        self,
        stacks: Mapping[Category, Sequence[Dimension]] = COGNITIVE_STACKS,
        weights: Sequence[float] = config.STACK_WEIGHTS,
    ) -> None:
        validate_tables(stacks, weights)
        # declaration order of Category fixes the tie-break
        self.stacks: Dict[Category, tuple[Dimension, ...]] = {c: tuple(stacks[c]) for c in Category}
        self.weights: tuple[float, ...] = tuple(float(w) for w in weights)

    def category_totals(self, scores: Optional[Mapping[object, object]]) -> Dict[Category, float]:
        vec = coerce_scores(scores)
        totals: Dict[Category, float] = {}
        for cat, stack in self.stacks.items():
            totals[cat] = sum(vec[d] * w for d, w in zip(stack, self.weights))
        return totals

    def rank(self, scores: Optional[Mapping[object, object]]) -> List[tuple[Category, float]]:
        totals = self.category_totals(scores)
        # sorted() is stable, so equal totals keep declaration order
        return sorted(totals.items(), key=lambda kv: kv[1], reverse=True)

    def classify(self, scores: Optional[Mapping[object, object]]) -> ClassificationResult:
        ranked = self.rank(scores)
        (top, top_score), (second, second_score) = ranked[0], ranked[1]
        denom = abs(top_score) + abs(second_score) + config.CONFIDENCE_EPSILON
        raw_conf = 100.0 * (top_score - second_score) / denom
        clamped = max(float(config.CONFIDENCE_MIN), min(float(config.CONFIDENCE_MAX), raw_conf))
        confidence = int(math.floor(clamped + 0.5))
        return ClassificationResult(
            top_category=top,
            confidence=confidence,
            runner_up_category=second,
            category_scores=dict(ranked),
        )

    def stack_breakdown(self, category: Category, scores: Optional[Mapping[object, object]]) -> List[Dict[str, object]]:
        vec = coerce_scores(scores)
        rows: List[Dict[str, object]] = []
        for idx, (dim, weight) in enumerate(zip(self.stacks[category], self.weights)):
            raw = vec[dim]
            rows.append({
                "position": STACK_POSITIONS[idx],
                "function": dim.value,
                "full_name": FUNCTION_INFO[dim]["full_name"],
                "raw_score": raw,
                "normalized_score": normalize(raw),
                "weight": weight,
                "weighted_score": round(raw * weight, 2),
            })
        return rows


DEFAULT_CLASSIFIER = TypeClassifier()


def classify(
    scores: Optional[Mapping[object, object]],
    stacks: Optional[Mapping[Category, Sequence[Dimension]]] = None,
) -> ClassificationResult:
    clf = DEFAULT_CLASSIFIER if stacks is None else TypeClassifier(stacks)
    return clf.classify(scores)


def rank_categories(scores: Optional[Mapping[object, object]]) -> List[Dict[str, object]]:
    return [
        {"rank": idx, "type": cat.value, "score": total}
        for idx, (cat, total) in enumerate(DEFAULT_CLASSIFIER.rank(scores), start=1)
    ]


def stack_breakdown(category: Category, scores: Optional[Mapping[object, object]]) -> List[Dict[str, object]]:
    return DEFAULT_CLASSIFIER.stack_breakdown(category, scores)


def mock_scores(category: object) -> Optional[ScoreVector]:
    """Synthetic vector shaped like ``category``'s stack (15, 10, 5, -5; rest 0)."""
    cat = Category.parse(category)
    if cat is None:
        log.warning("mock_scores: unknown type %r", category)
        return None
    vec: ScoreVector = {d: 0.0 for d in Dimension}
    for dim, val in zip(COGNITIVE_STACKS[cat], (15.0, 10.0, 5.0, -5.0)):
        vec[dim] = val
    return vec


def validate_scores(scores: object) -> List[str]:
    """List the problems with a score vector; an empty list means it is complete."""
    if not isinstance(scores, Mapping):
        return ["scores is not a mapping"]
    by_dim = {Dimension.parse(k): v for k, v in scores.items()}
    errors: List[str] = []
    for dim in Dimension:
        if dim not in by_dim:
            errors.append(f"missing function {dim.value}")
            continue
        val = by_dim[dim]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            errors.append(f"{dim.value} score is not a number: {val!r}")
        elif not math.isfinite(float(val)):
            errors.append(f"{dim.value} score is not finite: {val!r}")
    return errors


def is_confident(result: ClassificationResult) -> bool:
    return result.confidence >= config.CONFIDENCE_HIGH_THRESHOLD
