# type_core/reporting.py
from __future__ import annotations
import json
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

from .classifier import DEFAULT_CLASSIFIER, TypeClassifier, coerce_scores, is_confident
from .normalizer import normalize, strength_label
from .report_html import export_report_html
from .schemas import DiagnosticReport
from .typology import FUNCTION_INFO, TYPE_PROFILES
from .types import AnswerEvent

HIGH_CONFIDENCE_TEXT = "The result is reliable."
LOW_CONFIDENCE_TEXT = "You show traits of several types; consider the runner-up type as well."


# -------- utils: make any object JSON-safe ----------
def _to_basic(x: Any) -> Any:
    if isinstance(x, Enum):
        return x.value
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, dict):
        return {str(_to_basic(k)): _to_basic(v) for k, v in x.items()}
    if isinstance(x, (list, tuple, set)):
        return [_to_basic(v) for v in x]
    if is_dataclass(x) and not isinstance(x, type):
        return _to_basic(asdict(x))
    if hasattr(x, "model_dump"):
        return _to_basic(x.model_dump())
    return str(x)


def build_report(
    scores: Optional[Mapping[object, object]],
    *,
    classifier: Optional[TypeClassifier] = None,
    meta: Optional[Dict[str, object]] = None,
    events: Optional[Iterable[AnswerEvent]] = None,
) -> Dict[str, Any]:
    """
    Full diagnostic report for a raw function-score vector.

    Holds the winning type with confidence and runner-up, every function's
    raw and 0-100 score (strongest first), the 16-type ranking and the
    winner's stack breakdown.  Validated through ``DiagnosticReport``.
    """
    clf = classifier or DEFAULT_CLASSIFIER
    vec = coerce_scores(scores)
    res = clf.classify(vec)
    top, second = res.top_category, res.runner_up_category

    functions = []
    for dim, raw in vec.items():
        n = normalize(raw)
        functions.append({
            "name": dim.value,
            "full_name": FUNCTION_INFO[dim]["full_name"],
            "description": FUNCTION_INFO[dim]["description"],
            "raw_score": round(raw, 2),
            "normalized_score": n,
            "interpretation": strength_label(n),
        })
    functions.sort(key=lambda r: r["normalized_score"], reverse=True)

    type_rows = [
        {"rank": idx, "type": cat.value, "score": round(total, 2), "name": TYPE_PROFILES[cat]["name"]}
        for idx, (cat, total) in enumerate(res.category_scores.items(), start=1)
    ]

    confident = is_confident(res)
    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "result": {
            "determined_type": top.value,
            "name": TYPE_PROFILES[top]["name"],
            "description": TYPE_PROFILES[top]["description"],
            "confidence": res.confidence,
            "second_best_type": second.value,
            "high_confidence": confident,
        },
        "function_scores": functions,
        "type_scores": type_rows,
        "stack": clf.stack_breakdown(top, vec),
        "confidence_analysis": {
            "interpretation": HIGH_CONFIDENCE_TEXT if confident else LOW_CONFIDENCE_TEXT,
            "first_type_score": res.top_score,
            "second_type_score": res.runner_up_score,
            "score_difference": round(res.top_score - res.runner_up_score, 2),
        },
        "meta": dict(meta or {}),
        "answer_events": [_to_basic(e) for e in events] if events is not None else None,
    }
    return DiagnosticReport.model_validate(payload).model_dump()


# -------- public API used by the CLI and autoplay ----------
def write_report(report: Dict[str, Any], out_path: str) -> str:
    """
    Writes the HTML report to out_path and a JSON sidecar next to it.
    Returns out_path.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    export_report_html(report, str(out))

    sidecar = out.with_suffix(".json")
    with sidecar.open("w", encoding="utf-8") as f:
        json.dump(_to_basic(report), f, ensure_ascii=False, indent=2)
    return str(out)
