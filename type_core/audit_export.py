"""Helpers to export the per-answer audit trail in JSON/CSV formats."""
from __future__ import annotations

from typing import Iterable, List, Dict, Any
import csv
import io

_FIELDS: tuple[str, ...] = (
    "t",
    "question_id",
    "dimension",
    "value",
    "is_reversed",
    "previous_value",
    "delta",
    "score_after",
)


def _normalize_event(event: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key in _FIELDS:
        val = event.get(key)
        if key == "value":
            try:
                out[key] = int(val)
            except (TypeError, ValueError):
                out[key] = 0
        elif key == "previous_value":
            try:
                out[key] = int(val) if val is not None else ""
            except (TypeError, ValueError):
                out[key] = ""
        elif key in {"delta", "score_after"}:
            try:
                out[key] = round(float(val), 4)
            except (TypeError, ValueError):
                out[key] = 0.0
        elif key == "is_reversed":
            out[key] = bool(val)
        else:
            out[key] = "" if val is None else str(val)
    return out


def _as_dict(event: Any) -> Dict[str, Any]:
    if isinstance(event, dict):
        return event
    return dict(vars(event)) if hasattr(event, "__dict__") else {}


def to_json(events: Iterable[Any]) -> Dict[str, Any]:
    """Return a JSON-safe payload for audit export."""

    normalized: List[Dict[str, Any]] = [_normalize_event(_as_dict(evt or {})) for evt in events]
    return {"events": normalized}


def to_csv(events: Iterable[Any]) -> str:
    """Render answer events as CSV with a fixed header."""

    normalized = [_normalize_event(_as_dict(evt or {})) for evt in events]
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_FIELDS)
    writer.writeheader()
    for row in normalized:
        writer.writerow(row)
    return buf.getvalue()


__all__ = ["to_json", "to_csv"]
