# type_core/normalizer.py
from __future__ import annotations
import math

from .config import NORM_RAW_MIN, NORM_RAW_MAX, NORM_OUT_MIN, NORM_OUT_MAX


def normalize(raw: float) -> int:
    """Map a raw function score from [-20, 20] onto the 0-100 display scale."""
    try:
        r = float(raw)
    except (TypeError, ValueError):
        r = 0.0
    if math.isnan(r):
        r = 0.0
    span = NORM_RAW_MAX - NORM_RAW_MIN
    scaled = (r - NORM_RAW_MIN) / span * (NORM_OUT_MAX - NORM_OUT_MIN) + NORM_OUT_MIN
    clamped = max(float(NORM_OUT_MIN), min(float(NORM_OUT_MAX), scaled))
    return int(math.floor(clamped + 0.5))


def strength_label(normalized: float) -> str:
    s = float(normalized)
    if s >= 75: return "very strong"
    if s >= 60: return "strong"
    if s >= 40: return "average"
    if s >= 25: return "weak"
    return "very weak"
