from __future__ import annotations
import logging
import math

from .config import (
    LIKERT_MIN,
    LIKERT_MAX,
    LIKERT_MIDPOINT,
    LIKERT_REVERSE_BASE,
    SCORE_EMPHASIS_EXPONENT,
)
from .errors import InvalidLikertValue

log = logging.getLogger(__name__)


def is_valid_likert(value: object) -> bool:
    # bool is an int subclass; a checkbox value is not a Likert answer
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return LIKERT_MIN <= value <= LIKERT_MAX


def check_likert(value: object) -> int:
    """Return ``value`` unchanged or raise ``InvalidLikertValue``."""
    if not is_valid_likert(value):
        raise InvalidLikertValue(
            f"Invalid Likert value: {value!r}. Expected integer {LIKERT_MIN}-{LIKERT_MAX}.",
            detail={"value": value},
        )
    return int(value)  # type: ignore[arg-type]


def score_item(value: object, is_reversed: bool = False) -> float:
    """
    Signed, power-law weighted score for one Likert answer.

    Reversed items are mirrored around the midpoint (5<->1, 4<->2) before the
    deviation from 3 is raised to ``SCORE_EMPHASIS_EXPONENT``, keeping its
    sign.  Invalid values are logged and score 0.0.
    """
    if not is_valid_likert(value):
        log.warning("Invalid Likert value %r; expected integer %d-%d, scoring 0", value, LIKERT_MIN, LIKERT_MAX)
        return 0.0
    v = int(value)  # type: ignore[arg-type]
    actual = LIKERT_REVERSE_BASE - v if is_reversed else v
    deviation = actual - LIKERT_MIDPOINT
    if deviation == 0:
        return 0.0
    return math.copysign(abs(deviation) ** SCORE_EMPHASIS_EXPONENT, deviation)
