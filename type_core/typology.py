"""Static typology tables: function descriptions, type stacks and profiles.

The tables are process-wide constants.  ``validate_tables`` runs at import so a
malformed edit fails loudly before any session is created.
"""
from __future__ import annotations

from typing import Dict, Mapping, Sequence, Tuple

from .config import STACK_WEIGHTS
from .errors import ConfigurationError
from .types import Category, Dimension

__all__ = [
    "FUNCTION_INFO",
    "COGNITIVE_STACKS",
    "TYPE_PROFILES",
    "STACK_POSITIONS",
    "validate_tables",
]

D = Dimension
C = Category

FUNCTION_INFO: Dict[Dimension, Dict[str, str]] = {
    D.Ni: {"full_name": "Introverted Intuition", "description": "Insight and foresight"},
    D.Ne: {"full_name": "Extraverted Intuition", "description": "Exploring possibilities"},
    D.Si: {"full_name": "Introverted Sensing", "description": "Experience and tradition"},
    D.Se: {"full_name": "Extraverted Sensing", "description": "Present-moment experience"},
    D.Ti: {"full_name": "Introverted Thinking", "description": "Logical analysis"},
    D.Te: {"full_name": "Extraverted Thinking", "description": "Efficient execution"},
    D.Fi: {"full_name": "Introverted Feeling", "description": "Personal values"},
    D.Fe: {"full_name": "Extraverted Feeling", "description": "Harmony and empathy"},
}

COGNITIVE_STACKS: Dict[Category, Tuple[Dimension, ...]] = {
    C.INTJ: (D.Ni, D.Te, D.Fi, D.Se),
    C.INTP: (D.Ti, D.Ne, D.Si, D.Fe),
    C.ENTJ: (D.Te, D.Ni, D.Se, D.Fi),
    C.ENTP: (D.Ne, D.Ti, D.Fe, D.Si),
    C.INFJ: (D.Ni, D.Fe, D.Ti, D.Se),
    C.INFP: (D.Fi, D.Ne, D.Si, D.Te),
    C.ENFJ: (D.Fe, D.Ni, D.Se, D.Ti),
    C.ENFP: (D.Ne, D.Fi, D.Te, D.Si),
    C.ISTJ: (D.Si, D.Te, D.Fi, D.Ne),
    C.ISFJ: (D.Si, D.Fe, D.Ti, D.Ne),
    C.ESTJ: (D.Te, D.Si, D.Ne, D.Fi),
    C.ESFJ: (D.Fe, D.Si, D.Ne, D.Ti),
    C.ISTP: (D.Ti, D.Se, D.Ni, D.Fe),
    C.ISFP: (D.Fi, D.Se, D.Ni, D.Te),
    C.ESTP: (D.Se, D.Ti, D.Fe, D.Ni),
    C.ESFP: (D.Se, D.Fi, D.Te, D.Ni),
}

TYPE_PROFILES: Dict[Category, Dict[str, str]] = {
    C.INTJ: {"name": "Architect", "description": "A strategic perfectionist with inventive insight."},
    C.INTP: {"name": "Logician", "description": "A thinker driven by intellectual curiosity."},
    C.ENTJ: {"name": "Commander", "description": "A leader who steers organisations by a clear vision."},
    C.ENTP: {"name": "Debater", "description": "An innovator chasing new possibilities through creative ideas."},
    C.INFJ: {"name": "Advocate", "description": "An idealistic visionary with deep insight."},
    C.INFP: {"name": "Mediator", "description": "A sincere and passionate idealist."},
    C.ENFJ: {"name": "Protagonist", "description": "A charismatic leader who inspires and guides people."},
    C.ENFP: {"name": "Campaigner", "description": "A free, creative and enthusiastic explorer."},
    C.ISTJ: {"name": "Logistician", "description": "A responsible and dependable practitioner."},
    C.ISFJ: {"name": "Defender", "description": "A warm and devoted protector."},
    C.ESTJ: {"name": "Executive", "description": "A practical leader who values order and efficiency."},
    C.ESFJ: {"name": "Consul", "description": "A sociable and caring helper."},
    C.ISTP: {"name": "Virtuoso", "description": "A realistic problem solver who reacts quickly."},
    C.ISFP: {"name": "Adventurer", "description": "A flexible and artistic explorer."},
    C.ESTP: {"name": "Entrepreneur", "description": "A bold, action-oriented doer."},
    C.ESFP: {"name": "Entertainer", "description": "A cheerful and sociable performer."},
}

STACK_POSITIONS: Tuple[str, ...] = ("Dominant", "Auxiliary", "Tertiary", "Inferior")


def validate_tables(
    stacks: Mapping[Category, Sequence[Dimension]],
    weights: Sequence[float] = STACK_WEIGHTS,
    profiles: Mapping[Category, object] | None = None,
) -> None:
    """Raise ``ConfigurationError`` unless the stack and weight tables are well formed."""

    if len(weights) != len(STACK_POSITIONS):
        raise ConfigurationError(f"expected {len(STACK_POSITIONS)} stack weights, got {len(weights)}")
    for hi, lo in zip(weights, weights[1:]):
        if not hi > lo:
            raise ConfigurationError("stack weights must be strictly decreasing", detail=list(weights))
    if set(stacks) != set(Category) or len(stacks) != len(Category):
        missing = sorted(c.value for c in set(Category) - set(stacks))
        raise ConfigurationError("stack table must define all 16 categories", detail={"missing": missing})
    for cat, stack in stacks.items():
        if len(stack) != len(STACK_POSITIONS):
            raise ConfigurationError(f"{cat.value} stack must have exactly 4 functions", detail=list(stack))
        if any(not isinstance(d, Dimension) for d in stack):
            raise ConfigurationError(f"{cat.value} stack names an unknown function", detail=list(stack))
        if len(set(stack)) != len(stack):
            raise ConfigurationError(f"{cat.value} stack repeats a function", detail=list(stack))
    if profiles is not None and set(profiles) != set(Category):
        raise ConfigurationError("type profile table must cover all 16 categories")


validate_tables(COGNITIVE_STACKS, STACK_WEIGHTS, TYPE_PROFILES)
if set(FUNCTION_INFO) != set(Dimension):
    raise ConfigurationError("function table must cover all 8 functions")
