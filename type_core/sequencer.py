"""Question ordering: a Fisher-Yates shuffle with a no-adjacent-function rule.

Consecutive questions should not probe the same cognitive function.  A fresh
uniform permutation is drawn until one satisfies the rule; after
``SHUFFLE_MAX_ATTEMPTS`` draws the last permutation is used as-is, so banks
that cannot satisfy the rule still get an ordering.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, TypeVar

from . import config
from .types import Question

log = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["fisher_yates", "has_adjacent_repeat", "shuffle_questions"]


def fisher_yates(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a uniformly shuffled copy of ``items``."""

    r = rng or random
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = r.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
    return out


def has_adjacent_repeat(questions: Sequence[Question]) -> bool:
    return any(
        questions[i].dimension == questions[i - 1].dimension for i in range(1, len(questions))
    )


def shuffle_questions(
    questions: Sequence[Question],
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> List[Question]:
    """Shuffle ``questions`` so no two neighbours share a dimension when possible.

    Parameters
    ----------
    questions:
        The bank in any order; it is not modified.
    rng:
        Source of randomness.  Defaults to a generator seeded from ``SEED``.
    max_attempts:
        Retry budget, ``SHUFFLE_MAX_ATTEMPTS`` when omitted.

    Returns
    -------
    list
        A permutation of ``questions``.  If the budget runs out the last draw
        is returned even though it violates the adjacency rule.
    """

    if len(questions) < 2:
        return list(questions)
    r = rng or config.make_rng()
    budget = max(1, int(max_attempts if max_attempts is not None else config.SHUFFLE_MAX_ATTEMPTS))
    shuffled: List[Question] = list(questions)
    for attempt in range(1, budget + 1):
        shuffled = fisher_yates(questions, r)
        if not has_adjacent_repeat(shuffled):
            log.debug("question order accepted after %d attempt(s)", attempt)
            return shuffled
    log.warning(
        "no ordering without adjacent repeats after %d attempts; using last permutation", budget
    )
    return shuffled
