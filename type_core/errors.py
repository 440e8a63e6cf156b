"""Exception hierarchy for the quiz engine.

Recoverable input problems (an out-of-range Likert value handed to the pure
scorer, a question pointing at an unknown dimension) are logged and scored as
zero rather than raised.  The classes below cover the cases that callers are
expected to handle or that indicate a programming error.
"""
from __future__ import annotations

from typing import Any

__all__ = [
    "QuizError",
    "InvalidLikertValue",
    "SessionStateError",
    "ConfigurationError",
    "QuestionBankError",
]


class QuizError(Exception):
    """Base class for engine errors."""

    default_message: str = "Quiz engine error"

    def __init__(self, message: str | None = None, *, detail: Any | None = None) -> None:
        final_message = message or self.default_message
        super().__init__(final_message)
        self.message = final_message
        self.detail = detail


class InvalidLikertValue(QuizError, ValueError):
    """Raised when an answer is not an integer in 1..5."""

    default_message = "Likert value must be an integer in 1..5"


class SessionStateError(QuizError):
    """Raised when a session operation is called in a state that forbids it."""

    default_message = "Operation not allowed in the current session state"


class ConfigurationError(QuizError):
    """Raised eagerly when the static typology tables are malformed."""

    default_message = "Invalid typology configuration"


class QuestionBankError(QuizError):
    """Raised when the question bank cannot be loaded."""

    default_message = "Question bank could not be loaded"
