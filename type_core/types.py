from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union


class Dimension(str, Enum):
    Ni = "Ni"; Ne = "Ne"; Si = "Si"; Se = "Se"
    Ti = "Ti"; Te = "Te"; Fi = "Fi"; Fe = "Fe"

    @classmethod
    def parse(cls, raw: object) -> Optional["Dimension"]:
        """Return the member for ``raw`` (member or name), or None if unknown."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip())
            except ValueError:
                return None
        return None


class Category(str, Enum):
    INTJ = "INTJ"; INTP = "INTP"; ENTJ = "ENTJ"; ENTP = "ENTP"
    INFJ = "INFJ"; INFP = "INFP"; ENFJ = "ENFJ"; ENFP = "ENFP"
    ISTJ = "ISTJ"; ISFJ = "ISFJ"; ESTJ = "ESTJ"; ESFJ = "ESFJ"
    ISTP = "ISTP"; ISFP = "ISFP"; ESTP = "ESTP"; ESFP = "ESFP"

    @classmethod
    def parse(cls, raw: object) -> Optional["Category"]:
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().upper())
            except ValueError:
                return None
        return None


class SessionState(str, Enum):
    AWAITING_ANSWER = "awaiting_answer"
    TRANSITIONING = "transitioning"
    COMPLETE = "complete"


ScoreVector = Dict[Dimension, float]


def empty_scores() -> ScoreVector:
    return {d: 0.0 for d in Dimension}


@dataclass(frozen=True)
class Question:
    # dimension stays a raw string when the bank names an unknown function
    id: str; text: str; dimension: Union[Dimension, str]
    is_reversed: bool = False


@dataclass
class Answer:
    question_id: str; value: int; is_reversed: bool = False


@dataclass
class AnswerEvent:
    t: str
    question_id: str
    dimension: str
    value: int
    is_reversed: bool
    previous_value: Optional[int]
    delta: float
    score_after: float


@dataclass(frozen=True)
class ClassificationResult:
    top_category: Category
    confidence: int
    runner_up_category: Category
    category_scores: Dict[Category, float] = field(default_factory=dict)

    @property
    def top_score(self) -> float:
        return self.category_scores.get(self.top_category, 0.0)

    @property
    def runner_up_score(self) -> float:
        return self.category_scores.get(self.runner_up_category, 0.0)
