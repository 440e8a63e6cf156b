"""Pydantic models for data that crosses a file boundary.

The engine works on plain dataclasses (see ``types``); these models validate
the question bank on load and give exported reports a fixed shape.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class QuestionRecord(BaseModel):
    id: str = Field(min_length=1)
    text: str
    dimension: str
    is_reversed: bool = False


class FunctionScoreRow(BaseModel):
    name: str
    full_name: str
    description: str
    raw_score: float
    normalized_score: int
    interpretation: str


class TypeScoreRow(BaseModel):
    rank: int
    type: str
    score: float
    name: str


class StackRow(BaseModel):
    position: str
    function: str
    full_name: str
    raw_score: float
    normalized_score: int
    weight: float
    weighted_score: float


class ResultSummary(BaseModel):
    determined_type: str
    name: str
    description: str
    confidence: int
    second_best_type: str
    high_confidence: bool


class ConfidenceAnalysis(BaseModel):
    interpretation: str
    first_type_score: float
    second_type_score: float
    score_difference: float


class DiagnosticReport(BaseModel):
    timestamp: str
    result: ResultSummary
    function_scores: List[FunctionScoreRow]
    type_scores: List[TypeScoreRow]
    stack: List[StackRow]
    confidence_analysis: ConfidenceAnalysis
    meta: Dict[str, Any] = Field(default_factory=dict)
    answer_events: Optional[List[Dict[str, Any]]] = None
