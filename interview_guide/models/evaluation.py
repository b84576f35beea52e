"""
Evaluation models for Interview Guide

Per-question evaluation results and per-category score aggregates.
"""

from pydantic import BaseModel, Field


class EvaluationItem(BaseModel):
    """Evaluation of one answer, keyed by the session's own question index."""

    question_index: int = Field(..., ge=0)
    score: int = Field(..., ge=0, le=100)
    feedback: str
    reference_answer: str = ""
    key_points: list[str] = Field(default_factory=list)


class CategoryScore(BaseModel):
    """Aggregated score for one question category."""

    category: str
    average_score: int = Field(..., ge=0, le=100)
    question_count: int = Field(..., ge=1)

    @classmethod
    def from_scores(cls, category: str, scores: list[int]) -> "CategoryScore":
        """Build from raw scores using a truncating integer mean."""
        return cls(
            category=category,
            average_score=sum(scores) // len(scores),
            question_count=len(scores),
        )
