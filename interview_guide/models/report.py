"""
Report models for Interview Guide

Defines the structure of the final interview report.
"""

from pydantic import BaseModel, Field

from interview_guide.models.evaluation import CategoryScore


class QuestionEvaluation(BaseModel):
    """A question together with the candidate's answer and its score."""

    question_index: int = Field(..., ge=0)
    question: str
    category: str
    user_answer: str | None = None
    score: int = Field(..., ge=0, le=100)
    feedback: str


class ReferenceAnswer(BaseModel):
    """Model answer and key points for one question."""

    question_index: int = Field(..., ge=0)
    question: str
    reference_answer: str = ""
    key_points: list[str] = Field(default_factory=list)


class InterviewReport(BaseModel):
    """Complete interview report."""

    session_id: str
    total_questions: int = Field(..., ge=0)

    # === SCORES ===
    overall_score: int = Field(..., ge=0, le=100)
    category_scores: list[CategoryScore] = Field(default_factory=list)
    question_details: list[QuestionEvaluation] = Field(default_factory=list)

    # === FEEDBACK ===
    overall_feedback: str
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    reference_answers: list[ReferenceAnswer] = Field(default_factory=list)

    # Set on the placeholder report served when evaluation failed
    evaluation_failed: bool = False
