"""
Data models and schemas for Interview Guide

Contains Pydantic models for:
- Questions and question distributions
- Evaluation results
- Report data
- Interview sessions and stored answers
- Fallback content tables
"""

from interview_guide.models.question import Question, QuestionDistribution, QuestionType
from interview_guide.models.evaluation import CategoryScore, EvaluationItem
from interview_guide.models.report import (
    InterviewReport,
    QuestionEvaluation,
    ReferenceAnswer,
)
from interview_guide.models.interview import (
    InterviewAnswer,
    InterviewSession,
    SessionStatus,
    SubmitAnswerResult,
)
from interview_guide.models.question_bank import (
    DEFAULT_EVALUATION_FALLBACK,
    DEFAULT_QUESTION_BANK,
    EvaluationFallbackText,
    QuestionBank,
    QuestionBankEntry,
)

__all__ = [
    # Question
    "Question",
    "QuestionDistribution",
    "QuestionType",
    # Evaluation
    "CategoryScore",
    "EvaluationItem",
    # Report
    "InterviewReport",
    "QuestionEvaluation",
    "ReferenceAnswer",
    # Interview
    "InterviewAnswer",
    "InterviewSession",
    "SessionStatus",
    "SubmitAnswerResult",
    # Fallback content
    "DEFAULT_EVALUATION_FALLBACK",
    "DEFAULT_QUESTION_BANK",
    "EvaluationFallbackText",
    "QuestionBank",
    "QuestionBankEntry",
]
