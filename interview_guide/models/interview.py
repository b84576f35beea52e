"""
Interview session and answer models for Interview Guide
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from interview_guide.models.question import Question
from interview_guide.models.report import InterviewReport


class SessionStatus(str, Enum):
    """Interview session lifecycle states. Transitions only move forward."""

    CREATED = "CREATED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    EVALUATED = "EVALUATED"


class InterviewAnswer(BaseModel):
    """Persisted record of one answered question."""

    question_index: int = Field(..., ge=0)
    question: str
    category: str
    user_answer: str | None = None

    # Filled in by evaluation
    score: int = Field(default=0, ge=0, le=100)
    feedback: str | None = None
    reference_answer: str | None = None
    key_points: list[str] = Field(default_factory=list)

    answered_at: datetime = Field(default_factory=datetime.utcnow)


class InterviewSession(BaseModel):
    """Complete interview session state."""

    # Identification
    session_id: str = Field(default_factory=lambda: uuid4().hex)

    # Input
    resume_text: str
    total_questions: int = Field(..., ge=0)

    # State
    status: SessionStatus = Field(default=SessionStatus.CREATED)
    current_question_index: int = 0
    questions: list[Question] = Field(default_factory=list)

    # Timing
    created_at: datetime = Field(default_factory=datetime.utcnow)
    completed_at: datetime | None = None

    # Result
    report: InterviewReport | None = None

    def get_current_question(self) -> Question | None:
        """Get the next unanswered question, or None when all are answered."""
        if self.current_question_index < len(self.questions):
            return self.questions[self.current_question_index]
        return None

    def find_question(self, question_index: int) -> Question | None:
        for question in self.questions:
            if question.index == question_index:
                return question
        return None


class SubmitAnswerResult(BaseModel):
    """Outcome of recording an answer."""

    has_next_question: bool
    next_question: Question | None = None
    current_index: int
    total_questions: int
