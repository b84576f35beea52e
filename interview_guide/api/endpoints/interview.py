"""
Interview API endpoints

Handles interview session lifecycle:
- Creating sessions
- Fetching the current question
- Submitting answers
- Generating the report
- Listing the scored answer records

Domain errors are translated to HTTP status codes by the handlers in
interview_guide.api.errors.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from interview_guide.api.dependencies import get_orchestrator
from interview_guide.config.settings import get_settings
from interview_guide.core.interview_orchestrator import InterviewOrchestrator
from interview_guide.models.interview import (
    InterviewAnswer,
    InterviewSession,
    SubmitAnswerResult,
)
from interview_guide.models.question import Question
from interview_guide.models.report import InterviewReport

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class CreateSessionRequest(BaseModel):
    """Request model for creating an interview session."""
    resume_text: str
    question_count: int | None = None


class SessionResponse(BaseModel):
    """Response model describing a session."""
    session_id: str
    status: str
    total_questions: int
    current_question_index: int
    questions: list[Question]


class SubmitAnswerRequest(BaseModel):
    """Request model for submitting an answer."""
    session_id: str
    question_index: int = Field(..., ge=0)
    answer: str


def _to_session_response(session: InterviewSession) -> SessionResponse:
    return SessionResponse(
        session_id=session.session_id,
        status=session.status.value,
        total_questions=session.total_questions,
        current_question_index=session.current_question_index,
        questions=session.questions,
    )


# ============================================================================
# REST ENDPOINTS
# ============================================================================

@router.post("/session", response_model=SessionResponse)
async def create_session(
    request: CreateSessionRequest,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> SessionResponse:
    """
    Create a new interview session.

    Generates the question list from the resume.
    """
    settings = get_settings()
    question_count = request.question_count
    if question_count is None:
        question_count = settings.default_question_count

    if question_count > settings.max_question_count:
        raise HTTPException(
            status_code=400,
            detail=f"question_count must be between 1 and {settings.max_question_count}",
        )

    session = await orchestrator.create_session(request.resume_text, question_count)
    return _to_session_response(session)


@router.get("/session/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> SessionResponse:
    """Get a session with its questions."""
    return _to_session_response(orchestrator.get_session(session_id))


@router.get("/session/{session_id}/question")
async def get_current_question(
    session_id: str,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> dict[str, Any]:
    """Get the next question to answer."""
    question = orchestrator.get_current_question(session_id)

    if question is None:
        return {
            "completed": True,
            "message": "All questions have been answered",
        }
    return {
        "completed": False,
        "question": question.model_dump(mode="json"),
    }


@router.post("/answer", response_model=SubmitAnswerResult)
async def submit_answer(
    request: SubmitAnswerRequest,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> SubmitAnswerResult:
    """Submit the answer to a question."""
    return await orchestrator.submit_answer(
        session_id=request.session_id,
        question_index=request.question_index,
        answer=request.answer,
    )


@router.get("/session/{session_id}/report", response_model=InterviewReport)
async def get_report(
    session_id: str,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> InterviewReport:
    """
    Get the interview report.

    Evaluates the session on first request; later requests return the
    stored report.
    """
    return await orchestrator.generate_report(session_id)


@router.get("/session/{session_id}/answers", response_model=list[InterviewAnswer])
async def get_answers(
    session_id: str,
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
) -> list[InterviewAnswer]:
    """
    Get the stored answer records of a session.

    After evaluation each record carries its score, feedback, reference
    answer and key points.
    """
    return orchestrator.get_answers(session_id)
