"""
FastAPI exception handlers for Interview Guide.

Maps caller-visible domain errors onto HTTP status codes.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from interview_guide.core.exceptions import (
    EmptyInput,
    InterviewGuideError,
    QuestionNotFound,
    SessionNotFound,
    StateTransitionError,
)

logger = logging.getLogger(__name__)


STATUS_CODES: dict[type[InterviewGuideError], int] = {
    EmptyInput: 400,
    SessionNotFound: 404,
    QuestionNotFound: 404,
    StateTransitionError: 409,
}


async def interview_guide_exception_handler(request: Request, exc: InterviewGuideError):
    status_code = 500
    for error_type, code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            status_code = code
            break

    if status_code == 500:
        logger.error(f"Unhandled application error: {exc}", exc_info=exc)
    else:
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InterviewGuideError, interview_guide_exception_handler)
