"""
Custom exceptions for Interview Guide.

MalformedResponse and LlmUnavailable are recovered inside the question
generator and answer evaluator. The remaining errors reach the caller.
"""


class InterviewGuideError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# LLM ERRORS
# ============================================================================

class MalformedResponse(InterviewGuideError):
    """LLM text could not be interpreted as the required JSON shape."""
    pass


class LlmUnavailable(InterviewGuideError):
    """Transport or timeout failure while calling the LLM."""
    pass


# ============================================================================
# CALLER ERRORS
# ============================================================================

class EmptyInput(InterviewGuideError, ValueError):
    """Blank resume text or a zero question count was supplied."""
    pass


class SessionNotFound(InterviewGuideError):
    """No session exists for the given session ID."""
    pass


class QuestionNotFound(InterviewGuideError):
    """The session has no question with the given index."""
    pass


class StateTransitionError(InterviewGuideError):
    """Raised when an invalid session status transition is attempted."""
    pass
