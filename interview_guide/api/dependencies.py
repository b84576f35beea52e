"""
API Dependencies

Provides dependency injection for API endpoints.
Manages singleton instances of core components.
"""

from interview_guide.config.settings import get_settings
from interview_guide.core.answer_evaluator import AnswerEvaluator
from interview_guide.core.interview_orchestrator import InterviewOrchestrator
from interview_guide.core.llm_client import LLMClient
from interview_guide.core.question_generator import QuestionGenerator
from interview_guide.prompts.evaluator import EvaluatorPrompts


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_llm_client: LLMClient | None = None
_orchestrator: InterviewOrchestrator | None = None


def get_orchestrator() -> InterviewOrchestrator:
    """
    Get the interview orchestrator singleton.

    Lazily initializes all required components.
    """
    global _llm_client, _orchestrator

    if _orchestrator is None:
        settings = get_settings()
        _llm_client = LLMClient(settings)

        _orchestrator = InterviewOrchestrator(
            question_generator=QuestionGenerator(_llm_client),
            answer_evaluator=AnswerEvaluator(
                _llm_client,
                prompts=EvaluatorPrompts(resume_excerpt_chars=settings.resume_excerpt_chars),
            ),
        )

    return _orchestrator


async def cleanup():
    """Cleanup resources on shutdown."""
    global _llm_client, _orchestrator

    if _llm_client:
        await _llm_client.close()
        _llm_client = None

    _orchestrator = None
