"""
Core business logic modules for Interview Guide

Contains:
- Distribution planning: per-category question quotas
- Response parsing: JSON extraction from LLM replies
- LLM client: chat completion transport
- Question generation and answer evaluation
- Reconciliation of reports onto stored answers
- Interview Orchestrator: session lifecycle
"""

from interview_guide.core.distribution import plan
from interview_guide.core.response_parser import extract_json, parse_response
from interview_guide.core.llm_client import LLMClient
from interview_guide.core.question_generator import QuestionGenerator
from interview_guide.core.answer_evaluator import AnswerEvaluator
from interview_guide.core.reconciler import reconcile
from interview_guide.core.interview_orchestrator import InterviewOrchestrator

__all__ = [
    "plan",
    "extract_json",
    "parse_response",
    "LLMClient",
    "QuestionGenerator",
    "AnswerEvaluator",
    "reconcile",
    "InterviewOrchestrator",
]
