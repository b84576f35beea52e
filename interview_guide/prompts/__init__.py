"""
AI prompt templates for Interview Guide

Contains structured prompts for:
- Question generation
- Interview evaluation
"""

from interview_guide.prompts.interviewer import InterviewerPrompts
from interview_guide.prompts.evaluator import EvaluatorPrompts

__all__ = [
    "InterviewerPrompts",
    "EvaluatorPrompts",
]
