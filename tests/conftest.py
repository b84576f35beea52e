"""Shared fixtures for the Interview Guide test suite."""

import json

import pytest

from interview_guide.core.answer_evaluator import AnswerEvaluator
from interview_guide.core.interview_orchestrator import InterviewOrchestrator
from interview_guide.core.question_generator import QuestionGenerator
from interview_guide.models.question import Question, QuestionType


RESUME = (
    "Jane Doe\n"
    "Backend engineer, 5 years of Java.\n"
    "Built an order service on Spring Boot with MySQL and Redis caching."
)


class FakeLLM:
    """Replays canned replies and records every prompt it receives."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def questions_reply(count: int, with_index_from: int | None = None, prose: bool = False) -> str:
    types = ["PROJECT", "mysql", "Redis", "java_basic", "JAVA_COLLECTION", "java-concurrent", "SPRING"]
    items = []
    for i in range(count):
        item = {
            "question": f"Generated question {i}",
            "type": types[i % len(types)],
            "category": f"Category {i % len(types)}",
        }
        if with_index_from is not None:
            item["index"] = i + with_index_from
        items.append(item)
    body = json.dumps({"questions": items})
    if prose:
        return f"Sure! Here are your questions:\n```json\n{body}\n```\nGood luck."
    return body


def evaluation_reply(scores: list[int], overall: int = 75, index_from: int = 0) -> str:
    return json.dumps({
        "overallScore": overall,
        "overallFeedback": "Solid fundamentals.",
        "strengths": ["Clear explanations"],
        "improvements": ["Go deeper on internals"],
        "questionEvaluations": [
            {
                "questionIndex": i + index_from,
                "score": score,
                "feedback": f"Feedback {i}",
                "referenceAnswer": f"Reference {i}",
                "keyPoints": [f"Point {i}a", f"Point {i}b"],
            }
            for i, score in enumerate(scores)
        ],
    })


def make_question(index: int, category: str = "MySQL", answer: str | None = "An answer") -> Question:
    return Question(
        index=index,
        text=f"Question {index}",
        type=QuestionType.MYSQL,
        category=category,
        user_answer=answer,
    )


@pytest.fixture
def resume_text() -> str:
    return RESUME


@pytest.fixture
def make_orchestrator():
    def _make(*replies) -> tuple[InterviewOrchestrator, FakeLLM]:
        llm = FakeLLM(*replies)
        orchestrator = InterviewOrchestrator(
            question_generator=QuestionGenerator(llm),
            answer_evaluator=AnswerEvaluator(llm),
        )
        return orchestrator, llm
    return _make
