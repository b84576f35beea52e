"""
Question Generator for Interview Guide

Builds a resume-specific question set with a single LLM call. The LLM's
reply is treated as untrusted: question indices are assigned locally in
reply order and type tags are coerced onto QuestionType. When anything
goes wrong the built-in question bank is served instead.
"""

import logging
from typing import Any

from interview_guide.core.distribution import plan
from interview_guide.core.exceptions import EmptyInput, MalformedResponse
from interview_guide.core.llm_client import LLMClient
from interview_guide.core.response_parser import parse_response
from interview_guide.models.question import Question, QuestionType
from interview_guide.models.question_bank import DEFAULT_QUESTION_BANK, QuestionBank
from interview_guide.prompts.interviewer import InterviewerPrompts

logger = logging.getLogger(__name__)


class QuestionGenerator:
    """
    Generates the interview question list for a session.

    Holds only the LLM client and static tables, so one instance can serve
    any number of sessions concurrently.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        question_bank: QuestionBank = DEFAULT_QUESTION_BANK,
        prompts: InterviewerPrompts | None = None,
    ):
        """
        Initialize the generator.

        Args:
            llm_client: Client used for the completion call
            question_bank: Fallback questions served on failure
            prompts: Prompt templates
        """
        self.llm_client = llm_client
        self.question_bank = question_bank
        self.prompts = prompts or InterviewerPrompts()

    async def generate(self, resume_text: str, count: int) -> list[Question]:
        """
        Generate interview questions for a resume.

        Args:
            resume_text: Cleaned plain-text resume
            count: Requested number of questions

        Returns:
            Questions indexed 0..k-1 in the order the LLM listed them,
            or fallback bank questions if generation failed

        Raises:
            EmptyInput: If the resume is blank or count is not positive
        """
        if not resume_text or not resume_text.strip():
            raise EmptyInput("Resume text is empty")
        if count < 1:
            raise EmptyInput(f"Question count must be positive, got {count}")

        logger.info(f"Generating {count} questions | Resume length: {len(resume_text)}")

        try:
            distribution = plan(count)
            prompt = self.prompts.generate_questions_prompt(resume_text, count, distribution)

            response = await self.llm_client.complete(self.prompts.SYSTEM_CONTEXT, prompt)
            logger.debug(f"LLM response: {response}")

            questions = self._parse_questions(response)
            logger.info(f"Generated {len(questions)} questions")
            return questions

        except Exception as e:
            logger.error(f"Question generation failed, using fallback bank: {e}", exc_info=True)
            return self._get_fallback_questions(count)

    def _parse_questions(self, response: str) -> list[Question]:
        """Parse the LLM reply into questions with locally assigned indices."""
        data = parse_response(response)

        if not isinstance(data, dict):
            raise MalformedResponse("Question response is not a JSON object")

        items = data.get("questions")
        if not isinstance(items, list) or not items:
            raise MalformedResponse("Question response has no 'questions' array")

        questions = []
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise MalformedResponse(f"Question item {index} is not an object")

            questions.append(Question(
                index=index,
                text=self._required_text(item, "question", index),
                type=QuestionType.parse(item.get("type")),
                category=self._required_text(item, "category", index),
            ))

        return questions

    def _required_text(self, item: dict[str, Any], field: str, index: int) -> str:
        value = item.get(field)
        if value is None or isinstance(value, (dict, list)):
            raise MalformedResponse(f"Question item {index} is missing '{field}'")
        return str(value)

    def _get_fallback_questions(self, count: int) -> list[Question]:
        """Serve the first ``count`` questions from the built-in bank."""
        questions = self.question_bank.take(count)
        logger.warning(
            f"Serving {len(questions)} fallback questions "
            f"(bank version {self.question_bank.version})"
        )
        return questions
