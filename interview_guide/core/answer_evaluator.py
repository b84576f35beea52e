"""
Answer Evaluator for Interview Guide

Scores a finished interview with a single LLM call and assembles the
InterviewReport. Evaluations in the reply are matched to questions by
position: the questionIndex values the model writes are unreliable (some
replies count from 0, others from 1) and are ignored. Any failure yields a
zero-score error report instead of an exception.
"""

import logging
from typing import Any

from interview_guide.core.exceptions import EmptyInput, MalformedResponse
from interview_guide.core.llm_client import LLMClient
from interview_guide.core.response_parser import parse_response
from interview_guide.models.evaluation import CategoryScore, EvaluationItem
from interview_guide.models.question import Question
from interview_guide.models.question_bank import (
    DEFAULT_EVALUATION_FALLBACK,
    EvaluationFallbackText,
)
from interview_guide.models.report import (
    InterviewReport,
    QuestionEvaluation,
    ReferenceAnswer,
)
from interview_guide.prompts.evaluator import EvaluatorPrompts

logger = logging.getLogger(__name__)


MIN_SCORE = 0
MAX_SCORE = 100


class AnswerEvaluator:
    """
    Evaluates a complete interview transcript.

    Responsibilities:
    - Build the evaluation prompt from resume and transcript
    - Re-key LLM evaluations onto the session's question indices
    - Aggregate scores per category
    - Degrade to a deterministic error report on failure
    """

    def __init__(
        self,
        llm_client: LLMClient,
        prompts: EvaluatorPrompts | None = None,
        fallback_text: EvaluationFallbackText = DEFAULT_EVALUATION_FALLBACK,
    ):
        """
        Initialize the evaluator.

        Args:
            llm_client: Client used for the completion call
            prompts: Prompt templates
            fallback_text: Fixed texts of the error report
        """
        self.llm_client = llm_client
        self.prompts = prompts or EvaluatorPrompts()
        self.fallback_text = fallback_text

    # =========================================================================
    # EVALUATION
    # =========================================================================

    async def evaluate(
        self,
        session_id: str,
        resume_text: str,
        questions: list[Question],
    ) -> InterviewReport:
        """
        Evaluate all answers of a session and build the report.

        Args:
            session_id: Session being evaluated
            resume_text: Candidate resume (only an excerpt is sent)
            questions: Questions with attached user answers

        Returns:
            InterviewReport, or the error report if evaluation failed

        Raises:
            EmptyInput: If there are no questions to evaluate
        """
        if not questions:
            raise EmptyInput("No questions to evaluate")

        logger.info(f"Evaluating session {session_id}: {len(questions)} questions")

        try:
            prompt = self.prompts.generate_evaluation_prompt(resume_text or "", questions)
            response = await self.llm_client.complete(self.prompts.SYSTEM_CONTEXT, prompt)
            logger.debug(f"Evaluation response: {response}")

            report = self._parse_evaluation_response(session_id, response, questions)

            logger.info(
                f"Evaluation complete: session={session_id}, "
                f"overall_score={report.overall_score}, "
                f"evaluated={len(report.question_details)}/{len(questions)}"
            )
            return report

        except Exception as e:
            logger.error(f"Interview evaluation failed for {session_id}: {e}", exc_info=True)
            return self._create_error_report(session_id, questions)

    def _parse_evaluation_response(
        self,
        session_id: str,
        response: str,
        questions: list[Question],
    ) -> InterviewReport:
        """Parse the LLM reply into an InterviewReport."""
        data = parse_response(response)
        if not isinstance(data, dict):
            raise MalformedResponse("Evaluation response is not a JSON object")

        overall_score = self._read_score(data, "overallScore")
        overall_feedback = self._read_text(data, "overallFeedback")
        strengths = self._read_string_list(data.get("strengths"))
        improvements = self._read_string_list(data.get("improvements"))

        items = self._rekey_evaluations(data.get("questionEvaluations"), questions)

        question_details = []
        reference_answers = []
        category_scores_map: dict[str, list[int]] = {}

        for question, item in items:
            question_details.append(QuestionEvaluation(
                question_index=item.question_index,
                question=question.text,
                category=question.category,
                user_answer=question.user_answer,
                score=item.score,
                feedback=item.feedback,
            ))
            reference_answers.append(ReferenceAnswer(
                question_index=item.question_index,
                question=question.text,
                reference_answer=item.reference_answer,
                key_points=item.key_points,
            ))
            category_scores_map.setdefault(question.category, []).append(item.score)

        category_scores = [
            CategoryScore.from_scores(category, scores)
            for category, scores in category_scores_map.items()
        ]

        return InterviewReport(
            session_id=session_id,
            total_questions=len(questions),
            overall_score=overall_score,
            category_scores=category_scores,
            question_details=question_details,
            overall_feedback=overall_feedback,
            strengths=strengths,
            improvements=improvements,
            reference_answers=reference_answers,
        )

    def _rekey_evaluations(
        self,
        evaluations: Any,
        questions: list[Question],
    ) -> list[tuple[Question, EvaluationItem]]:
        """
        Pair evaluation entries with questions by position.

        Processes min(len(evaluations), len(questions)) pairs. Each item is
        keyed by the question's own index, whatever questionIndex says.
        """
        if not isinstance(evaluations, list):
            logger.warning("Evaluation response has no 'questionEvaluations' array")
            return []

        if len(evaluations) != len(questions):
            logger.warning(
                f"LLM returned {len(evaluations)} evaluations for {len(questions)} questions"
            )

        pairs = []
        for question, node in zip(questions, evaluations):
            if not isinstance(node, dict):
                raise MalformedResponse(f"Evaluation for question {question.index} is not an object")

            reference_answer = node.get("referenceAnswer")
            pairs.append((question, EvaluationItem(
                question_index=question.index,
                score=self._read_score(node, "score"),
                feedback=self._read_text(node, "feedback"),
                reference_answer="" if reference_answer is None else str(reference_answer),
                key_points=self._read_string_list(node.get("keyPoints")),
            )))
        return pairs

    # =========================================================================
    # FIELD READERS
    # =========================================================================

    def _read_score(self, node: dict[str, Any], field: str) -> int:
        """Read a required numeric score, clamped to 0-100."""
        value = node.get(field)
        if isinstance(value, bool) or value is None:
            raise MalformedResponse(f"Missing numeric field '{field}'")
        try:
            score = int(float(value))
        except (TypeError, ValueError, OverflowError) as e:
            raise MalformedResponse(f"Field '{field}' is not numeric: {value!r}") from e
        return max(MIN_SCORE, min(MAX_SCORE, score))

    def _read_text(self, node: dict[str, Any], field: str) -> str:
        """Read a required text field."""
        value = node.get(field)
        if value is None or isinstance(value, (dict, list)):
            raise MalformedResponse(f"Missing text field '{field}'")
        return str(value)

    def _read_string_list(self, value: Any) -> list[str]:
        """Read an optional list of strings; anything but an array yields []."""
        if not isinstance(value, list):
            return []
        return [item if isinstance(item, str) else str(item) for item in value if item is not None]

    # =========================================================================
    # FALLBACK
    # =========================================================================

    def _create_error_report(self, session_id: str, questions: list[Question]) -> InterviewReport:
        """Build the zero-score report returned when evaluation fails."""
        return InterviewReport(
            session_id=session_id,
            total_questions=len(questions),
            overall_score=0,
            category_scores=[],
            question_details=[
                QuestionEvaluation(
                    question_index=q.index,
                    question=q.text,
                    category=q.category,
                    user_answer=q.user_answer,
                    score=0,
                    feedback=self.fallback_text.question_feedback,
                )
                for q in questions
            ],
            overall_feedback=self.fallback_text.overall_feedback,
            strengths=[],
            improvements=[self.fallback_text.improvement_hint],
            reference_answers=[],
            evaluation_failed=True,
        )
