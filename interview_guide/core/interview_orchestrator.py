"""
Interview Orchestrator - Session lifecycle for Interview Guide.

Owns session storage and drives a session from question generation
through answering to evaluation. Storage is in-memory; sessions live for
the lifetime of the process. Nothing is evicted, so session, answer and
lock tables grow with every session created.
"""

import asyncio
import logging
from datetime import datetime

from interview_guide.core.answer_evaluator import AnswerEvaluator
from interview_guide.core.exceptions import (
    EmptyInput,
    QuestionNotFound,
    SessionNotFound,
    StateTransitionError,
)
from interview_guide.core.question_generator import QuestionGenerator
from interview_guide.core.reconciler import reconcile
from interview_guide.models.interview import (
    InterviewAnswer,
    InterviewSession,
    SessionStatus,
    SubmitAnswerResult,
)
from interview_guide.models.question import Question
from interview_guide.models.report import InterviewReport

logger = logging.getLogger(__name__)


class InterviewOrchestrator:
    """
    Manages the interview lifecycle using a state machine pattern.

    States:
        CREATED → IN_PROGRESS → COMPLETED → EVALUATED

    Mutations of a single session are serialised with a per-session lock;
    different sessions proceed independently.
    """

    # Valid state transitions
    VALID_TRANSITIONS: dict[SessionStatus, list[SessionStatus]] = {
        SessionStatus.CREATED: [SessionStatus.IN_PROGRESS],
        SessionStatus.IN_PROGRESS: [SessionStatus.COMPLETED],
        SessionStatus.COMPLETED: [SessionStatus.EVALUATED],
        SessionStatus.EVALUATED: [],  # Terminal state
    }

    def __init__(
        self,
        question_generator: QuestionGenerator,
        answer_evaluator: AnswerEvaluator,
    ):
        """
        Initialize the orchestrator with component dependencies.

        Args:
            question_generator: Builds the question list for new sessions
            answer_evaluator: Scores finished sessions
        """
        self.question_generator = question_generator
        self.answer_evaluator = answer_evaluator

        # Session storage (in-memory)
        self._sessions: dict[str, InterviewSession] = {}
        self._answers: dict[str, list[InterviewAnswer]] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    async def create_session(self, resume_text: str, question_count: int) -> InterviewSession:
        """
        Create a new interview session and generate its questions.

        Args:
            resume_text: Cleaned plain-text resume
            question_count: Requested number of questions

        Returns:
            New InterviewSession in CREATED state

        Raises:
            EmptyInput: If the resume is blank or the count is not positive
        """
        if not resume_text or not resume_text.strip():
            raise EmptyInput("Resume text is empty")
        if question_count < 1:
            raise EmptyInput(f"Question count must be positive, got {question_count}")

        questions = await self.question_generator.generate(resume_text, question_count)

        session = InterviewSession(
            resume_text=resume_text,
            total_questions=len(questions),
            questions=questions,
        )

        # Store session
        self._sessions[session.session_id] = session
        self._answers[session.session_id] = []
        self._locks[session.session_id] = asyncio.Lock()

        logger.info(f"Created interview session: {session.session_id} ({len(questions)} questions)")
        return session

    def get_session(self, session_id: str) -> InterviewSession:
        """Get a session by ID."""
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(f"Session not found: {session_id}")
        return session

    def get_answers(self, session_id: str) -> list[InterviewAnswer]:
        """Get the stored answer records of a session, ordered by question index."""
        self.get_session(session_id)
        return sorted(self._answers[session_id], key=lambda a: a.question_index)

    def get_current_question(self, session_id: str) -> Question | None:
        """Get the next question to answer, or None when all are answered."""
        return self.get_session(session_id).get_current_question()

    # =========================================================================
    # STATE MACHINE
    # =========================================================================

    def transition_state(self, session: InterviewSession, new_status: SessionStatus) -> None:
        """
        Move a session to a new status.

        Re-entering the current status is a no-op.

        Raises:
            StateTransitionError: If the transition is not allowed
        """
        old_status = session.status
        if new_status == old_status:
            return

        valid_next = self.VALID_TRANSITIONS.get(old_status, [])
        if new_status not in valid_next:
            raise StateTransitionError(
                f"Invalid transition from {old_status.value} to {new_status.value}. "
                f"Valid transitions: {[s.value for s in valid_next]}"
            )

        session.status = new_status
        if new_status in (SessionStatus.COMPLETED, SessionStatus.EVALUATED):
            session.completed_at = datetime.utcnow()

        logger.info(f"Session {session.session_id}: {old_status.value} → {new_status.value}")

    # =========================================================================
    # INTERVIEW FLOW
    # =========================================================================

    async def submit_answer(
        self,
        session_id: str,
        question_index: int,
        answer: str,
    ) -> SubmitAnswerResult:
        """
        Record the candidate's answer to a question.

        Args:
            session_id: Session ID
            question_index: Index of the answered question
            answer: Answer text

        Returns:
            SubmitAnswerResult describing the next question, if any
        """
        session = self.get_session(session_id)

        async with self._locks[session_id]:
            if session.status in (SessionStatus.COMPLETED, SessionStatus.EVALUATED):
                raise StateTransitionError(
                    f"Cannot submit answers in status: {session.status.value}"
                )

            question = session.find_question(question_index)
            if question is None:
                raise QuestionNotFound(
                    f"Session {session_id} has no question {question_index}"
                )

            question.user_answer = answer
            self._store_answer(session_id, question)

            self.transition_state(session, SessionStatus.IN_PROGRESS)
            session.current_question_index = max(
                session.current_question_index, question_index + 1
            )

            next_question = session.get_current_question()
            if next_question is None:
                self.transition_state(session, SessionStatus.COMPLETED)

            logger.info(
                f"Answer recorded: session={session_id}, question={question_index}, "
                f"next={next_question.index if next_question else None}"
            )

            return SubmitAnswerResult(
                has_next_question=next_question is not None,
                next_question=next_question,
                current_index=session.current_question_index,
                total_questions=session.total_questions,
            )

    def _store_answer(self, session_id: str, question: Question) -> None:
        """Insert or replace the stored record for a question."""
        record = InterviewAnswer(
            question_index=question.index,
            question=question.text,
            category=question.category,
            user_answer=question.user_answer,
        )
        answers = self._answers[session_id]
        for position, existing in enumerate(answers):
            if existing.question_index == question.index:
                answers[position] = record
                return
        answers.append(record)

    async def generate_report(self, session_id: str) -> InterviewReport:
        """
        Evaluate a session and persist the result.

        A session that is still in progress is completed first. An
        already-evaluated session returns its stored report. When the
        evaluator falls back to its error report, that report is returned
        but not stored and the session stays COMPLETED, so a later call
        evaluates again.

        Raises:
            StateTransitionError: If no answer has been submitted yet
        """
        session = self.get_session(session_id)

        async with self._locks[session_id]:
            if session.status == SessionStatus.EVALUATED and session.report is not None:
                return session.report

            if session.status == SessionStatus.CREATED:
                raise StateTransitionError(
                    f"Session {session_id} has no answers yet; cannot generate a report"
                )

            self.transition_state(session, SessionStatus.COMPLETED)

            report = await self.answer_evaluator.evaluate(
                session_id=session_id,
                resume_text=session.resume_text,
                questions=session.questions,
            )

            self._answers[session_id] = reconcile(self._answers[session_id], report)

            if report.evaluation_failed:
                logger.warning(
                    f"Evaluation failed for session {session_id}; "
                    f"leaving it {session.status.value} so the report can be retried"
                )
                return report

            session.report = report
            self.transition_state(session, SessionStatus.EVALUATED)

            logger.info(f"Report saved: session={session_id}, score={report.overall_score}")
            return report
