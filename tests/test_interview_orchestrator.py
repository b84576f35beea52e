"""Tests for the session lifecycle."""

import pytest

from conftest import evaluation_reply, questions_reply
from interview_guide.core.exceptions import (
    EmptyInput,
    LlmUnavailable,
    QuestionNotFound,
    SessionNotFound,
    StateTransitionError,
)
from interview_guide.models.interview import SessionStatus
from interview_guide.models.question_bank import DEFAULT_EVALUATION_FALLBACK


async def test_create_session(make_orchestrator, resume_text):
    orchestrator, llm = make_orchestrator(questions_reply(3))

    session = await orchestrator.create_session(resume_text, 3)

    assert session.status == SessionStatus.CREATED
    assert session.total_questions == 3
    assert orchestrator.get_session(session.session_id) is session
    assert orchestrator.get_current_question(session.session_id).index == 0
    assert len(llm.calls) == 1


async def test_create_session_with_fallback_questions(make_orchestrator, resume_text):
    orchestrator, _ = make_orchestrator(LlmUnavailable("down"))

    session = await orchestrator.create_session(resume_text, 4)

    assert session.total_questions == 4
    assert [q.index for q in session.questions] == [0, 1, 2, 3]


async def test_create_session_rejects_blank_resume(make_orchestrator):
    orchestrator, llm = make_orchestrator()

    with pytest.raises(EmptyInput):
        await orchestrator.create_session("  ", 5)
    assert llm.calls == []


async def test_full_interview_flow(make_orchestrator, resume_text):
    orchestrator, llm = make_orchestrator(questions_reply(2), evaluation_reply([60, 90], overall=75))
    session = await orchestrator.create_session(resume_text, 2)
    sid = session.session_id

    first = await orchestrator.submit_answer(sid, 0, "Answer zero")
    assert first.has_next_question
    assert first.next_question.index == 1
    assert (first.current_index, first.total_questions) == (1, 2)
    assert session.status == SessionStatus.IN_PROGRESS

    second = await orchestrator.submit_answer(sid, 1, "Answer one")
    assert not second.has_next_question
    assert second.next_question is None
    assert session.status == SessionStatus.COMPLETED
    assert session.completed_at is not None
    assert orchestrator.get_current_question(sid) is None

    report = await orchestrator.generate_report(sid)
    assert report.overall_score == 75
    assert session.status == SessionStatus.EVALUATED
    assert session.report is report

    answers = orchestrator.get_answers(sid)
    assert [(a.question_index, a.user_answer, a.score) for a in answers] == [
        (0, "Answer zero", 60),
        (1, "Answer one", 90),
    ]
    assert answers[1].reference_answer == "Reference 1"
    assert answers[1].key_points == ["Point 1a", "Point 1b"]

    # Second request returns the stored report without another LLM call
    assert await orchestrator.generate_report(sid) is report
    assert len(llm.calls) == 2


async def test_report_for_session_ended_early(make_orchestrator, resume_text):
    orchestrator, _ = make_orchestrator(questions_reply(3), evaluation_reply([50]))
    session = await orchestrator.create_session(resume_text, 3)

    await orchestrator.submit_answer(session.session_id, 0, "Only answer")
    report = await orchestrator.generate_report(session.session_id)

    assert session.status == SessionStatus.EVALUATED
    assert report.total_questions == 3
    assert [d.question_index for d in report.question_details] == [0]


async def test_failed_evaluation_is_not_stored(make_orchestrator, resume_text):
    orchestrator, _ = make_orchestrator(questions_reply(1), LlmUnavailable("down"))
    session = await orchestrator.create_session(resume_text, 1)
    await orchestrator.submit_answer(session.session_id, 0, "Answer")

    report = await orchestrator.generate_report(session.session_id)

    assert report.overall_score == 0
    assert report.evaluation_failed
    assert session.status == SessionStatus.COMPLETED
    assert session.report is None
    answer = orchestrator.get_answers(session.session_id)[0]
    assert answer.score == 0
    assert answer.feedback == DEFAULT_EVALUATION_FALLBACK.question_feedback


async def test_failed_evaluation_can_be_retried(make_orchestrator, resume_text):
    orchestrator, llm = make_orchestrator(
        questions_reply(2),
        LlmUnavailable("down"),
        evaluation_reply([90, 80], overall=90),
    )
    session = await orchestrator.create_session(resume_text, 2)
    sid = session.session_id
    await orchestrator.submit_answer(sid, 0, "Answer zero")
    await orchestrator.submit_answer(sid, 1, "Answer one")

    failed = await orchestrator.generate_report(sid)
    assert failed.evaluation_failed
    assert failed.overall_score == 0

    retried = await orchestrator.generate_report(sid)
    assert not retried.evaluation_failed
    assert retried.overall_score == 90
    assert session.status == SessionStatus.EVALUATED
    assert session.report is retried
    assert len(llm.calls) == 3

    answers = orchestrator.get_answers(sid)
    assert [(a.score, a.feedback) for a in answers] == [(90, "Feedback 0"), (80, "Feedback 1")]
    assert answers[0].key_points == ["Point 0a", "Point 0b"]


async def test_resubmitting_replaces_stored_answer(make_orchestrator, resume_text):
    orchestrator, _ = make_orchestrator(questions_reply(3))
    session = await orchestrator.create_session(resume_text, 3)
    sid = session.session_id

    await orchestrator.submit_answer(sid, 0, "First try")
    await orchestrator.submit_answer(sid, 0, "Second try")

    answers = orchestrator.get_answers(sid)
    assert [(a.question_index, a.user_answer) for a in answers] == [(0, "Second try")]
    assert session.current_question_index == 1


async def test_report_requires_an_answer(make_orchestrator, resume_text):
    orchestrator, _ = make_orchestrator(questions_reply(2))
    session = await orchestrator.create_session(resume_text, 2)

    with pytest.raises(StateTransitionError):
        await orchestrator.generate_report(session.session_id)
    assert session.status == SessionStatus.CREATED


async def test_no_answers_after_completion(make_orchestrator, resume_text):
    orchestrator, _ = make_orchestrator(questions_reply(1))
    session = await orchestrator.create_session(resume_text, 1)
    await orchestrator.submit_answer(session.session_id, 0, "Done")

    with pytest.raises(StateTransitionError):
        await orchestrator.submit_answer(session.session_id, 0, "Again")


async def test_unknown_question_index(make_orchestrator, resume_text):
    orchestrator, _ = make_orchestrator(questions_reply(2))
    session = await orchestrator.create_session(resume_text, 2)

    with pytest.raises(QuestionNotFound):
        await orchestrator.submit_answer(session.session_id, 5, "?")


async def test_unknown_session(make_orchestrator):
    orchestrator, _ = make_orchestrator()

    with pytest.raises(SessionNotFound):
        orchestrator.get_session("missing")
    with pytest.raises(SessionNotFound):
        await orchestrator.submit_answer("missing", 0, "x")
    with pytest.raises(SessionNotFound):
        await orchestrator.generate_report("missing")


async def test_status_never_moves_backwards(make_orchestrator, resume_text):
    orchestrator, _ = make_orchestrator(questions_reply(1))
    session = await orchestrator.create_session(resume_text, 1)
    await orchestrator.submit_answer(session.session_id, 0, "Done")

    with pytest.raises(StateTransitionError):
        orchestrator.transition_state(session, SessionStatus.IN_PROGRESS)
    with pytest.raises(StateTransitionError):
        orchestrator.transition_state(session, SessionStatus.CREATED)

    # Re-entering the current status is a no-op
    orchestrator.transition_state(session, SessionStatus.COMPLETED)
    assert session.status == SessionStatus.COMPLETED
