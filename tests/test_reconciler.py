"""Tests for merging evaluation reports onto stored answers."""

from interview_guide.core.reconciler import reconcile
from interview_guide.models.interview import InterviewAnswer
from interview_guide.models.report import InterviewReport, QuestionEvaluation, ReferenceAnswer


def _answer(index: int, **kwargs) -> InterviewAnswer:
    return InterviewAnswer(
        question_index=index,
        question=f"Question {index}",
        category="MySQL",
        user_answer=f"Answer {index}",
        **kwargs,
    )


def _report(evaluations=(), references=()) -> InterviewReport:
    return InterviewReport(
        session_id="s1",
        total_questions=3,
        overall_score=70,
        overall_feedback="ok",
        question_details=[
            QuestionEvaluation(
                question_index=index,
                question=f"Question {index}",
                category="MySQL",
                score=score,
                feedback=f"Feedback {index}",
            )
            for index, score in evaluations
        ],
        reference_answers=[
            ReferenceAnswer(
                question_index=index,
                question=f"Question {index}",
                reference_answer=f"Reference {index}",
                key_points=key_points,
            )
            for index, key_points in references
        ],
    )


def test_partial_report_only_touches_matching_index():
    stored = [_answer(0), _answer(1), _answer(2)]
    before = [a.model_dump_json() for a in stored]

    merged = reconcile(stored, _report(evaluations=[(1, 85)], references=[(1, ["k1"])]))

    assert merged[1].score == 85
    assert merged[1].feedback == "Feedback 1"
    assert merged[1].reference_answer == "Reference 1"
    assert merged[1].key_points == ["k1"]
    assert merged[0] is stored[0]
    assert merged[2] is stored[2]
    assert merged[0].model_dump_json() == before[0]
    assert merged[2].model_dump_json() == before[2]


def test_input_is_not_mutated():
    stored = [_answer(0), _answer(1)]
    before = [a.model_dump_json() for a in stored]

    reconcile(stored, _report(evaluations=[(0, 10), (1, 20)], references=[(0, ["a"])]))

    assert [a.model_dump_json() for a in stored] == before


def test_matches_by_index_not_position():
    stored = [_answer(2), _answer(0), _answer(1)]

    merged = reconcile(stored, _report(evaluations=[(0, 40), (1, 50), (2, 60)]))

    assert [(a.question_index, a.score) for a in merged] == [(2, 60), (0, 40), (1, 50)]


def test_unmatched_report_entries_are_ignored():
    stored = [_answer(0)]

    merged = reconcile(stored, _report(evaluations=[(9, 99)], references=[(9, ["x"])]))

    assert merged == stored


def test_empty_key_points_keep_stored_ones():
    stored = [_answer(0, key_points=["existing"])]

    merged = reconcile(stored, _report(references=[(0, [])]))

    assert merged[0].reference_answer == "Reference 0"
    assert merged[0].key_points == ["existing"]


def test_only_first_duplicate_is_updated():
    stored = [_answer(1), _answer(1)]

    merged = reconcile(stored, _report(evaluations=[(1, 77)]))

    assert merged[0].score == 77
    assert merged[1] is stored[1]
    assert merged[1].score == 0
