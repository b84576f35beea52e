"""
Merges an evaluation report onto stored answer records.

Records are matched by question index. Those indices were assigned by the
question generator, so they are trusted here.
"""

import logging

from interview_guide.models.interview import InterviewAnswer
from interview_guide.models.report import InterviewReport

logger = logging.getLogger(__name__)


def _find_first(answers: list[InterviewAnswer], question_index: int) -> int | None:
    for position, answer in enumerate(answers):
        if answer.question_index == question_index:
            return position
    return None


def reconcile(
    stored_answers: list[InterviewAnswer],
    report: InterviewReport,
) -> list[InterviewAnswer]:
    """
    Apply a report's scores and reference answers to stored answers.

    The input list is not modified. Updated records are copies; records the
    report does not cover are returned as the same objects. If two stored
    records share an index only the first is updated.

    Args:
        stored_answers: Persisted answers of one session
        report: Evaluation report for that session

    Returns:
        The merged answer list, in input order
    """
    merged = list(stored_answers)

    for evaluation in report.question_details:
        position = _find_first(merged, evaluation.question_index)
        if position is None:
            logger.debug(f"No stored answer for question {evaluation.question_index}, skipping score")
            continue
        merged[position] = merged[position].model_copy(update={
            "score": evaluation.score,
            "feedback": evaluation.feedback,
        })

    for reference in report.reference_answers:
        position = _find_first(merged, reference.question_index)
        if position is None:
            logger.debug(f"No stored answer for question {reference.question_index}, skipping reference")
            continue
        update = {"reference_answer": reference.reference_answer}
        if reference.key_points:
            update["key_points"] = list(reference.key_points)
        merged[position] = merged[position].model_copy(update=update)

    return merged
