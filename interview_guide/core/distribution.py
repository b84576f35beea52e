"""
Question distribution planning.

Splits a requested question count across the interview categories using
fixed ratios. Project, MySQL and Redis weigh the most. Spring has no ratio
of its own and takes whatever is left over.
"""

import logging
import math

from interview_guide.core.exceptions import EmptyInput
from interview_guide.models.question import QuestionDistribution

logger = logging.getLogger(__name__)


PROJECT_RATIO = 0.20
MYSQL_RATIO = 0.20
REDIS_RATIO = 0.20
JAVA_BASIC_RATIO = 0.10
JAVA_COLLECTION_RATIO = 0.10
JAVA_CONCURRENT_RATIO = 0.10


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def plan(total: int) -> QuestionDistribution:
    """
    Compute the per-category question quota for ``total`` questions.

    Project, MySQL, Redis and Java basics always get at least one question.
    Spring takes the remainder, clamped at zero, so for very small
    totals (and a few others such as 8) the quotas add up to more than
    ``total``. Whenever the remainder is non-negative the sum is exact.

    Args:
        total: Requested number of questions (>= 1)

    Returns:
        QuestionDistribution
    """
    if total < 1:
        raise EmptyInput(f"Question count must be positive, got {total}")

    project = max(1, _round_half_up(total * PROJECT_RATIO))
    mysql = max(1, _round_half_up(total * MYSQL_RATIO))
    redis = max(1, _round_half_up(total * REDIS_RATIO))
    java_basic = max(1, _round_half_up(total * JAVA_BASIC_RATIO))
    java_collection = _round_half_up(total * JAVA_COLLECTION_RATIO)
    java_concurrent = _round_half_up(total * JAVA_CONCURRENT_RATIO)

    remainder = total - project - mysql - redis - java_basic - java_collection - java_concurrent
    if remainder < 0:
        logger.debug(f"Distribution for {total} questions overshoots by {-remainder}; spring clamped to 0")

    return QuestionDistribution(
        project=project,
        mysql=mysql,
        redis=redis,
        java_basic=java_basic,
        java_collection=java_collection,
        java_concurrent=java_concurrent,
        spring=max(0, remainder),
    )
