"""
Question models for Interview Guide
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class QuestionType(str, Enum):
    """Technical area a question belongs to."""

    PROJECT = "PROJECT"
    JAVA_BASIC = "JAVA_BASIC"
    JAVA_COLLECTION = "JAVA_COLLECTION"
    JAVA_CONCURRENT = "JAVA_CONCURRENT"
    MYSQL = "MYSQL"
    REDIS = "REDIS"
    SPRING = "SPRING"
    SPRING_BOOT = "SPRING_BOOT"

    @classmethod
    def parse(cls, value: Any) -> "QuestionType":
        """
        Map a free-text type tag onto a QuestionType.

        Matching is case-insensitive and treats spaces and dashes as
        underscores. Anything unrecognised maps to JAVA_BASIC.
        """
        if not isinstance(value, str):
            return cls.JAVA_BASIC
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        return _TYPE_LOOKUP.get(key, cls.JAVA_BASIC)


_TYPE_LOOKUP: dict[str, QuestionType] = {member.value: member for member in QuestionType}


class Question(BaseModel):
    """A single interview question within a session."""

    index: int = Field(..., ge=0, description="Zero-based position in the session")
    text: str = Field(..., description="The question text")
    type: QuestionType = Field(default=QuestionType.JAVA_BASIC)
    category: str = Field(..., description="Display category, e.g. 'MySQL'")

    # Attached once the candidate answers
    user_answer: str | None = None

    @property
    def is_answered(self) -> bool:
        return bool(self.user_answer and self.user_answer.strip())


class QuestionDistribution(BaseModel):
    """Per-category question quota for one session."""

    project: int = Field(default=0, ge=0)
    mysql: int = Field(default=0, ge=0)
    redis: int = Field(default=0, ge=0)
    java_basic: int = Field(default=0, ge=0)
    java_collection: int = Field(default=0, ge=0)
    java_concurrent: int = Field(default=0, ge=0)
    spring: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        """Sum of all category quotas."""
        return (
            self.project + self.mysql + self.redis +
            self.java_basic + self.java_collection +
            self.java_concurrent + self.spring
        )
