"""
Static fallback content for Interview Guide

Versioned tables used when the LLM cannot be reached or returns unusable
output:
- the built-in question bank served when question generation fails
- the fixed texts of the zero-score report served when evaluation fails

Both are injected into the orchestrators so tests can substitute them.
"""

from pydantic import BaseModel, ConfigDict, Field

from interview_guide.models.question import Question, QuestionType


class QuestionBankEntry(BaseModel):
    """A hand-authored question."""

    model_config = ConfigDict(frozen=True)

    text: str
    type: QuestionType
    category: str


class QuestionBank(BaseModel):
    """An ordered, versioned list of fallback questions."""

    model_config = ConfigDict(frozen=True)

    version: str
    entries: tuple[QuestionBankEntry, ...] = Field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)

    def take(self, count: int) -> list[Question]:
        """Return the first ``count`` entries as questions indexed from 0."""
        return [
            Question(index=i, text=entry.text, type=entry.type, category=entry.category)
            for i, entry in enumerate(self.entries[:max(0, count)])
        ]


class EvaluationFallbackText(BaseModel):
    """Fixed texts of the report produced when evaluation fails."""

    model_config = ConfigDict(frozen=True)

    version: str
    question_feedback: str
    overall_feedback: str
    improvement_hint: str


DEFAULT_QUESTION_BANK = QuestionBank(
    version="1",
    entries=(
        QuestionBankEntry(
            text="Walk me through the most important project on your resume. What was your role in it?",
            type=QuestionType.PROJECT,
            category="Project Experience",
        ),
        QuestionBankEntry(
            text="What index types does MySQL support? How does a B+ tree index work?",
            type=QuestionType.MYSQL,
            category="MySQL",
        ),
        QuestionBankEntry(
            text="Which data structures does Redis support, and what is each one typically used for?",
            type=QuestionType.REDIS,
            category="Redis",
        ),
        QuestionBankEntry(
            text="How is HashMap implemented internally in Java? What changed in JDK 8?",
            type=QuestionType.JAVA_COLLECTION,
            category="Java Collections",
        ),
        QuestionBankEntry(
            text="What are the differences between synchronized and ReentrantLock?",
            type=QuestionType.JAVA_CONCURRENT,
            category="Java Concurrency",
        ),
        QuestionBankEntry(
            text="How do IoC and AOP work in Spring?",
            type=QuestionType.SPRING,
            category="Spring",
        ),
        QuestionBankEntry(
            text="What are the ACID properties of a MySQL transaction, and which isolation levels exist?",
            type=QuestionType.MYSQL,
            category="MySQL",
        ),
        QuestionBankEntry(
            text="What persistence mechanisms does Redis offer? How do RDB and AOF differ?",
            type=QuestionType.REDIS,
            category="Redis",
        ),
        QuestionBankEntry(
            text="How does garbage collection work in the JVM? Which GC algorithms are common?",
            type=QuestionType.JAVA_BASIC,
            category="Java Basics",
        ),
        QuestionBankEntry(
            text="What are the core parameters of a thread pool, and how would you configure them?",
            type=QuestionType.JAVA_CONCURRENT,
            category="Java Concurrency",
        ),
    ),
)


DEFAULT_EVALUATION_FALLBACK = EvaluationFallbackText(
    version="1",
    question_feedback="Evaluation service temporarily unavailable",
    overall_feedback="An error occurred during evaluation. Please try again later.",
    improvement_hint="Please check that the AI service is running normally",
)
