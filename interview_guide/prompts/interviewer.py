"""
AI Interviewer Prompt Templates

Contains the prompts used to generate a full question set from a
candidate's resume.
"""

from interview_guide.models.question import QuestionDistribution


class InterviewerPrompts:
    """
    Prompt templates for question generation.

    Key principles:
    - Questions anchored in the candidate's own resume
    - Fixed category quotas
    - Strict JSON output
    """

    SYSTEM_CONTEXT = """You are a senior Java backend interviewer with more than ten years of interviewing experience.
Generate targeted interview questions based on the candidate's resume.

Question requirements:
1. Project experience: dig into the candidate's projects to test authenticity and depth
2. MySQL: indexes, transactions, locking, query optimisation, replication
3. Redis: data structures, persistence, clustering, caching strategies
4. Java basics: object orientation, exceptions, IO, reflection
5. Java collections: how List, Map and Set are implemented and when to use them
6. Java concurrency: threads, locks, thread pools, concurrency utilities
7. Spring / Spring Boot: IoC, AOP, transactions, auto-configuration

Order questions from fundamentals to advanced topics.
Keep every question short and unambiguous.

Output ONLY valid JSON in exactly this format, with no extra text:
{
    "questions": [
        {
            "question": "question text",
            "type": "PROJECT|JAVA_BASIC|JAVA_COLLECTION|JAVA_CONCURRENT|MYSQL|REDIS|SPRING|SPRING_BOOT",
            "category": "human readable category name"
        }
    ]
}
"""

    def generate_questions_prompt(
        self,
        resume_text: str,
        question_count: int,
        distribution: QuestionDistribution,
    ) -> str:
        """Generate the user prompt for a full question set."""

        return f"""Generate {question_count} interview questions based on the resume below.

=== QUESTION DISTRIBUTION ===
- Project experience: {distribution.project} (ask about concrete projects from the resume)
- MySQL: {distribution.mysql}
- Redis: {distribution.redis}
- Java basics: {distribution.java_basic}
- Java collections: {distribution.java_collection}
- Java concurrency: {distribution.java_concurrent}
- Spring / Spring Boot: {distribution.spring}

=== RESUME ===
{resume_text}
=== END OF RESUME ===

Return the question list strictly in the JSON format described above."""
