"""
AI Evaluator Prompt Templates

Contains the prompts for scoring a finished interview transcript
according to the scoring rubric.

Evaluation dimensions:
- Accuracy
- Completeness
- Depth
- Clarity
"""

from interview_guide.models.question import Question


NOT_ANSWERED = "(not answered)"


class EvaluatorPrompts:
    """
    Prompt templates for evaluating a complete interview.

    Key principles:
    - Objective, rubric-based scoring
    - One evaluation per question, in question order
    - Reference answers the candidate can learn from
    """

    SYSTEM_CONTEXT = """You are a senior Java backend interviewer evaluating a candidate's interview answers.

Evaluation criteria:
1. Accuracy: is the answer correct and are the concepts clear
2. Completeness: does it cover the key points of the question
3. Depth: does it show real understanding and hands-on experience
4. Clarity: is the answer well structured

=== SCORING RUBRIC (0-100 scale) ===
- 90-100: Excellent, thorough and insightful
- 75-89: Good, correct and complete with some depth
- 60-74: Pass, basically correct but shallow
- 40-59: Fail, clear mistakes or omissions
- 0-39: Poor, wrong or off-topic

Output the evaluation strictly as JSON.
"""

    OUTPUT_FORMAT = """
Output the evaluation report in exactly this JSON format, with no extra text:
{
    "overallScore": <total score 0-100>,
    "overallFeedback": "<overall assessment, at most 150 words>",
    "strengths": ["<strength 1>", "<strength 2>", "<strength 3>"],
    "improvements": ["<suggestion 1>", "<suggestion 2>", "<suggestion 3>"],
    "questionEvaluations": [
        {
            "questionIndex": 0,
            "score": <score 0-100>,
            "feedback": "<feedback>",
            "referenceAnswer": "<reference answer>",
            "keyPoints": ["<key point 1>", "<key point 2>"]
        }
    ]
}
Provide exactly one entry in questionEvaluations per question, in the order the questions were asked."""

    def __init__(self, resume_excerpt_chars: int = 500):
        self.resume_excerpt_chars = resume_excerpt_chars

    def resume_excerpt(self, resume_text: str) -> str:
        """Truncate the resume, marking the cut with an ellipsis."""
        if len(resume_text) > self.resume_excerpt_chars:
            return resume_text[:self.resume_excerpt_chars] + "..."
        return resume_text

    def format_transcript(self, questions: list[Question]) -> str:
        """Render the question/answer transcript."""
        blocks = []
        for q in questions:
            answer = q.user_answer if q.is_answered else NOT_ANSWERED
            blocks.append(
                f"Question {q.index + 1} [{q.category}]: {q.text}\n"
                f"Answer: {answer}"
            )
        return "\n\n".join(blocks)

    def generate_evaluation_prompt(self, resume_text: str, questions: list[Question]) -> str:
        """Generate the user prompt for evaluating a full interview."""

        return f"""Evaluate the interview below and produce a detailed interview report.

=== CANDIDATE RESUME SUMMARY ===
{self.resume_excerpt(resume_text)}

=== INTERVIEW TRANSCRIPT ===
{self.format_transcript(questions)}
{self.OUTPUT_FORMAT}"""
