from typing import Optional, Sequence
from app.domain.entities.question import Question


def score_attempt(questions: Sequence[Question], answers: Sequence[Optional[str]]) -> tuple[int, float]:
    """
    Scores one attempt: one point per answer equal to the stored correct text.

    Answers are matched to questions by position. None, or a missing trailing
    answer, means the question was skipped.

    :return: (score, percentage) with percentage 0.0 for a quiz without questions.
    """
    score = 0
    for i, question in enumerate(questions):
        answer = answers[i] if i < len(answers) else None
        if question.is_correct_answer(answer):
            score += 1
    total = len(questions)
    percentage = score / total * 100 if total > 0 else 0.0
    return score, percentage
