import math
from pydantic import BaseModel, ConfigDict, model_validator
from typing import Optional


"""
QuizResult Entity:
1. id (int, None): Unique identifier for the result. None until the result is stored.
2. user_id (int): Identifier of the user who took the quiz.
3. quiz_id (int): Identifier of the quiz that was taken.
4. quiz_title (str): Title of the quiz at the moment it was taken.
Kept as a copy so the history still reads well after the quiz is renamed.
5. score (int): Number of correctly answered questions, between 0 and total_questions.
6. total_questions (int): Number of questions in the attempt.
7. percentage (float): score / total_questions * 100, 0 for an empty quiz.
8. date_taken (str): Completion time formatted as YYYY-MM-DD HH:MM:SS.
"""
class QuizResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    user_id: int
    quiz_id: int
    quiz_title: str
    score: int
    total_questions: int
    percentage: float
    date_taken: str

    @model_validator(mode='after')
    def check_score(self) -> 'QuizResult':
        if self.total_questions < 0:
            raise ValueError('total_questions cannot be negative')
        if not 0 <= self.score <= self.total_questions:
            raise ValueError(f'score {self.score} is outside 0..{self.total_questions}')
        expected = self.score / self.total_questions * 100 if self.total_questions > 0 else 0.0
        if not math.isclose(self.percentage, expected, rel_tol=1e-9, abs_tol=1e-9):
            raise ValueError(f'percentage {self.percentage} does not match {self.score}/{self.total_questions}')
        return self
