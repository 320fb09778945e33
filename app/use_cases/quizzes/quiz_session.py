from typing import Optional
from app.domain.entities.question import Question
from app.domain.entities.quiz import Quiz
from app.domain.entities.quiz_result import QuizResult
from app.domain.entities.user import User
from app.use_cases.results.quiz_result_use_cases import QuizResultUseCases


class QuizSession:
    """
    One user going through one quiz: the current question, the answer picked
    for every question so far and the final submission.
    """

    def __init__(self, user: User, quiz: Quiz, questions: list[Question], result_use_cases: QuizResultUseCases):
        self.user = user
        self.quiz = quiz
        self.questions = questions
        self.result_use_cases = result_use_cases
        self.answers: list[Optional[str]] = [None] * len(questions)
        self.current_index = 0

    @property
    def current_question(self) -> Optional[Question]:
        if not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def current_answer(self) -> Optional[str]:
        if not self.questions:
            return None
        return self.answers[self.current_index]

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index >= len(self.questions) - 1

    @property
    def answered_count(self) -> int:
        return sum(1 for answer in self.answers if answer is not None)

    def select(self, answer: Optional[str]) -> None:
        # None clears the answer of the current question
        if self.questions:
            self.answers[self.current_index] = answer

    def next(self) -> Optional[Question]:
        if not self.is_last:
            self.current_index += 1
        return self.current_question

    def previous(self) -> Optional[Question]:
        if not self.is_first:
            self.current_index -= 1
        return self.current_question

    async def submit(self) -> Optional[QuizResult]:
        return await self.result_use_cases.submit_attempt(self.user, self.quiz, self.answers)
