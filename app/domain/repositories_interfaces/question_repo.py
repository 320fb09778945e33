from app.domain.entities.question import Question
from abc import ABC, abstractmethod


class QuestionRepoInterface(ABC):
    @abstractmethod
    async def get_by_quiz(self, quiz_id: int) -> list[Question]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, question: Question) -> Question:
        raise NotImplementedError

    @abstractmethod
    async def update(self, question: Question) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, question_id: int) -> None:
        raise NotImplementedError
