from app.domain.entities.quiz import Quiz
from abc import ABC, abstractmethod
from typing import Optional


class QuizRepoInterface(ABC):
    @abstractmethod
    async def get(self, quiz_id: int) -> Optional[Quiz]:
        raise NotImplementedError

    @abstractmethod
    async def get_all(self) -> list[Quiz]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, quiz: Quiz) -> Quiz:
        raise NotImplementedError

    @abstractmethod
    async def update(self, quiz: Quiz) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, quiz_id: int) -> None:
        raise NotImplementedError
