from app.domain.entities.quiz_result import QuizResult
from app.domain.entities.leaderboard_entry import LeaderboardEntry
from abc import ABC, abstractmethod


class QuizResultRepoInterface(ABC):
    @abstractmethod
    async def save(self, result: QuizResult) -> QuizResult:
        raise NotImplementedError

    @abstractmethod
    async def get_by_user(self, user_id: int) -> list[QuizResult]:
        raise NotImplementedError

    @abstractmethod
    async def get_leaderboard(self) -> list[LeaderboardEntry]:
        raise NotImplementedError
