import logging
from datetime import datetime
from typing import Optional, Sequence
from pydantic import ValidationError
from app.domain.entities.leaderboard_entry import LeaderboardEntry
from app.domain.entities.quiz import Quiz
from app.domain.entities.quiz_result import QuizResult
from app.domain.entities.user import User
from app.domain.exceptions import QuizAppError
from app.domain.repositories_interfaces.question_repo import QuestionRepoInterface
from app.domain.repositories_interfaces.quiz_result_repo import QuizResultRepoInterface
from app.domain.status import Status
from app.use_cases.results.scoring import score_attempt


logger = logging.getLogger('use_cases')

DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class QuizResultUseCases:
    def __init__(self, sql_result_repo: QuizResultRepoInterface, sql_question_repo: QuestionRepoInterface):
        self.sql_result_repo = sql_result_repo
        self.sql_question_repo = sql_question_repo

    async def record_result(self, user_id: int, quiz_id: int, quiz_title: str, score: int,
                            total_questions: int, percentage: float,
                            date_taken: Optional[str] = None) -> Status:
        """
        Stores one finished attempt. Repeated attempts produce repeated rows.

        :param date_taken: Completion time as YYYY-MM-DD HH:MM:SS, defaults to now.
        :return: SUCCESS, VALIDATION_FAILED if score, total and percentage disagree, or STORE_ERROR.
        """
        try:
            result = QuizResult(
                user_id=user_id,
                quiz_id=quiz_id,
                quiz_title=quiz_title,
                score=score,
                total_questions=total_questions,
                percentage=percentage,
                date_taken=date_taken or datetime.now().strftime(DATE_FORMAT))
        except ValidationError as e:
            logger.info("SAVE RESULT REJECTED: %s", e.errors()[0]['msg'])
            return Status.VALIDATION_FAILED
        return Status.SUCCESS if await self._save(result) else Status.STORE_ERROR

    async def submit_attempt(self, user: User, quiz: Quiz,
                             answers: Sequence[Optional[str]]) -> Optional[QuizResult]:
        """
        Scores the answers against the current questions of the quiz and records the result.

        :param answers: The option text picked for each question in order, None for a skipped one.
        :return: The stored QuizResult, None if it could not be stored.
        """
        try:
            questions = await self.sql_question_repo.get_by_quiz(quiz.id)
        except QuizAppError as e:
            logger.error("SUBMIT QUIZ %s FAILED: %s", quiz.id, e, extra={'user': user.username})
            return None
        score, percentage = score_attempt(questions, answers)
        result = QuizResult(
            user_id=user.id,
            quiz_id=quiz.id,
            quiz_title=quiz.title,
            score=score,
            total_questions=len(questions),
            percentage=percentage,
            date_taken=datetime.now().strftime(DATE_FORMAT))
        stored = await self._save(result)
        if stored:
            logger.info("SUBMIT QUIZ %s: %s/%s", quiz.id, score, len(questions), extra={'user': user.username})
        return stored

    async def history(self, user_id: int) -> list[QuizResult]:
        try:
            return await self.sql_result_repo.get_by_user(user_id)
        except QuizAppError as e:
            logger.error("HISTORY FAILED: %s", e)
            return []

    async def leaderboard(self) -> list[LeaderboardEntry]:
        try:
            return await self.sql_result_repo.get_leaderboard()
        except QuizAppError as e:
            logger.error("LEADERBOARD FAILED: %s", e)
            return []

    async def _save(self, result: QuizResult) -> Optional[QuizResult]:
        try:
            stored = await self.sql_result_repo.save(result)
        except QuizAppError as e:
            logger.error("SAVE RESULT FAILED: %s", e)
            return None
        logger.info("SAVE RESULT %s FOR QUIZ %s", stored.id, stored.quiz_id)
        return stored
