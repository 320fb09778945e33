from app.domain.repositories_interfaces.quiz_result_repo import QuizResultRepoInterface
from app.domain.entities.quiz_result import QuizResult
from app.domain.entities.leaderboard_entry import LeaderboardEntry
from infrastructure.sqlite_config import SQLiteDatabase
from infrastructure.repositories.errors import store_errors


class SQLiteQuizResultRepo(QuizResultRepoInterface):
    def __init__(self, database: SQLiteDatabase):
        self.database = database

    @store_errors
    async def save(self, result: QuizResult) -> QuizResult:
        async with self.database.get_connection() as conn:
            # Results are append only, a new attempt never replaces an older one
            async with conn.execute(
                '''INSERT INTO quiz_results (user_id, quiz_id, quiz_title, score, total_questions, percentage, date_taken)
                VALUES (?, ?, ?, ?, ?, ?, ?)''',
                (result.user_id, result.quiz_id, result.quiz_title, result.score,
                 result.total_questions, result.percentage, result.date_taken)
            ) as cursor:
                result_id = cursor.lastrowid
            await conn.commit()
            return result.model_copy(update={'id': result_id})

    @store_errors
    async def get_by_user(self, user_id: int) -> list[QuizResult]:
        async with self.database.get_connection() as conn:
            async with conn.execute(
                "SELECT * FROM quiz_results WHERE user_id=? ORDER BY date_taken DESC, id DESC", (user_id,)
            ) as cursor:
                result = await cursor.fetchall()
                return [QuizResult.model_validate(dict(row)) for row in result]

    @store_errors
    async def get_leaderboard(self) -> list[LeaderboardEntry]:
        async with self.database.get_connection() as conn:
            async with conn.execute(
                '''SELECT
                    u.username,
                    AVG(qr.percentage) AS average_score,
                    COUNT(qr.id) AS total_attempts,
                    SUM(qr.score) AS total_score
                FROM quiz_results qr
                JOIN users u ON qr.user_id = u.id
                GROUP BY u.username
                ORDER BY average_score DESC'''
            ) as cursor:
                result = await cursor.fetchall()
                return [LeaderboardEntry.model_validate(dict(row)) for row in result]
