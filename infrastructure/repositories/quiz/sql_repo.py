from typing import Optional
from app.domain.repositories_interfaces.quiz_repo import QuizRepoInterface
from app.domain.entities.quiz import Quiz
from app.domain.exceptions import NotFoundError
from infrastructure.sqlite_config import SQLiteDatabase
from infrastructure.repositories.errors import store_errors


class SQLiteQuizRepo(QuizRepoInterface):
    def __init__(self, database: SQLiteDatabase):
        self.database = database

    @store_errors
    async def get(self, quiz_id: int) -> Optional[Quiz]:
        async with self.database.get_connection() as conn:
            async with conn.execute("SELECT * FROM quizzes WHERE id=?", (quiz_id,)) as cursor:
                result = await cursor.fetchone()
                if result:
                    return Quiz.model_validate(dict(result))
                return None

    @store_errors
    async def get_all(self) -> list[Quiz]:
        async with self.database.get_connection() as conn:
            async with conn.execute("SELECT * FROM quizzes") as cursor:
                result = await cursor.fetchall()
                return [Quiz.model_validate(dict(quiz)) for quiz in result]

    @store_errors
    async def save(self, quiz: Quiz) -> Quiz:
        async with self.database.get_connection() as conn:
            async with conn.execute(
                '''INSERT INTO quizzes (title, description, created_by) VALUES (?, ?, ?)''',
                (quiz.title, quiz.description, quiz.created_by)
            ) as cursor:
                quiz_id = cursor.lastrowid
            await conn.commit()
            # Read back so created_at carries the value the database assigned
            async with conn.execute("SELECT * FROM quizzes WHERE id=?", (quiz_id,)) as cursor:
                return Quiz.model_validate(dict(await cursor.fetchone()))

    @store_errors
    async def update(self, quiz: Quiz) -> None:
        async with self.database.get_connection() as conn:
            async with conn.execute(
                '''UPDATE quizzes SET title=?, description=? WHERE id=?''',
                (quiz.title, quiz.description, quiz.id)
            ) as cursor:
                updated = cursor.rowcount
            await conn.commit()
        if not updated:
            raise NotFoundError(f"Quiz {quiz.id} does not exist")

    @store_errors
    async def delete(self, quiz_id: int) -> None:
        async with self.database.get_connection() as conn:
            # Questions go with the quiz through ON DELETE CASCADE
            async with conn.execute("DELETE FROM quizzes WHERE id=?", (quiz_id,)) as cursor:
                deleted = cursor.rowcount
            await conn.commit()
        if not deleted:
            raise NotFoundError(f"Quiz {quiz_id} does not exist")
