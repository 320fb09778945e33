from app.domain.repositories_interfaces.question_repo import QuestionRepoInterface
from app.domain.entities.question import Question
from app.domain.exceptions import NotFoundError
from infrastructure.sqlite_config import SQLiteDatabase
from infrastructure.repositories.errors import store_errors


class SQLiteQuestionRepo(QuestionRepoInterface):
    def __init__(self, database: SQLiteDatabase):
        self.database = database

    @store_errors
    async def get_by_quiz(self, quiz_id: int) -> list[Question]:
        async with self.database.get_connection() as conn:
            async with conn.execute("SELECT * FROM questions WHERE quiz_id=?", (quiz_id,)) as cursor:
                result = await cursor.fetchall()
                return [Question(id=question['id'],
                                 quiz_id=question['quiz_id'],
                                 text=question['question_text'],
                                 option_a=question['option_a'],
                                 option_b=question['option_b'],
                                 option_c=question['option_c'],
                                 option_d=question['option_d'],
                                 correct_answer=question['correct_answer']) for question in result]

    @store_errors
    async def save(self, question: Question) -> Question:
        async with self.database.get_connection() as conn:
            async with conn.execute(
                '''INSERT INTO questions (quiz_id, question_text, option_a, option_b, option_c, option_d, correct_answer)
                VALUES (?, ?, ?, ?, ?, ?, ?)''',
                (question.quiz_id, question.text, question.option_a, question.option_b,
                 question.option_c, question.option_d, question.correct_answer)
            ) as cursor:
                question_id = cursor.lastrowid
            await conn.commit()
            return question.model_copy(update={'id': question_id})

    @store_errors
    async def update(self, question: Question) -> None:
        async with self.database.get_connection() as conn:
            async with conn.execute(
                '''UPDATE questions SET question_text=?, option_a=?, option_b=?, option_c=?, option_d=?, correct_answer=?
                WHERE id=?''',
                (question.text, question.option_a, question.option_b, question.option_c,
                 question.option_d, question.correct_answer, question.id)
            ) as cursor:
                updated = cursor.rowcount
            await conn.commit()
        if not updated:
            raise NotFoundError(f"Question {question.id} does not exist")

    @store_errors
    async def delete(self, question_id: int) -> None:
        async with self.database.get_connection() as conn:
            async with conn.execute("DELETE FROM questions WHERE id=?", (question_id,)) as cursor:
                deleted = cursor.rowcount
            await conn.commit()
        if not deleted:
            raise NotFoundError(f"Question {question_id} does not exist")
