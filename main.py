import asyncio
import logging
from app.use_cases.quizzes.quiz_use_cases import QuizUseCases
from app.use_cases.results.quiz_result_use_cases import QuizResultUseCases
from app.use_cases.store.store_use_cases import StoreUseCases
from app.use_cases.users.user_use_cases import UserUseCases
from config.main_config import DB_PATH
from infrastructure.repositories.question.sql_repo import SQLiteQuestionRepo
from infrastructure.repositories.quiz.sql_repo import SQLiteQuizRepo
from infrastructure.repositories.quiz_result.sql_repo import SQLiteQuizResultRepo
from infrastructure.repositories.user.sql_repo import SQLiteUserRepo
from infrastructure.services.password_hasher import Sha256PasswordHasher
from infrastructure.services.repo_service import RepoService
from infrastructure.sqlite_config import SQLiteDatabase


logger = logging.getLogger('store')


class QuizApp:
    """The use cases a front end drives, built over one database file."""

    def __init__(self, database: SQLiteDatabase, repo_service: RepoService):
        self.database = database
        self.repo_service = repo_service
        self.users = UserUseCases(repo_service.sql_user_repo, repo_service.password_hasher)
        self.quizzes = QuizUseCases(repo_service.sql_quiz_repo, repo_service.sql_question_repo)
        self.results = QuizResultUseCases(repo_service.sql_quiz_result_repo, repo_service.sql_question_repo)
        self.store = StoreUseCases(database, repo_service.sql_user_repo, self.users)


def create_app(db_path: str = DB_PATH) -> QuizApp:
    # Creating repo instances and passing them to service for use case construction
    database = SQLiteDatabase(db_path)
    repo_service = RepoService(
        sql_user_repo=SQLiteUserRepo(database),
        sql_quiz_repo=SQLiteQuizRepo(database),
        sql_question_repo=SQLiteQuestionRepo(database),
        sql_quiz_result_repo=SQLiteQuizResultRepo(database),
        password_hasher=Sha256PasswordHasher(),
    )
    return QuizApp(database, repo_service)


async def main():
    from config import logging_config  # Importing config to apply it
    app = create_app()
    if not await app.store.initialize():
        logger.error("STARTING WITHOUT A WORKING DATABASE")
    quizzes = await app.quizzes.list_quizzes()
    logger.info("%s QUIZZES AVAILABLE", len(quizzes))
    return app


if __name__ == '__main__':
    asyncio.run(main())
