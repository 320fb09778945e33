import logging
from app.domain.exceptions import QuizAppError
from app.domain.repositories_interfaces.user_repo import UserRepoInterface
from app.domain.status import Status
from app.use_cases.users.user_use_cases import UserUseCases
from config.main_config import DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD


logger = logging.getLogger('store')


class StoreUseCases:
    def __init__(self, database, sql_user_repo: UserRepoInterface, user_use_cases: UserUseCases):
        self.database = database
        self.sql_user_repo = sql_user_repo
        self.user_use_cases = user_use_cases

    async def initialize(self) -> bool:
        """
        Creates the tables if needed and the default admin account on first run.

        A failure is logged and reported as False. The application keeps running
        and every later operation reports its own store error.
        """
        try:
            await self.database.create_schema()
            admin = await self.sql_user_repo.get_by_username(DEFAULT_ADMIN_USERNAME)
        except QuizAppError as e:
            logger.error("DATABASE INITIALIZATION FAILED: %s", e)
            return False
        if admin is None:
            status = await self.user_use_cases.register(
                DEFAULT_ADMIN_USERNAME, DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD, True)
            if status is Status.STORE_ERROR:
                logger.error("DEFAULT ADMIN NOT CREATED: %s", status.value)
                return False
            if status is Status.SUCCESS:
                logger.warning("DEFAULT ADMIN %r CREATED WITH THE DEFAULT PASSWORD, CHANGE IT AFTER THE FIRST LOGIN",
                               DEFAULT_ADMIN_USERNAME)
        logger.info("DATABASE READY AT %s", self.database.path)
        return True
