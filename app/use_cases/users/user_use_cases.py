import logging
from typing import Optional
from app.domain.entities.user import User
from app.domain.exceptions import ConflictError, QuizAppError
from app.domain.repositories_interfaces.user_repo import UserRepoInterface
from app.domain.services_interfaces.password_hasher import PasswordHasherInterface
from app.domain.status import Status


logger = logging.getLogger('use_cases')


class UserUseCases:
    def __init__(self, sql_repo: UserRepoInterface, password_hasher: PasswordHasherInterface):
        self.sql_repo = sql_repo
        self.password_hasher = password_hasher

    async def register(self, username: str, email: str, password: str, is_admin: bool = False) -> Status:
        """
        Registers a new account with a freshly salted password digest.

        :param username: Unique username, compared case-sensitively.
        :param email: Contact email of the user.
        :param password: Cleartext password, only its digest is stored.
        :param is_admin: Whether the account may author quizzes.
        :return: SUCCESS, CONFLICT if the username is taken or STORE_ERROR.
        """
        salt = self.password_hasher.generate_salt()
        user = User(
            username=username,
            email=email,
            password_hash=self.password_hasher.hash_password(password, salt),
            salt=salt,
            is_admin=is_admin)
        try:
            await self.sql_repo.save(user)
        except ConflictError:
            logger.info("REGISTER REJECTED, USERNAME TAKEN", extra={'user': username})
            return Status.CONFLICT
        except QuizAppError as e:
            logger.error("REGISTER FAILED: %s", e, extra={'user': username})
            return Status.STORE_ERROR
        logger.info("REGISTER", extra={'user': username})
        return Status.SUCCESS

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Checks the credentials and returns the account on success.

        Unknown usernames and wrong passwords both return None so the caller
        cannot tell which one it was.
        """
        try:
            stored = await self.sql_repo.get_by_username(username)
        except QuizAppError as e:
            logger.error("LOGIN FAILED: %s", e, extra={'user': username})
            return None
        if stored and self.password_hasher.verify(password, stored.salt, stored.password_hash):
            logger.info("LOGIN", extra={'user': username})
            # Credentials never leave the use case
            return stored.model_copy(update={'password_hash': None, 'salt': None})
        logger.info("LOGIN DENIED", extra={'user': username})
        return None

    async def get(self, user_id: int) -> Optional[User]:
        try:
            return await self.sql_repo.get(user_id)
        except QuizAppError as e:
            logger.error("GET USER FAILED: %s", e)
            return None
