from app.domain.entities.user import User
from abc import ABC, abstractmethod
from typing import Optional


class UserRepoInterface(ABC):
    @abstractmethod
    async def get(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Returns the user together with its password hash and salt.

        :param username: Exact, case-sensitive username.
        :return: The User or None if no account has this username.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Inserts a new user.

        :raises ConflictError: If the username is already taken.
        :return: The stored User with its id.
        """
        raise NotImplementedError
