import aiosqlite
from typing import Optional
from app.domain.repositories_interfaces.user_repo import UserRepoInterface
from app.domain.entities.user import User
from app.domain.exceptions import ConflictError
from infrastructure.sqlite_config import SQLiteDatabase
from infrastructure.repositories.errors import store_errors


class SQLiteUserRepo(UserRepoInterface):
    def __init__(self, database: SQLiteDatabase):
        self.database = database

    @store_errors
    async def get(self, user_id: int) -> Optional[User]:
        async with self.database.get_connection() as conn:
            async with conn.execute(
                "SELECT id, username, email, is_admin, created_at FROM users WHERE id=?", (user_id,)
            ) as cursor:
                result = await cursor.fetchone()
                if result:
                    return User.model_validate(dict(result))
                return None

    @store_errors
    async def get_by_username(self, username: str) -> Optional[User]:
        async with self.database.get_connection() as conn:
            async with conn.execute("SELECT * FROM users WHERE username=?", (username,)) as cursor:
                result = await cursor.fetchone()
                if result:
                    return User.model_validate(dict(result))
                return None

    @store_errors
    async def save(self, user: User) -> User:
        async with self.database.get_connection() as conn:
            try:
                async with conn.execute(
                    '''INSERT INTO users (username, email, password_hash, salt, is_admin) VALUES (?, ?, ?, ?, ?)''',
                    (user.username, user.email, user.password_hash, user.salt, user.is_admin)
                ) as cursor:
                    user_id = cursor.lastrowid
            except aiosqlite.IntegrityError as e:
                # Only the UNIQUE constraint on username is a conflict, NOT NULL and the like are store errors
                if 'UNIQUE constraint failed: users.username' not in str(e):
                    raise
                raise ConflictError(f"Username {user.username!r} is already taken") from e
            await conn.commit()
            return user.model_copy(update={'id': user_id})
