import functools
import aiosqlite
from app.domain.exceptions import StoreUnavailableError


def store_errors(func):
    """Re-raises any database error of a repository method as StoreUnavailableError."""
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except aiosqlite.Error as e:
            raise StoreUnavailableError(str(e)) from e
    return wrapper
