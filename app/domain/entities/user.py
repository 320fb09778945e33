from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


"""
User Entity:
1. id (int, None): Unique identifier for the user. None until the user is stored.
2. username (str): The username of the user. Unique across all accounts.
3. email (str, None): Contact email given at registration.
4. password_hash (str, None): Base64 SHA-256 digest of salt + password.
5. salt (str, None): Base64 encoded 16 random bytes used for the digest.
Hash and salt are only filled when the user is read for authentication.
6. is_admin (bool): Administrator flag, admins author quizzes and questions.
7. created_at (str, None): Creation timestamp assigned by the database.
"""
class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    username: str
    email: Optional[str] = None
    password_hash: Optional[str] = Field(default=None, repr=False)
    salt: Optional[str] = Field(default=None, repr=False)
    is_admin: bool = False
    created_at: Optional[str] = None
