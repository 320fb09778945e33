from pydantic import BaseModel, ConfigDict
from typing import Optional


"""
Quiz Entity:
1. id (int, None): Unique identifier for the quiz. None until the quiz is stored.
2. title (str): Title shown in the quiz list.
3. description (str, None): Short description of the quiz.
4. created_by (int, None): Identifier of the administrator who created the quiz.
Required on creation, not needed when a quiz is only updated.
5. created_at (str, None): Creation timestamp assigned by the database.
"""
class Quiz(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    title: str
    description: Optional[str] = None
    created_by: Optional[int] = None
    created_at: Optional[str] = None
