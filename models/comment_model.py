# comment_model.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional

from models.recipe_model import AuthorOut


class CommentIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipe_id: str = Field(..., alias="recipeId")
    content: str = Field(..., max_length=2000)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Comment content cannot be empty")
        return v


class CommentOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    recipe: str
    author: Optional[AuthorOut] = None
    content: str
    created_at: datetime = Field(..., alias="createdAt")
