from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime


def _clean_lines(v: List[str], label: str) -> List[str]:
    # Drop empty entries and surrounding whitespace
    cleaned = [item.strip() for item in v if item and item.strip()]
    if len(cleaned) == 0:
        raise ValueError(f"At least one {label} is required")
    return cleaned


class RecipeIn(BaseModel):
    """Body of POST /recipes"""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., max_length=200)
    ingredients: List[str] = Field(..., max_length=50)
    steps: List[str] = Field(..., max_length=100)
    image: Optional[AnyUrl] = None
    preparation_time: int = Field(..., ge=1, alias="preparationTime", description="Preparation time in minutes")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Please add a title")
        return v

    @field_validator("ingredients")
    @classmethod
    def validate_ingredients(cls, v):
        return _clean_lines(v, "ingredient")

    @field_validator("steps")
    @classmethod
    def validate_steps(cls, v):
        return _clean_lines(v, "step")


class AuthorOut(BaseModel):
    id: str
    username: str


class RatingSummaryOut(BaseModel):
    id: str
    value: int


class CommentSummaryOut(BaseModel):
    id: str
    content: str
    author: Optional[AuthorOut] = None


class RecipeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    ingredients: List[str]
    steps: List[str]
    image: Optional[str] = None
    author: Optional[AuthorOut] = None
    ratings: List[RatingSummaryOut] = Field(default_factory=list)
    comments: List[CommentSummaryOut] = Field(default_factory=list)
    average_rating: float = Field(0.0, alias="averageRating")
    preparation_time: int = Field(..., alias="preparationTime")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class RecipePageOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipes: List[RecipeOut]
    total_pages: int = Field(..., alias="totalPages")
    current_page: int = Field(..., alias="currentPage")
