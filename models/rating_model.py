from pydantic import BaseModel, ConfigDict, Field


class RatingRequest(BaseModel):
    """Model for rating recipe requests"""
    value: int = Field(..., ge=1, le=5, description="Rating must be between 1 and 5 stars")


class RatingResultOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    average_rating: float = Field(..., alias="averageRating")
