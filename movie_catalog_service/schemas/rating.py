"""
Pydantic schemas for Rating API.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RatingUpdate(BaseModel):
    """Request body for updating a rating. The rated movie cannot be changed."""

    model_config = ConfigDict(extra="forbid")

    score: Optional[float] = Field(None, ge=0.0, le=10.0)
    review: Optional[str] = None
    reviewer_name: Optional[str] = Field(None, min_length=1, max_length=100)
    source: Optional[str] = Field(None, min_length=1, max_length=50)

    @field_validator("score")
    @classmethod
    def score_has_one_decimal(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and round(value, 1) != value:
            raise ValueError("must have at most one decimal place")
        return value


class RatingCreate(RatingUpdate):
    """Request body for creating a rating."""

    score: float = Field(..., ge=0.0, le=10.0)
    movie_id: int = Field(..., gt=0)
