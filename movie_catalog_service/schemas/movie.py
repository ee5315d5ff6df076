"""
Pydantic schemas for Movie API.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from movie_catalog_service.schemas._validators import check_http_url


def _max_release_year() -> int:
    return date.today().year + 10


class MovieUpdate(BaseModel):
    """Request body for updating a movie. Only provided fields are changed."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    genre: Optional[str] = Field(None, min_length=1, max_length=100)
    release_year: Optional[int] = Field(None, ge=1800)
    duration: Optional[int] = Field(None, ge=1)
    poster_url: Optional[str] = Field(None, max_length=500)
    actor_ids: Optional[List[int]] = None

    @field_validator("release_year")
    @classmethod
    def release_year_not_too_far_ahead(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value > _max_release_year():
            raise ValueError(f"must be at most {_max_release_year()}")
        return value

    @field_validator("poster_url")
    @classmethod
    def poster_url_is_http(cls, value: Optional[str]) -> Optional[str]:
        return check_http_url(value)


class MovieCreate(MovieUpdate):
    """Request body for creating a movie."""

    title: str = Field(..., min_length=1, max_length=255)
