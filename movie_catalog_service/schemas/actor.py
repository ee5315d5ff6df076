"""
Pydantic schemas for Actor API.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from movie_catalog_service.schemas._validators import check_http_url


class ActorUpdate(BaseModel):
    """Request body for updating an actor. Only provided fields are changed."""

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    date_of_birth: Optional[date] = None
    nationality: Optional[str] = Field(None, min_length=1, max_length=100)
    biography: Optional[str] = None
    photo_url: Optional[str] = Field(None, max_length=500)
    movie_ids: Optional[List[int]] = None

    @field_validator("photo_url")
    @classmethod
    def photo_url_is_http(cls, value: Optional[str]) -> Optional[str]:
        return check_http_url(value)


class ActorCreate(ActorUpdate):
    """Request body for creating an actor."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
