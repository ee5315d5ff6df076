"""Pydantic request schemas"""

from movie_catalog_service.schemas.movie import MovieCreate, MovieUpdate
from movie_catalog_service.schemas.actor import ActorCreate, ActorUpdate
from movie_catalog_service.schemas.rating import RatingCreate, RatingUpdate

__all__ = [
    "MovieCreate",
    "MovieUpdate",
    "ActorCreate",
    "ActorUpdate",
    "RatingCreate",
    "RatingUpdate",
]
