"""SQLAlchemy models"""

from movie_catalog_service.models.base import Base
from movie_catalog_service.models.movie import Movie, movie_actors
from movie_catalog_service.models.actor import Actor
from movie_catalog_service.models.rating import Rating

__all__ = [
    "Base",
    "Movie",
    "Actor",
    "Rating",
    "movie_actors",
]
