"""Repository classes"""

from movie_catalog_service.repos.movie_repository import MovieRepository
from movie_catalog_service.repos.actor_repository import ActorRepository
from movie_catalog_service.repos.rating_repository import RatingRepository

__all__ = [
    "MovieRepository",
    "ActorRepository",
    "RatingRepository",
]
