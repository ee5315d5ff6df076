"""Service classes"""

from .actor_service import ActorService
from .featured_service import FeaturedService
from .movie_service import MovieService
from .rating_service import RatingService
from .seeding_service import SeedingService
from .tmdb_client import TMDBClient

__all__ = [
    "ActorService",
    "FeaturedService",
    "MovieService",
    "RatingService",
    "SeedingService",
    "TMDBClient",
]
