"""Azure Functions blueprints"""

from movie_catalog_service.blueprints.actors_bp import bp as actors_bp
from movie_catalog_service.blueprints.movies_bp import bp as movies_bp
from movie_catalog_service.blueprints.ratings_bp import bp as ratings_bp
from movie_catalog_service.blueprints.seeding_bp import bp as seeding_bp

__all__ = [
    "actors_bp",
    "movies_bp",
    "ratings_bp",
    "seeding_bp",
]
