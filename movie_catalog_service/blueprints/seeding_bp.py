"""Seed or clear the catalog (API key required)."""
import azure.functions as func
import logging

from movie_catalog_service.blueprints.http import (
    handle_errors,
    json_response,
    no_content,
    query_int,
    require_api_key,
)
from movie_catalog_service.exceptions import ConfigurationError
from movie_catalog_service.services import SeedingService

bp = func.Blueprint()

seeding_service = SeedingService()

logger = logging.getLogger(__name__)


@bp.route(route="seeding/movies", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def seed_movies(req: func.HttpRequest) -> func.HttpResponse:
    """
    Import popular movies from TMDB.

    Query Parameters:
        - count: Number of movies (default: 100, max: 500)
    """
    require_api_key(req)
    count = query_int(req, 'count', 100)

    try:
        stats = seeding_service.seed_database(count)
    except ConfigurationError as e:
        logger.warning(f"Seeding not configured: {e}")
        return json_response({
            "message": "TMDB API key not configured. Please add TMDB_API_KEY to your environment variables.",
            "status": "error",
            "instructions": "Get your API key from https://www.themoviedb.org/settings/api",
        }, status_code=503)

    return json_response({
        "message": f"Successfully seeded {stats['created']} movies from TMDB API",
        "status": "completed",
        "stats": stats,
    }, status_code=201)


@bp.route(route="seeding/clear", methods=["DELETE"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def clear_database(req: func.HttpRequest) -> func.HttpResponse:
    """Delete all movies, actors and ratings."""
    require_api_key(req)
    seeding_service.clear_database()
    return no_content()
