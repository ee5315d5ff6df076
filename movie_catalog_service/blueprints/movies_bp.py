"""Movie catalog endpoints."""
import azure.functions as func
import logging

from movie_catalog_service.blueprints.http import (
    handle_errors,
    json_body,
    json_response,
    no_content,
    query_int,
    require_api_key,
    route_int,
)
from movie_catalog_service.services import ActorService, FeaturedService, MovieService

# Initialize blueprint
bp = func.Blueprint()

# Initialize services (singleton pattern)
movie_service = MovieService()
actor_service = ActorService()
featured_service = FeaturedService()

logger = logging.getLogger(__name__)


@bp.route(route="movies", methods=["GET", "POST"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def movies(req: func.HttpRequest) -> func.HttpResponse:
    """
    List or create movies.

    GET query parameters:
        - page: Page number (default: 1)
        - limit: Page size (default: 20, max: 100)
        - search: Text matched against title, genre and description

    POST (API key required): MovieCreate body.
    """
    if req.method == "POST":
        require_api_key(req)
        movie = movie_service.create_movie(json_body(req))
        return json_response(movie, status_code=201)

    result = movie_service.list_movies(
        page=query_int(req, 'page', 1),
        limit=query_int(req, 'limit', 20),
        search=req.params.get('search')
    )
    return json_response(result)


@bp.route(route="movies/recent", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def recent_movies(req: func.HttpRequest) -> func.HttpResponse:
    """
    Featured movies: complete records with a cast, best average rating first.

    Query Parameters:
        - limit: Number of movies (default: FEATURED_LIMIT, 6)
    """
    featured = featured_service.get_featured_movies(limit=query_int(req, 'limit'))
    return json_response(featured)


@bp.route(route="movies/{movie_id:int}", methods=["GET", "PATCH", "DELETE"],
          auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def movie_detail(req: func.HttpRequest) -> func.HttpResponse:
    """Get, update (API key) or delete (API key) a movie."""
    movie_id = route_int(req, 'movie_id')

    if req.method == "PATCH":
        require_api_key(req)
        return json_response(movie_service.update_movie(movie_id, json_body(req)))

    if req.method == "DELETE":
        require_api_key(req)
        movie_service.delete_movie(movie_id)
        logger.info(f"Movie {movie_id} deleted")
        return no_content()

    return json_response(movie_service.get_movie(movie_id))


@bp.route(route="movies/{movie_id:int}/actors", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def movie_actors(req: func.HttpRequest) -> func.HttpResponse:
    """Cast of a movie."""
    movie_id = route_int(req, 'movie_id')
    return json_response(actor_service.get_actors_by_movie(movie_id))


# noinspection PyUnusedLocal
@bp.route(route="catalog/health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint."""
    return json_response({
        "status": "healthy",
        "service": "movie-catalog-service",
        "version": "1.0.0"
    })
