"""Actor catalog endpoints."""
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

bp = func.Blueprint()

actor_service = ActorService()
movie_service = MovieService()
featured_service = FeaturedService()

logger = logging.getLogger(__name__)


@bp.route(route="actors", methods=["GET", "POST"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def actors(req: func.HttpRequest) -> func.HttpResponse:
    """
    List or create actors.

    GET query parameters:
        - search: Text matched against name, nationality and biography

    POST (API key required): ActorCreate body.
    """
    if req.method == "POST":
        require_api_key(req)
        actor = actor_service.create_actor(json_body(req))
        return json_response(actor, status_code=201)

    return json_response(actor_service.list_actors(search=req.params.get('search')))


@bp.route(route="actors/recent", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def recent_actors(req: func.HttpRequest) -> func.HttpResponse:
    """
    Featured actors: complete records with at least one movie, ranked by the
    average rating of their movies.

    Query Parameters:
        - limit: Number of actors (default: FEATURED_LIMIT, 6)
    """
    featured = featured_service.get_featured_actors(limit=query_int(req, 'limit'))
    return json_response(featured)


@bp.route(route="actors/{actor_id:int}", methods=["GET", "PATCH", "DELETE"],
          auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def actor_detail(req: func.HttpRequest) -> func.HttpResponse:
    """Get, update (API key) or delete (API key) an actor."""
    actor_id = route_int(req, 'actor_id')

    if req.method == "PATCH":
        require_api_key(req)
        return json_response(actor_service.update_actor(actor_id, json_body(req)))

    if req.method == "DELETE":
        require_api_key(req)
        actor_service.delete_actor(actor_id)
        logger.info(f"Actor {actor_id} deleted")
        return no_content()

    return json_response(actor_service.get_actor(actor_id))


@bp.route(route="actors/{actor_id:int}/movies", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def actor_movies(req: func.HttpRequest) -> func.HttpResponse:
    """Movies an actor appears in, with ratings."""
    actor_id = route_int(req, 'actor_id')
    return json_response(movie_service.get_movies_by_actor(actor_id))
