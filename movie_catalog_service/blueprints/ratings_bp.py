"""Rating endpoints."""
import azure.functions as func

from movie_catalog_service.blueprints.http import (
    handle_errors,
    json_body,
    json_response,
    no_content,
    require_api_key,
    route_int,
)
from movie_catalog_service.services import RatingService

bp = func.Blueprint()

rating_service = RatingService()


@bp.route(route="ratings", methods=["GET", "POST"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def ratings(req: func.HttpRequest) -> func.HttpResponse:
    """List ratings, or create one (API key required)."""
    if req.method == "POST":
        require_api_key(req)
        rating = rating_service.create_rating(json_body(req))
        return json_response(rating, status_code=201)

    return json_response(rating_service.list_ratings())


@bp.route(route="ratings/{rating_id:int}", methods=["GET", "PATCH", "DELETE"],
          auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def rating_detail(req: func.HttpRequest) -> func.HttpResponse:
    rating_id = route_int(req, 'rating_id')

    if req.method == "PATCH":
        require_api_key(req)
        return json_response(rating_service.update_rating(rating_id, json_body(req)))

    if req.method == "DELETE":
        require_api_key(req)
        rating_service.delete_rating(rating_id)
        return no_content()

    return json_response(rating_service.get_rating(rating_id))


@bp.route(route="ratings/movie/{movie_id:int}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def movie_ratings(req: func.HttpRequest) -> func.HttpResponse:
    movie_id = route_int(req, 'movie_id')
    return json_response(rating_service.get_ratings_by_movie(movie_id))


@bp.route(route="ratings/movie/{movie_id:int}/average", methods=["GET"],
          auth_level=func.AuthLevel.ANONYMOUS)
@handle_errors
def movie_average_rating(req: func.HttpRequest) -> func.HttpResponse:
    """Average score of a movie; unrated movies report 0.0 with count 0."""
    movie_id = route_int(req, 'movie_id')
    return json_response(rating_service.get_average_rating(movie_id))
