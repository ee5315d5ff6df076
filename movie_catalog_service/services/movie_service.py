"""Service for movie CRUD, listing and search."""
import logging
from typing import Dict, List, Optional

from movie_catalog_service.exceptions import NotFoundError, ValidationError
from movie_catalog_service.repos import ActorRepository, MovieRepository
from movie_catalog_service.schemas import MovieCreate, MovieUpdate
from movie_catalog_service.services.base import CatalogService

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class MovieService(CatalogService):
    """
    Service for movie CRUD, listing and search.
    Returns JSON-ready dicts.
    """

    def create_movie(self, payload: Optional[Dict]) -> Dict:
        """
        Create a movie from a request payload.

        Args:
            payload: Dict matching MovieCreate

        Returns:
            Created movie with actors and ratings
        """
        data = self.parse_payload(MovieCreate, payload)
        movie_data = data.model_dump(exclude={"actor_ids"}, exclude_none=True)

        with self.session() as db:
            movie = MovieRepository(db).create_movie(movie_data, actor_ids=data.actor_ids)
            return movie.to_dict()

    def list_movies(
            self,
            page: int = 1,
            limit: int = DEFAULT_PAGE_SIZE,
            search: Optional[str] = None
    ) -> Dict:
        """
        Get one page of movies, optionally filtered by a search term.

        Args:
            page: 1-based page number
            limit: Page size (1 to 100)
            search: Text matched against title, genre and description

        Returns:
            Dict with items, movies (alias of items), total, has_more, page and limit
        """
        if page < 1:
            raise ValidationError("page must be at least 1")
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")

        search = search.strip() if search else None

        with self.session() as db:
            movies, total = MovieRepository(db).list_movies(page=page, limit=limit, search=search)
            items = [movie.to_dict() for movie in movies]

        skip = (page - 1) * limit
        return {
            "items": items,
            "movies": items,
            "total": total,
            "has_more": skip + len(items) < total,
            "page": page,
            "limit": limit,
        }

    def get_movie(self, movie_id: int) -> Dict:
        """Get a movie with actors and ratings."""
        with self.session() as db:
            movie = MovieRepository(db).get_movie(movie_id)
            if movie is None:
                raise NotFoundError("Movie", movie_id)
            return movie.to_dict()

    def get_movie_actors(self, movie_id: int) -> List[Dict]:
        """Get the cast of a movie."""
        with self.session() as db:
            movie = MovieRepository(db).get_movie(movie_id)
            if movie is None:
                raise NotFoundError("Movie", movie_id)
            return [actor.to_summary() for actor in movie.actors]

    def get_movies_by_actor(self, actor_id: int) -> List[Dict]:
        """Get all movies an actor appears in."""
        with self.session() as db:
            if ActorRepository(db).get_actor(actor_id) is None:
                raise NotFoundError("Actor", actor_id)
            return [movie.to_dict() for movie in MovieRepository(db).find_by_actor(actor_id)]

    def update_movie(self, movie_id: int, payload: Optional[Dict]) -> Dict:
        """
        Partially update a movie.

        Args:
            movie_id: Movie to update
            payload: Dict matching MovieUpdate; actor_ids replaces the cast

        Returns:
            Updated movie
        """
        data = self.parse_payload(MovieUpdate, payload)
        movie_data = data.model_dump(exclude={"actor_ids"}, exclude_unset=True)

        if "title" in movie_data and movie_data["title"] is None:
            raise ValidationError("title cannot be null")

        with self.session() as db:
            repo = MovieRepository(db)
            movie = repo.get_movie(movie_id)
            if movie is None:
                raise NotFoundError("Movie", movie_id)

            movie = repo.update_movie(movie, movie_data, actor_ids=data.actor_ids)
            logger.info(f"Updated movie {movie_id}")
            return movie.to_dict()

    def delete_movie(self, movie_id: int) -> None:
        """Delete a movie and its ratings."""
        with self.session() as db:
            repo = MovieRepository(db)
            movie = repo.get_movie(movie_id)
            if movie is None:
                raise NotFoundError("Movie", movie_id)
            repo.delete_movie(movie)
