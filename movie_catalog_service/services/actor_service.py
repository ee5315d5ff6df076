"""Service for actor CRUD and search."""
import logging
from typing import Dict, List, Optional

from movie_catalog_service.exceptions import NotFoundError, ValidationError
from movie_catalog_service.repos import ActorRepository, MovieRepository
from movie_catalog_service.schemas import ActorCreate, ActorUpdate
from movie_catalog_service.services.base import CatalogService

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("first_name", "last_name")


class ActorService(CatalogService):
    """Service for actor CRUD and search."""

    def create_actor(self, payload: Optional[Dict]) -> Dict:
        """
        Create an actor from a request payload.

        Args:
            payload: Dict matching ActorCreate

        Returns:
            Created actor with movies
        """
        data = self.parse_payload(ActorCreate, payload)
        actor_data = data.model_dump(exclude={"movie_ids"}, exclude_none=True)

        with self.session() as db:
            actor = ActorRepository(db).create_actor(actor_data, movie_ids=data.movie_ids)
            return actor.to_dict()

    def list_actors(self, search: Optional[str] = None) -> List[Dict]:
        """Get all actors, or those matching a search term."""
        search = search.strip() if search else None

        with self.session() as db:
            return [actor.to_dict() for actor in ActorRepository(db).list_actors(search=search)]

    def get_actor(self, actor_id: int) -> Dict:
        """Get an actor with movies."""
        with self.session() as db:
            actor = ActorRepository(db).get_actor(actor_id)
            if actor is None:
                raise NotFoundError("Actor", actor_id)
            return actor.to_dict()

    def get_actor_movies(self, actor_id: int) -> List[Dict]:
        """Get the movies of an actor."""
        with self.session() as db:
            actor = ActorRepository(db).get_actor(actor_id)
            if actor is None:
                raise NotFoundError("Actor", actor_id)
            return [movie.to_summary() for movie in actor.movies]

    def get_actors_by_movie(self, movie_id: int) -> List[Dict]:
        """Get the cast of a movie."""
        with self.session() as db:
            if MovieRepository(db).get_movie(movie_id) is None:
                raise NotFoundError("Movie", movie_id)
            return [actor.to_dict() for actor in ActorRepository(db).find_by_movie(movie_id)]

    def update_actor(self, actor_id: int, payload: Optional[Dict]) -> Dict:
        """
        Partially update an actor.

        Args:
            actor_id: Actor to update
            payload: Dict matching ActorUpdate; movie_ids replaces the filmography

        Returns:
            Updated actor
        """
        data = self.parse_payload(ActorUpdate, payload)
        actor_data = data.model_dump(exclude={"movie_ids"}, exclude_unset=True)

        for field in _REQUIRED_FIELDS:
            if field in actor_data and actor_data[field] is None:
                raise ValidationError(f"{field} cannot be null")

        with self.session() as db:
            repo = ActorRepository(db)
            actor = repo.get_actor(actor_id)
            if actor is None:
                raise NotFoundError("Actor", actor_id)

            actor = repo.update_actor(actor, actor_data, movie_ids=data.movie_ids)
            logger.info(f"Updated actor {actor_id}")
            return actor.to_dict()

    def delete_actor(self, actor_id: int) -> None:
        """Delete an actor."""
        with self.session() as db:
            repo = ActorRepository(db)
            actor = repo.get_actor(actor_id)
            if actor is None:
                raise NotFoundError("Actor", actor_id)
            repo.delete_actor(actor)
