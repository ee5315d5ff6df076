"""Repository for actors and their movie links."""

import logging
from typing import Dict, List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, selectinload

from movie_catalog_service.models import Actor, Movie, movie_actors

logger = logging.getLogger(__name__)


class ActorRepository:
    """
    Repository for actors and their movie links.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query_with_movies(self):
        return self.db.query(Actor).options(selectinload(Actor.movies))

    def _movies_by_ids(self, movie_ids: List[int]) -> List[Movie]:
        if not movie_ids:
            return []
        return self.db.query(Movie).filter(Movie.id.in_(movie_ids)).all()

    def create_actor(
            self,
            actor_data: Dict,
            movie_ids: Optional[List[int]] = None,
            commit: bool = True
    ) -> Actor:
        """
        Create an actor.

        Args:
            actor_data: Column values (first_name, last_name, ...)
            movie_ids: IDs of movies to link; unknown IDs are ignored
            commit: Commit now; False only flushes so the caller owns the transaction

        Returns:
            Actor object
        """
        actor = Actor(**actor_data)
        if movie_ids:
            actor.movies = self._movies_by_ids(movie_ids)

        self.db.add(actor)
        if commit:
            self.db.commit()
            self.db.refresh(actor)
        else:
            self.db.flush()

        logger.info(f"Created actor {actor.id}: {actor.full_name}")
        return actor

    def get_actor(self, actor_id: int) -> Actor | None:
        """Get actor by ID with movies loaded."""
        return self._query_with_movies().filter(Actor.id == actor_id).first()

    def get_actor_by_name(self, first_name: str, last_name: str) -> Actor | None:
        """Get the first actor with an exact first and last name match."""
        return (
            self.db.query(Actor)
            .filter(and_(Actor.first_name == first_name, Actor.last_name == last_name))
            .first()
        )

    # noinspection PyTypeChecker
    def list_actors(self, search: Optional[str] = None) -> List[Actor]:
        """
        Get all actors, optionally filtered.

        Args:
            search: Case-insensitive substring matched against first name,
                last name, nationality and biography

        Returns:
            List of Actor objects
        """
        query = self._query_with_movies()

        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Actor.first_name.ilike(pattern),
                    Actor.last_name.ilike(pattern),
                    Actor.nationality.ilike(pattern),
                    Actor.biography.ilike(pattern),
                )
            )

        return query.order_by(Actor.id).all()

    def update_actor(
            self,
            actor: Actor,
            actor_data: Dict,
            movie_ids: Optional[List[int]] = None
    ) -> Actor:
        """
        Apply a partial update to an actor.

        Args:
            actor: Actor to update
            actor_data: Column values to change
            movie_ids: Replacement movie IDs; None leaves movies untouched

        Returns:
            Updated Actor object
        """
        for field, value in actor_data.items():
            setattr(actor, field, value)

        if movie_ids is not None:
            actor.movies = self._movies_by_ids(movie_ids)

        self.db.commit()
        self.db.refresh(actor)

        return actor

    def delete_actor(self, actor: Actor) -> None:
        """Delete an actor and its movie links."""
        actor_id = actor.id
        self.db.delete(actor)
        self.db.commit()

        logger.info(f"Deleted actor {actor_id}")

    # noinspection PyTypeChecker
    def find_by_movie(self, movie_id: int) -> List[Actor]:
        """Get the cast of a movie."""
        return (
            self._query_with_movies()
            .filter(Actor.movies.any(Movie.id == movie_id))
            .all()
        )

    # noinspection PyTypeChecker
    def get_featured_candidates(self) -> List[Actor]:
        """
        Get actors that can be featured: all display fields filled in and
        at least one movie. Movies and their ratings are loaded for ranking.
        """
        return (
            self.db.query(Actor)
            .options(selectinload(Actor.movies).selectinload(Movie.ratings))
            .filter(
                and_(
                    Actor.first_name.isnot(None),
                    Actor.first_name != "",
                    Actor.last_name.isnot(None),
                    Actor.last_name != "",
                    Actor.biography.isnot(None),
                    Actor.biography != "",
                    Actor.nationality.isnot(None),
                    Actor.nationality != "",
                    Actor.photo_url.isnot(None),
                    Actor.photo_url != "",
                    Actor.movies.any(),
                )
            )
            .all()
        )

    def count_actors(self) -> int:
        """Count total actors."""
        return self.db.query(Actor).count()

    def delete_all(self) -> int:
        """Delete every actor and all movie links. Returns the number of deleted actors."""
        self.db.execute(movie_actors.delete())
        count = self.db.query(Actor).delete()
        self.db.commit()
        return count
