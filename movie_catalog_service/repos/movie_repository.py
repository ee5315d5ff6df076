"""Repository for movies and their actor links."""

import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy import and_, desc, or_
from sqlalchemy.orm import Session, selectinload

from movie_catalog_service.models import Actor, Movie, movie_actors

logger = logging.getLogger(__name__)


class MovieRepository:
    """
    Repository for movies and their actor links.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query_with_relations(self):
        return self.db.query(Movie).options(
            selectinload(Movie.actors),
            selectinload(Movie.ratings),
        )

    def _actors_by_ids(self, actor_ids: List[int]) -> List[Actor]:
        if not actor_ids:
            return []
        return self.db.query(Actor).filter(Actor.id.in_(actor_ids)).all()

    def create_movie(
            self,
            movie_data: Dict,
            actor_ids: Optional[List[int]] = None,
            commit: bool = True
    ) -> Movie:
        """
        Create a movie.

        Args:
            movie_data: Column values (title, description, genre, ...)
            actor_ids: IDs of actors to link; unknown IDs are ignored
            commit: Commit now; False only flushes so the caller owns the transaction

        Returns:
            Movie object
        """
        movie = Movie(**movie_data)
        if actor_ids:
            movie.actors = self._actors_by_ids(actor_ids)

        self.db.add(movie)
        if commit:
            self.db.commit()
            self.db.refresh(movie)
        else:
            self.db.flush()

        logger.info(f"Created movie {movie.id}: {movie.title}")
        return movie

    def get_movie(self, movie_id: int) -> Movie | None:
        """Get movie by ID with actors and ratings loaded."""
        return self._query_with_relations().filter(Movie.id == movie_id).first()

    def get_movie_by_title(self, title: str) -> Movie | None:
        """Get the first movie with an exact title match."""
        return self.db.query(Movie).filter(Movie.title == title).first()

    # noinspection PyTypeChecker
    def list_movies(
            self,
            page: int = 1,
            limit: int = 20,
            search: Optional[str] = None
    ) -> Tuple[List[Movie], int]:
        """
        Get one page of movies, newest ID first.

        Args:
            page: 1-based page number
            limit: Page size
            search: Optional case-insensitive substring matched against
                title, genre and description

        Returns:
            Tuple of (movies on this page, total matching movies)
        """
        query = self.db.query(Movie)

        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Movie.title.ilike(pattern),
                    Movie.genre.ilike(pattern),
                    Movie.description.ilike(pattern),
                )
            )

        total = query.count()

        movies = (
            query.options(selectinload(Movie.actors), selectinload(Movie.ratings))
            .order_by(desc(Movie.id))
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )

        return movies, total

    def update_movie(
            self,
            movie: Movie,
            movie_data: Dict,
            actor_ids: Optional[List[int]] = None
    ) -> Movie:
        """
        Apply a partial update to a movie.

        Args:
            movie: Movie to update
            movie_data: Column values to change
            actor_ids: Replacement actor IDs; None leaves actors untouched,
                an empty list removes them all

        Returns:
            Updated Movie object
        """
        for field, value in movie_data.items():
            setattr(movie, field, value)

        if actor_ids is not None:
            movie.actors = self._actors_by_ids(actor_ids)

        self.db.commit()
        self.db.refresh(movie)

        return movie

    def delete_movie(self, movie: Movie) -> None:
        """Delete a movie together with its ratings and actor links."""
        movie_id = movie.id
        self.db.delete(movie)
        self.db.commit()

        logger.info(f"Deleted movie {movie_id}")

    # noinspection PyTypeChecker
    def find_by_actor(self, actor_id: int) -> List[Movie]:
        """Get all movies an actor appears in."""
        return (
            self._query_with_relations()
            .filter(Movie.actors.any(Actor.id == actor_id))
            .all()
        )

    # noinspection PyTypeChecker
    def get_featured_candidates(self) -> List[Movie]:
        """
        Get movies that can be featured: all display fields filled in and
        at least one actor. Actors and ratings are loaded for ranking.
        """
        return (
            self._query_with_relations()
            .filter(
                and_(
                    Movie.title.isnot(None),
                    Movie.title != "",
                    Movie.description.isnot(None),
                    Movie.description != "",
                    Movie.genre.isnot(None),
                    Movie.genre != "",
                    Movie.release_year.isnot(None),
                    Movie.poster_url.isnot(None),
                    Movie.poster_url != "",
                    Movie.actors.any(),
                )
            )
            .all()
        )

    def count_movies(self) -> int:
        """Count total movies."""
        return self.db.query(Movie).count()

    def delete_all(self) -> int:
        """Delete every movie and all actor links. Returns the number of deleted movies."""
        self.db.execute(movie_actors.delete())
        count = self.db.query(Movie).delete()
        self.db.commit()
        return count
