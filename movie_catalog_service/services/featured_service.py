"""Service for the featured ("recent") movies and actors."""
import logging
from typing import Dict, List, Optional

from movie_catalog_service.config import get_featured_limit
from movie_catalog_service.ranking import (
    mean_score,
    select_featured_actors,
    select_featured_movies,
    validate_limit,
)
from movie_catalog_service.repos import ActorRepository, MovieRepository
from movie_catalog_service.services.base import CatalogService

logger = logging.getLogger(__name__)


class FeaturedService(CatalogService):
    """
    Serves the best-rated complete movies and actors.

    Each call reads one snapshot of candidates and ranks it in memory;
    nothing is cached between calls.
    """

    def _resolve_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return get_featured_limit()
        return validate_limit(limit)

    def get_featured_movies(self, limit: Optional[int] = None) -> List[Dict]:
        """
        Get featured movies, best average rating first.

        Args:
            limit: Maximum number of movies (default: FEATURED_LIMIT config, 6)

        Returns:
            List of movie dicts including average_rating

        Raises:
            InvalidLimitError: If limit is not a positive integer
            DataAccessError: If the database cannot be read
        """
        limit = self._resolve_limit(limit)

        with self.session() as db:
            candidates = MovieRepository(db).get_featured_candidates()
            featured = select_featured_movies(candidates, limit)
            result = [movie.to_dict() for movie in featured]

        logger.info(f"Selected {len(result)} featured movies from {len(candidates)} candidates")
        return result

    def get_featured_actors(self, limit: Optional[int] = None) -> List[Dict]:
        """
        Get featured actors, best average rating across their movies first.

        Args:
            limit: Maximum number of actors (default: FEATURED_LIMIT config, 6)

        Returns:
            List of actor dicts including average_rating
        """
        limit = self._resolve_limit(limit)

        with self.session() as db:
            candidates = ActorRepository(db).get_featured_candidates()
            featured = select_featured_actors(candidates, limit)

            result = []
            for actor in featured:
                data = actor.to_dict()
                data["average_rating"] = mean_score(actor.rating_scores)
                result.append(data)

        logger.info(f"Selected {len(result)} featured actors from {len(candidates)} candidates")
        return result
