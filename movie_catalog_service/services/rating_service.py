"""Service for movie ratings."""
import logging
from typing import Dict, List, Optional

from movie_catalog_service.exceptions import NotFoundError, ValidationError
from movie_catalog_service.repos import MovieRepository, RatingRepository
from movie_catalog_service.schemas import RatingCreate, RatingUpdate
from movie_catalog_service.services.base import CatalogService

logger = logging.getLogger(__name__)


class RatingService(CatalogService):
    """Service for movie ratings."""

    def create_rating(self, payload: Optional[Dict]) -> Dict:
        """
        Rate a movie.

        Raises:
            ValidationError: If the payload is invalid or the movie does not exist
        """
        data = self.parse_payload(RatingCreate, payload)

        with self.session() as db:
            if MovieRepository(db).get_movie(data.movie_id) is None:
                raise ValidationError(f"Movie with ID {data.movie_id} not found")

            rating = RatingRepository(db).create_rating(data.model_dump(exclude_none=True))
            logger.info(f"Created rating {rating.id} for movie {rating.movie_id}")
            return rating.to_dict()

    def list_ratings(self) -> List[Dict]:
        with self.session() as db:
            return [rating.to_dict() for rating in RatingRepository(db).list_ratings()]

    def get_rating(self, rating_id: int) -> Dict:
        with self.session() as db:
            rating = RatingRepository(db).get_rating(rating_id)
            if rating is None:
                raise NotFoundError("Rating", rating_id)
            data = rating.to_dict()
            data["movie"] = rating.movie.to_summary()
            return data

    def get_ratings_by_movie(self, movie_id: int) -> List[Dict]:
        with self.session() as db:
            return [rating.to_dict() for rating in RatingRepository(db).find_by_movie(movie_id)]

    def update_rating(self, rating_id: int, payload: Optional[Dict]) -> Dict:
        """Partially update a rating. The rated movie cannot change."""
        data = self.parse_payload(RatingUpdate, payload)
        rating_data = data.model_dump(exclude_unset=True)

        if "score" in rating_data and rating_data["score"] is None:
            raise ValidationError("score cannot be null")

        with self.session() as db:
            repo = RatingRepository(db)
            rating = repo.get_rating(rating_id)
            if rating is None:
                raise NotFoundError("Rating", rating_id)
            return repo.update_rating(rating, rating_data).to_dict()

    def delete_rating(self, rating_id: int) -> None:
        with self.session() as db:
            repo = RatingRepository(db)
            rating = repo.get_rating(rating_id)
            if rating is None:
                raise NotFoundError("Rating", rating_id)
            repo.delete_rating(rating)

    def get_average_rating(self, movie_id: int) -> Dict:
        """
        Average score of a movie, rounded to one decimal place.

        A movie without ratings averages 0.0 with a count of 0, the same
        value the featured ranking uses for unrated items.

        Returns:
            Dict with movie_id, average and count

        Raises:
            NotFoundError: If the movie does not exist
        """
        with self.session() as db:
            if MovieRepository(db).get_movie(movie_id) is None:
                raise NotFoundError("Movie", movie_id)
            average, count = RatingRepository(db).get_score_stats(movie_id)

        return {
            "movie_id": movie_id,
            "average": round(average, 1) if average is not None else 0.0,
            "count": count,
        }
