"""Repository for movie ratings."""

import logging
from typing import Dict, List, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from movie_catalog_service.models import Rating

logger = logging.getLogger(__name__)


class RatingRepository:
    """
    Repository for movie ratings.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_rating(self, rating_data: Dict, commit: bool = True) -> Rating:
        """
        Store a rating.

        Args:
            rating_data: Dict with score, movie_id and optional review fields
            commit: Commit now; False only flushes so the caller owns the transaction

        Returns:
            Rating object
        """
        rating = Rating(**rating_data)
        self.db.add(rating)
        if commit:
            self.db.commit()
            self.db.refresh(rating)
        else:
            self.db.flush()

        return rating

    def get_rating(self, rating_id: int) -> Rating | None:
        """Get rating by ID."""
        return (
            self.db.query(Rating)
            .options(joinedload(Rating.movie))
            .filter(Rating.id == rating_id)
            .first()
        )

    # noinspection PyTypeChecker
    def list_ratings(self) -> List[Rating]:
        """Get all ratings."""
        return self.db.query(Rating).order_by(Rating.id).all()

    # noinspection PyTypeChecker
    def find_by_movie(self, movie_id: int) -> List[Rating]:
        """Get all ratings of a movie."""
        return (
            self.db.query(Rating)
            .filter(Rating.movie_id == movie_id)
            .order_by(Rating.id)
            .all()
        )

    def update_rating(self, rating: Rating, rating_data: Dict) -> Rating:
        """Apply a partial update to a rating."""
        for field, value in rating_data.items():
            setattr(rating, field, value)

        self.db.commit()
        self.db.refresh(rating)

        return rating

    def delete_rating(self, rating: Rating) -> None:
        """Delete a rating."""
        self.db.delete(rating)
        self.db.commit()

    def get_score_stats(self, movie_id: int) -> Tuple[float | None, int]:
        """
        Aggregate scores of a movie.

        Returns:
            Tuple of (average score or None when unrated, number of ratings)
        """
        average, count = (
            self.db.query(func.avg(Rating.score), func.count(Rating.id))
            .filter(Rating.movie_id == movie_id)
            .one()
        )
        return (float(average) if average is not None else None), int(count)

    def delete_all(self) -> int:
        """Delete every rating. Returns the number of deleted rows."""
        count = self.db.query(Rating).delete()
        self.db.commit()
        return count
