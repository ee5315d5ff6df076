"""Rating entity"""
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from movie_catalog_service.models.base import Base


def _utcnow() -> datetime:
    # Columns are naive DateTime holding UTC
    return datetime.now(UTC).replace(tzinfo=None)


class Rating(Base):
    """A single score (0.0 to 10.0) given to a movie."""
    __tablename__ = "ratings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    score = Column(Float, nullable=False)
    review = Column(Text, nullable=True)
    reviewer_name = Column(String(100), nullable=True)
    source = Column(String(50), nullable=True)  # e.g. 'IMDb', 'TMDB', 'User'

    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    movie_id = Column(
        Integer,
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    movie = relationship("Movie", back_populates="ratings")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "score": self.score,
            "review": self.review,
            "reviewer_name": self.reviewer_name,
            "source": self.source,
            "movie_id": self.movie_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def __repr__(self):
        return f"<Rating(id={self.id}, movie_id={self.movie_id}, score={self.score})>"
