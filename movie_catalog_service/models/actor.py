"""Actor entity"""
from datetime import UTC, datetime

from sqlalchemy import Column, Date, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from movie_catalog_service.models.base import Base
from movie_catalog_service.models.movie import movie_actors


def _utcnow() -> datetime:
    # Columns are naive DateTime holding UTC
    return datetime.now(UTC).replace(tzinfo=None)


class Actor(Base):
    """An actor appearing in one or more catalog movies."""
    __tablename__ = "actors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    date_of_birth = Column(Date, nullable=True)
    nationality = Column(String(100), nullable=True)
    biography = Column(Text, nullable=True)
    photo_url = Column(String(500), nullable=True)

    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    movies = relationship("Movie", secondary=movie_actors, back_populates="actors")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def rating_scores(self) -> list[float]:
        """All rating scores reachable through the actor's movies."""
        return [rating.score for movie in self.movies for rating in movie.ratings]

    def to_summary(self) -> dict:
        """Flat representation without relations."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "date_of_birth": self.date_of_birth,
            "nationality": self.nationality,
            "biography": self.biography,
            "photo_url": self.photo_url,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def to_dict(self) -> dict:
        """Representation including the actor's movies."""
        data = self.to_summary()
        data["movies"] = [movie.to_summary() for movie in self.movies]
        return data

    def __repr__(self):
        return f"<Actor(id={self.id}, name='{self.full_name}')>"
