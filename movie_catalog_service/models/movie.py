"""Movie entity and the movie/actor association table."""
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from movie_catalog_service.models.base import Base
from movie_catalog_service.ranking.featured_selector import mean_score


def _utcnow() -> datetime:
    # Columns are naive DateTime holding UTC
    return datetime.now(UTC).replace(tzinfo=None)


movie_actors = Table(
    "movie_actors",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("actor_id", Integer, ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True),
)


class Movie(Base):
    """A movie in the catalog.

    Ratings belong to exactly one movie and are removed with it.
    """
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    genre = Column(String(100), nullable=True)
    release_year = Column(Integer, nullable=True)
    duration = Column(Integer, nullable=True)  # minutes
    poster_url = Column(String(500), nullable=True)

    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    actors = relationship("Actor", secondary=movie_actors, back_populates="movies")
    ratings = relationship(
        "Rating",
        back_populates="movie",
        cascade="all, delete-orphan",
    )

    @property
    def average_rating(self) -> float:
        """Mean of all rating scores, 0.0 when unrated."""
        return mean_score([rating.score for rating in self.ratings])

    def to_summary(self) -> dict:
        """Flat representation without relations."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "genre": self.genre,
            "release_year": self.release_year,
            "duration": self.duration,
            "poster_url": self.poster_url,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def to_dict(self) -> dict:
        """Representation with actors, ratings and the average rating."""
        data = self.to_summary()
        data["actors"] = [actor.to_summary() for actor in self.actors]
        data["ratings"] = [rating.to_dict() for rating in self.ratings]
        data["average_rating"] = self.average_rating
        return data

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}')>"
