"""Select the featured movies/actors shown on the catalog front page."""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from movie_catalog_service.exceptions import InvalidLimitError

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_LIMIT = 6


@dataclass(frozen=True)
class FeaturedCandidate:
    """
    Ranking view of a movie or actor.

    Attributes:
        item: The underlying record, returned as-is when selected
        display_fields: Values that must all be populated for the item to be shown
        secondary_count: Number of linked actors (for a movie) or movies (for an actor)
        scores: Every rating score reachable from the item
        created_at: Creation timestamp, newer wins ties
    """
    item: Any
    display_fields: Tuple[Any, ...]
    secondary_count: int
    scores: Tuple[float, ...] = ()
    created_at: Optional[datetime] = None


def mean_score(scores: Sequence[float]) -> float:
    """
    Arithmetic mean of rating scores.

    Args:
        scores: Rating scores

    Returns:
        Mean score, or 0.0 when there are no scores
    """
    if not scores:
        return 0.0
    return float(sum(scores)) / len(scores)


def _is_populated(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_eligible(candidate: FeaturedCandidate) -> bool:
    """An item is eligible when every display field is set and it has a linked record."""
    return candidate.secondary_count > 0 and all(
        _is_populated(value) for value in candidate.display_fields
    )


def validate_limit(limit: Any) -> int:
    """
    Check that a result limit is a positive integer.

    Raises:
        InvalidLimitError: If limit is not an int or is less than 1
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidLimitError(f"limit must be a positive integer, got {limit!r}")
    return limit


def _recency_key(candidate: FeaturedCandidate) -> Tuple[bool, Optional[datetime]]:
    # Missing timestamps sort as oldest
    return candidate.created_at is not None, candidate.created_at


def select_featured(
        candidates: Iterable[FeaturedCandidate],
        limit: int = DEFAULT_FEATURED_LIMIT
) -> List[Any]:
    """
    Pick up to `limit` eligible items ranked by mean rating score.

    Ineligible candidates are dropped. The rest are ordered by descending mean
    score, then by descending creation time; items equal on both keep their
    input order.

    Args:
        candidates: Candidates to rank
        limit: Maximum number of items to return

    Returns:
        The selected items (``candidate.item``), best first

    Raises:
        InvalidLimitError: If limit is not a positive integer
    """
    validate_limit(limit)

    eligible = [candidate for candidate in candidates if is_eligible(candidate)]
    scored = [(mean_score(candidate.scores), candidate) for candidate in eligible]

    # Two stable passes: secondary key first, then primary key
    scored.sort(key=lambda entry: _recency_key(entry[1]), reverse=True)
    scored.sort(key=lambda entry: entry[0], reverse=True)

    selected = [candidate.item for _, candidate in scored[:limit]]
    logger.debug(f"Selected {len(selected)} featured items from {len(eligible)} eligible")
    return selected


def movie_candidate(movie) -> FeaturedCandidate:
    """Build the ranking view of a Movie (ratings and actors must be loaded)."""
    return FeaturedCandidate(
        item=movie,
        display_fields=(
            movie.title,
            movie.description,
            movie.genre,
            movie.release_year,
            movie.poster_url,
        ),
        secondary_count=len(movie.actors),
        scores=tuple(rating.score for rating in movie.ratings),
        created_at=movie.created_at,
    )


def actor_candidate(actor) -> FeaturedCandidate:
    """Build the ranking view of an Actor; scores come from all of its movies' ratings."""
    return FeaturedCandidate(
        item=actor,
        display_fields=(
            actor.first_name,
            actor.last_name,
            actor.biography,
            actor.nationality,
            actor.photo_url,
        ),
        secondary_count=len(actor.movies),
        scores=tuple(rating.score for movie in actor.movies for rating in movie.ratings),
        created_at=actor.created_at,
    )


def select_featured_movies(movies: Iterable, limit: int = DEFAULT_FEATURED_LIMIT) -> List:
    """Featured movies from a materialized list of Movie records."""
    return select_featured((movie_candidate(movie) for movie in movies), limit)


def select_featured_actors(actors: Iterable, limit: int = DEFAULT_FEATURED_LIMIT) -> List:
    """Featured actors from a materialized list of Actor records."""
    return select_featured((actor_candidate(actor) for actor in actors), limit)
