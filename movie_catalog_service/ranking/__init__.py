"""Featured item ranking"""

from .featured_selector import (
    DEFAULT_FEATURED_LIMIT,
    FeaturedCandidate,
    actor_candidate,
    is_eligible,
    mean_score,
    movie_candidate,
    select_featured,
    select_featured_actors,
    select_featured_movies,
    validate_limit,
)

__all__ = [
    "DEFAULT_FEATURED_LIMIT",
    "FeaturedCandidate",
    "actor_candidate",
    "is_eligible",
    "mean_score",
    "movie_candidate",
    "select_featured",
    "select_featured_actors",
    "select_featured_movies",
    "validate_limit",
]
