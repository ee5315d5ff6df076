"""Service to seed the catalog with movies, actors and ratings from TMDB."""
import logging
import math
import random
import time
from datetime import date
from typing import Dict, List, Optional

import requests
from sqlalchemy.orm import Session

from movie_catalog_service.exceptions import ValidationError
from movie_catalog_service.models import Actor, Movie
from movie_catalog_service.repos import ActorRepository, MovieRepository, RatingRepository
from movie_catalog_service.services.base import CatalogService
from movie_catalog_service.services.tmdb_client import TMDBClient

logger = logging.getLogger(__name__)

TMDB_PAGE_SIZE = 20
CAST_PER_MOVIE = 5
MAX_SEED_COUNT = 500


def _split_name(name: str) -> tuple[str, str]:
    """'Keanu Charles Reeves' -> ('Keanu', 'Charles Reeves'); single names repeat."""
    parts = name.split()
    if not parts:
        return name, name
    return parts[0], " ".join(parts[1:]) or parts[0]


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _clamp_score(score: float) -> float:
    return max(0.0, min(10.0, round(score, 1)))


class SeedingService(CatalogService):
    """
    Seeds the catalog from TMDB popular movies.
    """

    def __init__(
            self,
            tmdb_client: Optional[TMDBClient] = None,
            session_factory=None,
            batch_delay: float = 1.0,
            movie_delay: float = 0.2,
            actor_delay: float = 0.1,
            rng: Optional[random.Random] = None
    ):
        """
        Initialize the seeding service.

        Args:
            tmdb_client: TMDB client (default: configured from environment)
            session_factory: Callable returning a new Session
            batch_delay: Seconds to wait between pages of popular movies
            movie_delay: Seconds to wait between movies
            actor_delay: Seconds to wait between person lookups
            rng: Random source for the jittered critic score
        """
        super().__init__(session_factory)
        self.tmdb = tmdb_client or TMDBClient()
        self.batch_delay = batch_delay
        self.movie_delay = movie_delay
        self.actor_delay = actor_delay
        self.rng = rng or random.Random()

    def seed_database(self, count: int = 100) -> Dict:
        """
        Import `count` popular movies with their top-billed cast and ratings.

        Movies whose title already exists are skipped. A movie or actor that
        fails to import is logged and skipped; failures fetching the genre
        list or a page of movies abort the run.

        Args:
            count: Number of popular movies to process (1 to 500)

        Returns:
            Dict with requested, created, skipped and failed counts
        """
        if count < 1 or count > MAX_SEED_COUNT:
            raise ValidationError(f"count must be between 1 and {MAX_SEED_COUNT}")

        logger.info(f"Starting database seeding with {count} movies...")

        genre_map = self.load_genres()
        stats = {'requested': count, 'created': 0, 'skipped': 0, 'failed': 0}
        number_of_batches = math.ceil(count / TMDB_PAGE_SIZE)

        with self.session() as db:
            for batch in range(1, number_of_batches + 1):
                logger.info(f"Processing batch {batch}/{number_of_batches}...")

                if batch == number_of_batches:
                    take = count % TMDB_PAGE_SIZE or TMDB_PAGE_SIZE
                else:
                    take = TMDB_PAGE_SIZE

                page = self.tmdb.get_popular_movies(page=batch)
                batch_stats = self._process_batch(db, page.get('results', [])[:take], genre_map)
                for key, value in batch_stats.items():
                    stats[key] += value

                if batch < number_of_batches:
                    time.sleep(self.batch_delay)

        logger.info(
            f"✓ Seeding complete: {stats['created']} created, "
            f"{stats['skipped']} skipped, {stats['failed']} failed"
        )
        return stats

    def load_genres(self) -> Dict[int, str]:
        """Fetch the TMDB genre id -> name lookup table."""
        genres = self.tmdb.get_genres().get('genres', [])
        genre_map = {genre['id']: genre['name'] for genre in genres}
        logger.info(f"Loaded {len(genre_map)} genres")
        return genre_map

    def _process_batch(self, db: Session, tmdb_movies: List[Dict], genre_map: Dict[int, str]) -> Dict:
        stats = {'created': 0, 'skipped': 0, 'failed': 0}
        movie_repo = MovieRepository(db)

        for tmdb_movie in tmdb_movies:
            title = tmdb_movie.get('title')
            try:
                if movie_repo.get_movie_by_title(title) is not None:
                    logger.debug(f'Movie "{title}" already exists, skipping')
                    stats['skipped'] += 1
                    continue

                details = self.tmdb.get_movie_details(tmdb_movie['id'])
                cast = self.tmdb.get_movie_cast(tmdb_movie['id']).get('cast', [])

                # Movie, cast and ratings are committed together or not at all
                movie = movie_repo.create_movie(self._movie_data(tmdb_movie, details, genre_map), commit=False)
                movie.actors = self._process_actors(db, cast[:CAST_PER_MOVIE])
                self._create_ratings(db, movie, tmdb_movie.get('vote_average') or 0.0)
                db.commit()

                logger.debug(f"Successfully processed movie: {movie.title}")
                stats['created'] += 1
                time.sleep(self.movie_delay)

            except Exception as e:
                db.rollback()
                logger.warning(f'Failed to process movie "{title}": {e}', exc_info=True)
                stats['failed'] += 1

        return stats

    def _movie_data(self, tmdb_movie: Dict, details: Dict, genre_map: Dict[int, str]) -> Dict:
        genre_ids = tmdb_movie.get('genre_ids') or [g['id'] for g in details.get('genres', [])]
        genre = genre_map.get(genre_ids[0]) if genre_ids else None
        release_date = _parse_date(details.get('release_date') or tmdb_movie.get('release_date'))

        return {
            'title': details.get('title') or tmdb_movie['title'],
            'description': details.get('overview') or tmdb_movie.get('overview') or 'No description available',
            'genre': genre or 'Unknown',
            'release_year': release_date.year if release_date else None,
            'duration': details.get('runtime') or None,
            'poster_url': self.tmdb.full_image_url(details.get('poster_path') or tmdb_movie.get('poster_path')),
        }

    def _process_actors(self, db: Session, cast: List[Dict]) -> List[Actor]:
        actor_repo = ActorRepository(db)
        actors: List[Actor] = []

        for member in cast:
            name = member.get('name', '')
            try:
                first_name, last_name = _split_name(name)
                actor = actor_repo.get_actor_by_name(first_name, last_name)

                if actor is None:
                    person = self.tmdb.get_person_details(member['id'])
                    place_of_birth = person.get('place_of_birth')
                    actor = actor_repo.create_actor({
                        'first_name': first_name,
                        'last_name': last_name,
                        'nationality': place_of_birth.split(', ')[-1] if place_of_birth else None,
                        'biography': person.get('biography') or None,
                        'photo_url': self.tmdb.full_image_url(person.get('profile_path')),
                        'date_of_birth': _parse_date(person.get('birthday')),
                    }, commit=False)
                    logger.debug(f"Created new actor: {actor.full_name}")
                    time.sleep(self.actor_delay)

                actors.append(actor)

            except (requests.RequestException, KeyError) as e:
                logger.warning(f'Failed to process actor "{name}": {e}')

        return actors

    def _create_ratings(self, db: Session, movie: Movie, tmdb_rating: float) -> None:
        rating_repo = RatingRepository(db)
        ratings = [
            {
                'score': _clamp_score(tmdb_rating),
                'review': 'Great movie with excellent performances!',
                'reviewer_name': 'TMDB Community',
                'source': 'TMDB',
            },
            {
                'score': _clamp_score(tmdb_rating + self.rng.random() - 0.5),
                'review': 'Highly recommended for movie enthusiasts.',
                'reviewer_name': 'Film Critic',
                'source': 'Professional Review',
            },
        ]

        for rating_data in ratings:
            rating_repo.create_rating({**rating_data, 'movie_id': movie.id}, commit=False)

    def clear_database(self) -> Dict:
        """
        Delete all ratings, movies and actors.

        Returns:
            Dict with the number of deleted ratings, movies and actors
        """
        logger.info("Clearing database...")

        with self.session() as db:
            deleted = {
                'ratings': RatingRepository(db).delete_all(),
                'movies': MovieRepository(db).delete_all(),
                'actors': ActorRepository(db).delete_all(),
            }

        logger.info(f"✓ Database cleared: {deleted}")
        return deleted
