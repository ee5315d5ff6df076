"""Shared test fixtures and configuration for pytest."""
import pytest
from datetime import date, datetime
from unittest.mock import Mock
from typing import Dict, List
import json
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from movie_catalog_service.models.base import Base
from movie_catalog_service.models.movie import Movie
from movie_catalog_service.models.actor import Actor
from movie_catalog_service.models.rating import Rating


# ===== Database Fixtures =====

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_db_engine):
    """Session factory bound to the test engine, as injected into services."""
    return sessionmaker(bind=test_db_engine, autoflush=False)


@pytest.fixture(scope="function")
def test_db_session(session_factory):
    """Create a database session for testing."""
    session = session_factory()
    yield session
    session.close()


# ===== Sample Data Fixtures =====

@pytest.fixture
def sample_movie_data() -> Dict:
    """Valid movie creation payload."""
    return {
        'title': 'The Matrix',
        'description': 'A hacker learns the world is a simulation.',
        'genre': 'Science Fiction',
        'release_year': 1999,
        'duration': 136,
        'poster_url': 'https://image.tmdb.org/t/p/w500/matrix.jpg',
    }


@pytest.fixture
def sample_actor_data() -> Dict:
    """Valid actor creation payload."""
    return {
        'first_name': 'Keanu',
        'last_name': 'Reeves',
        'date_of_birth': '1964-09-02',
        'nationality': 'Lebanon',
        'biography': 'Canadian actor known for The Matrix.',
        'photo_url': 'https://image.tmdb.org/t/p/w500/keanu.jpg',
    }


@pytest.fixture
def sample_catalog(test_db_session) -> Dict[str, List]:
    """
    Small catalog in the test database.

    - matrix: complete, 2 actors, ratings 9.0 and 8.0 (mean 8.5)
    - speed: complete, 1 actor, rating 7.0
    - draft: missing description, 1 actor, rating 10.0 (not featurable)
    - solo: complete, no actors (not featurable)
    """
    keanu = Actor(
        first_name='Keanu', last_name='Reeves', nationality='Lebanon',
        biography='Canadian actor.', photo_url='https://img/keanu.jpg',
        date_of_birth=date(1964, 9, 2), created_at=datetime(2024, 1, 1),
    )
    carrie = Actor(
        first_name='Carrie-Anne', last_name='Moss', nationality='Canada',
        biography='Canadian actress.', photo_url='https://img/carrie.jpg',
        created_at=datetime(2024, 1, 2),
    )
    sandra = Actor(
        first_name='Sandra', last_name='Bullock', nationality='USA',
        biography=None, photo_url='https://img/sandra.jpg',
        created_at=datetime(2024, 1, 3),
    )

    matrix = Movie(
        title='The Matrix', description='Simulation.', genre='Science Fiction',
        release_year=1999, poster_url='https://img/matrix.jpg',
        created_at=datetime(2024, 2, 1), actors=[keanu, carrie],
        ratings=[Rating(score=9.0, source='TMDB'), Rating(score=8.0, source='User')],
    )
    speed = Movie(
        title='Speed', description='A bus that cannot slow down.', genre='Action',
        release_year=1994, poster_url='https://img/speed.jpg',
        created_at=datetime(2024, 2, 2), actors=[keanu],
        ratings=[Rating(score=7.0)],
    )
    draft = Movie(
        title='Untitled Draft', description=None, genre='Drama',
        release_year=2020, poster_url='https://img/draft.jpg',
        created_at=datetime(2024, 2, 3), actors=[sandra],
        ratings=[Rating(score=10.0)],
    )
    solo = Movie(
        title='Solo Documentary', description='Nobody in it.', genre='Documentary',
        release_year=2010, poster_url='https://img/solo.jpg',
        created_at=datetime(2024, 2, 4),
    )

    test_db_session.add_all([matrix, speed, draft, solo])
    test_db_session.commit()

    return {
        'movies': [matrix, speed, draft, solo],
        'actors': [keanu, carrie, sandra],
    }


# ===== Configuration Fixtures =====

@pytest.fixture
def mock_config(monkeypatch):
    """Mock configuration values."""
    monkeypatch.setenv('DATABASE_URL', 'sqlite:///:memory:')
    monkeypatch.setenv('API_SECRET', 'test-secret')
    monkeypatch.setenv('TMDB_API_KEY', 'test-tmdb-token')
    monkeypatch.setenv('TMDB_BASE_URL', 'http://tmdb.test/3')
    monkeypatch.setenv('TMDB_IMAGE_BASE_URL', 'http://images.test/w500')
    monkeypatch.setenv('FEATURED_LIMIT', '6')


@pytest.fixture
def mock_local_settings(tmp_path):
    """Write a local.settings.json file and return its directory."""
    settings = {
        "Values": {
            "DATABASE_URL": "sqlite:///:memory:",
            "API_SECRET": "settings-secret",
        }
    }

    settings_file = tmp_path / "local.settings.json"
    with open(settings_file, 'w') as f:
        json.dump(settings, f)

    yield settings_file


# ===== Azure Functions Fixtures =====

@pytest.fixture
def mock_http_request():
    """Factory for mock Azure Functions HttpRequest objects."""
    def _make(method='GET', route_params=None, params=None, headers=None, body=None):
        mock_req = Mock()
        mock_req.method = method
        mock_req.route_params = route_params or {}
        mock_req.params = params or {}
        mock_req.headers = headers or {}
        if isinstance(body, Exception):
            mock_req.get_json.side_effect = body
        else:
            mock_req.get_json.return_value = body if body is not None else {}
        return mock_req
    return _make


@pytest.fixture
def auth_headers() -> Dict:
    """Headers carrying the API key set by mock_config."""
    return {'x-api-key': 'test-secret'}


@pytest.fixture
def mock_database_session():
    """Mock database session."""
    mock_session = Mock(spec=Session)
    mock_query = Mock()
    mock_session.query.return_value = mock_query
    mock_query.filter.return_value = mock_query
    mock_query.first.return_value = None
    mock_query.all.return_value = []
    mock_query.count.return_value = 0
    mock_session.close.return_value = None
    return mock_session


# ===== Repository Fixtures =====

@pytest.fixture
def movie_repository(test_db_session):
    """Create MovieRepository with test database session."""
    from movie_catalog_service.repos import MovieRepository
    return MovieRepository(test_db_session)


@pytest.fixture
def actor_repository(test_db_session):
    """Create ActorRepository with test database session."""
    from movie_catalog_service.repos import ActorRepository
    return ActorRepository(test_db_session)


@pytest.fixture
def rating_repository(test_db_session):
    """Create RatingRepository with test database session."""
    from movie_catalog_service.repos import RatingRepository
    return RatingRepository(test_db_session)


# ===== Service Fixtures =====

@pytest.fixture
def movie_service(session_factory):
    from movie_catalog_service.services import MovieService
    return MovieService(session_factory=session_factory)


@pytest.fixture
def actor_service(session_factory):
    from movie_catalog_service.services import ActorService
    return ActorService(session_factory=session_factory)


@pytest.fixture
def rating_service(session_factory):
    from movie_catalog_service.services import RatingService
    return RatingService(session_factory=session_factory)


@pytest.fixture
def featured_service(session_factory):
    from movie_catalog_service.services import FeaturedService
    return FeaturedService(session_factory=session_factory)


@pytest.fixture
def catalog_ids(sample_catalog) -> Dict[str, int]:
    """IDs of the sample catalog rows, keyed by a short name."""
    matrix, speed, draft, solo = sample_catalog['movies']
    keanu, carrie, sandra = sample_catalog['actors']
    return {
        'matrix': matrix.id,
        'speed': speed.id,
        'draft': draft.id,
        'solo': solo.id,
        'keanu': keanu.id,
        'carrie': carrie.id,
        'sandra': sandra.id,
    }
