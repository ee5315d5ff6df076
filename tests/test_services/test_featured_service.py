"""Unit tests for movie_catalog_service.services.featured_service."""
import pytest
from datetime import datetime

from movie_catalog_service.exceptions import InvalidLimitError
from movie_catalog_service.models import Actor, Movie, Rating


class TestGetFeaturedMovies:
    """Tests for get_featured_movies method."""

    def test_ranks_complete_movies_by_average(self, featured_service, catalog_ids):
        # Act
        result = featured_service.get_featured_movies(limit=6)

        # Assert
        assert [m['title'] for m in result] == ['The Matrix', 'Speed']
        assert result[0]['average_rating'] == 8.5
        assert len(result[0]['actors']) == 2

    def test_limit_caps_results(self, featured_service, catalog_ids):
        result = featured_service.get_featured_movies(limit=1)
        assert [m['title'] for m in result] == ['The Matrix']

    def test_default_limit_from_config(self, featured_service, test_db_session, monkeypatch):
        # Arrange
        monkeypatch.setenv('FEATURED_LIMIT', '3')
        actor = Actor(first_name='A', last_name='B', biography='b', nationality='n', photo_url='http://p')
        for i in range(5):
            test_db_session.add(Movie(
                title=f'Movie {i}', description='d', genre='g', release_year=2000,
                poster_url='http://p', actors=[actor], created_at=datetime(2024, 1, i + 1),
            ))
        test_db_session.commit()

        # Act
        result = featured_service.get_featured_movies()

        # Assert
        assert [m['title'] for m in result] == ['Movie 4', 'Movie 3', 'Movie 2']

    def test_empty_catalog(self, featured_service):
        assert featured_service.get_featured_movies() == []

    @pytest.mark.parametrize('limit', [0, -5])
    def test_invalid_limit(self, featured_service, limit):
        with pytest.raises(InvalidLimitError):
            featured_service.get_featured_movies(limit=limit)


class TestGetFeaturedActors:
    """Tests for get_featured_actors method."""

    def test_ranks_actors_by_all_their_ratings(self, featured_service, catalog_ids):
        # Act
        result = featured_service.get_featured_actors()

        # Assert
        # Carrie-Anne: 9.0, 8.0 -> 8.5; Keanu: 9.0, 8.0, 7.0 -> 8.0; Sandra has no biography
        assert [a['last_name'] for a in result] == ['Moss', 'Reeves']
        assert result[0]['average_rating'] == 8.5
        assert result[1]['average_rating'] == 8.0

    def test_actor_without_ratings_is_featured_last(self, featured_service, catalog_ids, test_db_session):
        # Arrange
        test_db_session.add(Movie(
            title='Unrated', actors=[Actor(
                first_name='New', last_name='Face', biography='b',
                nationality='n', photo_url='http://p',
            )],
        ))
        test_db_session.commit()

        # Act
        result = featured_service.get_featured_actors(limit=10)

        # Assert
        assert result[-1]['last_name'] == 'Face'
        assert result[-1]['average_rating'] == 0.0

    def test_invalid_limit(self, featured_service):
        with pytest.raises(InvalidLimitError):
            featured_service.get_featured_actors(limit=0)


class TestSnapshotPerCall:
    """Ratings added between calls are reflected in the next call."""

    def test_new_rating_changes_ranking(self, featured_service, catalog_ids, test_db_session):
        # Arrange
        assert featured_service.get_featured_movies()[0]['title'] == 'The Matrix'
        test_db_session.add(Rating(movie_id=catalog_ids['speed'], score=10.0))
        test_db_session.add(Rating(movie_id=catalog_ids['speed'], score=10.0))
        test_db_session.commit()

        # Act
        result = featured_service.get_featured_movies()

        # Assert
        assert result[0]['title'] == 'Speed'
