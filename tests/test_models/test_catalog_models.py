"""Unit tests for the Movie, Actor and Rating models."""
from datetime import date

from movie_catalog_service.models import Actor, Movie, Rating, movie_actors
from movie_catalog_service.ranking import select_featured_movies


class TestMovie:
    """Tests for Movie model."""

    def test_average_rating(self, sample_catalog):
        matrix = sample_catalog['movies'][0]
        assert matrix.average_rating == 8.5

    def test_average_rating_unrated_is_zero(self, sample_catalog):
        solo = sample_catalog['movies'][3]
        assert solo.average_rating == 0.0

    def test_to_dict_includes_relations(self, sample_catalog):
        # Arrange
        matrix = sample_catalog['movies'][0]

        # Act
        result = matrix.to_dict()

        # Assert
        assert result['title'] == 'The Matrix'
        assert result['release_year'] == 1999
        assert {a['full_name'] for a in result['actors']} == {'Keanu Reeves', 'Carrie-Anne Moss'}
        assert sorted(r['score'] for r in result['ratings']) == [8.0, 9.0]
        assert result['average_rating'] == 8.5
        assert result['created_at'] is not None

    def test_to_summary_has_no_relations(self, sample_catalog):
        result = sample_catalog['movies'][1].to_summary()

        assert result['title'] == 'Speed'
        assert 'actors' not in result
        assert 'ratings' not in result

    def test_timestamps_default_on_insert(self, test_db_session):
        movie = Movie(title='Plain')
        test_db_session.add(movie)
        test_db_session.commit()

        assert movie.created_at is not None
        assert movie.updated_at is not None

    def test_timestamps_are_naive_before_reload(self, test_db_session, sample_catalog):
        # Arrange
        movie = Movie(
            title='Fresh', description='d', genre='g', release_year=2024,
            poster_url='https://img/fresh.jpg',
            actors=[sample_catalog['actors'][0]], ratings=[Rating(score=7.0)],
        )
        test_db_session.add(movie)

        # Act
        test_db_session.flush()

        # Assert
        assert movie.created_at.tzinfo is None
        assert movie.updated_at.tzinfo is None
        # Ties with Speed (7.0), so recency is compared against a reloaded row
        featured = select_featured_movies(sample_catalog['movies'] + [movie], 10)
        assert [m.title for m in featured] == ['The Matrix', 'Fresh', 'Speed']

    def test_delete_removes_ratings_and_links(self, test_db_session, sample_catalog):
        # Arrange
        matrix = sample_catalog['movies'][0]
        matrix_id = matrix.id

        # Act
        test_db_session.delete(matrix)
        test_db_session.commit()

        # Assert
        assert test_db_session.query(Rating).filter(Rating.movie_id == matrix_id).count() == 0
        links = test_db_session.execute(
            movie_actors.select().where(movie_actors.c.movie_id == matrix_id)
        ).all()
        assert links == []
        assert test_db_session.query(Actor).count() == 3

    def test_repr(self):
        assert repr(Movie(id=3, title='Heat')) == "<Movie(id=3, title='Heat')>"


class TestActor:
    """Tests for Actor model."""

    def test_full_name(self):
        assert Actor(first_name='Keanu', last_name='Reeves').full_name == 'Keanu Reeves'

    def test_rating_scores_span_all_movies(self, sample_catalog):
        keanu = sample_catalog['actors'][0]
        assert sorted(keanu.rating_scores) == [7.0, 8.0, 9.0]

    def test_to_dict_includes_movies(self, sample_catalog):
        keanu = sample_catalog['actors'][0]

        result = keanu.to_dict()

        assert result['full_name'] == 'Keanu Reeves'
        assert result['date_of_birth'] == date(1964, 9, 2)
        assert {m['title'] for m in result['movies']} == {'The Matrix', 'Speed'}

    def test_repr(self):
        assert repr(Actor(id=1, first_name='Ada', last_name='Lovelace')) == "<Actor(id=1, name='Ada Lovelace')>"


class TestRating:
    """Tests for Rating model."""

    def test_to_dict(self, sample_catalog):
        rating = sample_catalog['movies'][1].ratings[0]

        result = rating.to_dict()

        assert result['score'] == 7.0
        assert result['movie_id'] == sample_catalog['movies'][1].id

    def test_repr(self):
        assert repr(Rating(id=2, movie_id=5, score=7.5)) == "<Rating(id=2, movie_id=5, score=7.5)>"
