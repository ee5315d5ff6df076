"""Client for the TMDB API used to seed the catalog"""
from typing import Dict, Optional
import logging
import requests

from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from movie_catalog_service.config import (
    get_tmdb_api_key,
    get_tmdb_base_url,
    get_tmdb_image_base_url,
)
from movie_catalog_service.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class TMDBClient:
    """Client for the TMDB API used to seed the catalog."""

    def __init__(
            self,
            api_key: Optional[str] = None,
            base_url: Optional[str] = None,
            image_base_url: Optional[str] = None
    ):
        self.api_key = api_key or get_tmdb_api_key()
        self.base_url = (base_url or get_tmdb_base_url()).rstrip('/')
        self.image_base_url = (image_base_url or get_tmdb_image_base_url()).rstrip('/')

        # Configure session with retries
        self.session = requests.Session()
        retry_strategy = Retry(
            total=3,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        # noinspection HttpUrlsUsage
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def _get(self, endpoint: str, params: Optional[Dict] = None) -> Dict:
        """
        GET a TMDB endpoint.

        Raises:
            ConfigurationError: If TMDB_API_KEY is not configured
            requests.HTTPError: On a non-2xx response
        """
        if not self.api_key:
            raise ConfigurationError("TMDB_API_KEY is not configured")

        url = f"{self.base_url}{endpoint}"
        headers = {
            'Authorization': f"Bearer {self.api_key}",
            'accept': 'application/json',
        }
        response = self.session.get(url, headers=headers, params=params, timeout=10)
        if not response.ok:
            logger.error(f"TMDB API response: {response.status_code} {response.reason}")
        response.raise_for_status()
        return response.json()

    # ===== MOVIE ENDPOINTS =====

    def get_popular_movies(self, page: int = 1) -> Dict:
        """
        Fetch one page of popular movies.

        Returns:
            {"page": 1, "results": [...], ...}
        """
        return self._get('/movie/popular', params={'page': page})

    def get_movie_details(self, movie_id: int) -> Dict:
        """Fetch movie details (includes runtime)"""
        return self._get(f'/movie/{movie_id}')

    def get_movie_cast(self, movie_id: int) -> Dict:
        """Fetch movie credits; cast is ordered by billing"""
        return self._get(f'/movie/{movie_id}/credits')

    def get_genres(self) -> Dict:
        """Fetch the movie genre list: {"genres": [{"id": 28, "name": "Action"}, ...]}"""
        return self._get('/genre/movie/list')

    # ===== PERSON ENDPOINTS =====

    def get_person_details(self, person_id: int) -> Dict:
        """Fetch person details (biography, birthday, place of birth)"""
        return self._get(f'/person/{person_id}')

    def full_image_url(self, image_path: Optional[str]) -> Optional[str]:
        """Turn a TMDB image path into an absolute URL"""
        if not image_path:
            return None
        return f"{self.image_base_url}{image_path}"
