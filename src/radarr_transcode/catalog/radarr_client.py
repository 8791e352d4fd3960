"""
Radarr API client for fetching the movie catalog.

This module provides a small interface to the Radarr v3 API, handling the
catalog request, error handling, and conversion of the response into
MediaAsset records.
"""

from typing import Any, List, Optional

import requests

from radarr_transcode.errors import CatalogFetchError, ConfigurationError
from radarr_transcode.utils import LogLevel, logger
from radarr_transcode.utils.constants import RADARR_MOVIE_ENDPOINT, REQUEST_TIMEOUT
from .core import MediaAsset


class RadarrClient:
    """Client for reading movies from a Radarr server."""

    def __init__(self, base_url: str, api_key: str, timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        """Initialize the Radarr client with the server URL and API key."""
        if not base_url or not api_key:
            raise ConfigurationError("Radarr URL and API key are required.")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"X-Api-Key": api_key})

    def _make_request(self, endpoint: str) -> Any:
        """Make a GET request to the Radarr API and handle errors."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            raise CatalogFetchError(f"Request failed: {e}") from e
        except ValueError as e:
            raise CatalogFetchError(f"Invalid JSON response: {e}") from e

    def get_movies(self) -> List[MediaAsset]:
        """Fetch every movie in the library in a single request."""
        logger.log("catalog.fetch", LogLevel.INFO, url=self.base_url)
        data = self._make_request(RADARR_MOVIE_ENDPOINT)
        if not isinstance(data, list):
            raise CatalogFetchError(f"Expected a list of movies, got {type(data).__name__}")

        try:
            movies = [MediaAsset.from_radarr(record) for record in data]
        except (AttributeError, TypeError, ValueError) as e:
            raise CatalogFetchError(f"Unexpected movie record in catalog: {e}") from e

        logger.log("catalog.fetched", LogLevel.INFO, movies=len(movies))
        return movies
