"""TMDb search client implementation."""

import asyncio
from typing import Any, List, Optional
from urllib.parse import quote, urlencode, urlsplit

import aiohttp
from pydantic import ValidationError

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import (
    DecodeError,
    InvalidRequestError,
    NetworkError,
    SearchError,
    redact_api_key,
)
from ..interfaces import ISearchClient
from ..models import MovieRecord, SearchResult, SearchResults


class TMDbSearchClient(ISearchClient, LoggerMixin):
    """Search client for the TMDb ``/search/movie`` endpoint.

    One GET per search, no retry and no caching. The session is created on
    first use and must be released with :meth:`close` or ``async with``.
    """

    SEARCH_PATH = "/search/movie"

    def __init__(self, config: Config, session: Optional[aiohttp.ClientSession] = None) -> None:
        """Initialize search client.

        Args:
            config: Application configuration.
            session: Pre-built HTTP session. If None, one is created on first use.
        """
        self._config = config
        self._tmdb_config = config.tmdb
        self._session = session
        self._owns_session = session is None

    def build_search_url(self, query: str) -> str:
        """Build the upstream search URL for a query.

        Args:
            query: Search text, possibly empty.

        Returns:
            Fully encoded request URL.

        Raises:
            InvalidRequestError: If the URL cannot be built.
        """
        base_url = self._tmdb_config.base_url
        try:
            parts = urlsplit(base_url)
        except ValueError as e:
            raise InvalidRequestError(f"Invalid TMDb base URL: {base_url!r}: {e}") from e
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidRequestError(f"Invalid TMDb base URL: {base_url!r}")

        params = {
            "api_key": self._tmdb_config.api_key,
            "adult": "true" if self._tmdb_config.include_adult else "false",
            "language": self._tmdb_config.language,
            "query": query,
        }

        try:
            query_string = urlencode(params, quote_via=quote)
        except (UnicodeEncodeError, TypeError) as e:
            raise InvalidRequestError(f"Cannot encode search query {query!r}: {e}") from e

        return f"{base_url}{self.SEARCH_PATH}?{query_string}"

    async def fetch_movies(self, query: str) -> List[MovieRecord]:
        """Search movies by title.

        Args:
            query: Search text, possibly empty.

        Returns:
            Decoded records in upstream order.

        Raises:
            InvalidRequestError: If the URL cannot be built.
            NetworkError: If the transport fails or the server answers with an error status.
            DecodeError: If the response cannot be decoded.
        """
        try:
            url = self.build_search_url(query)
        except InvalidRequestError as e:
            self.logger.error(str(e))
            raise

        self.logger.debug(f"GET {redact_api_key(url)}")

        try:
            async with self._get_session().get(url) as response:
                response.raise_for_status()
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error_msg = f"TMDb search request failed for {query!r}: {e!r}"
            self.logger.error(redact_api_key(error_msg))
            raise NetworkError(redact_api_key(error_msg)) from e

        try:
            payload = SearchResults.model_validate_json(body)
        except ValidationError as e:
            error_msg = f"Failed to decode TMDb search response for {query!r}: {e}"
            self.logger.error(error_msg)
            raise DecodeError(error_msg) from e

        self.logger.info(f"Found {len(payload.results)} movies for {query!r}")
        return list(payload.results)

    async def search(self, query: str) -> SearchResult:
        """Search movies by title without raising on search failures.

        Args:
            query: Search text, possibly empty.

        Returns:
            Records or the classified error.
        """
        try:
            records = await self.fetch_movies(query)
        except SearchError as e:
            return SearchResult.failure(query, e)
        return SearchResult.success(query, records)

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session.

        Returns:
            HTTP session.
        """
        if self._session is None:
            if self._tmdb_config.timeout is not None:
                timeout = aiohttp.ClientTimeout(total=self._tmdb_config.timeout)
                self._session = aiohttp.ClientSession(timeout=timeout)
            else:
                self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "TMDbSearchClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
