"""Movie search client interface."""

from abc import ABC, abstractmethod
from typing import List

from ..models import MovieRecord, SearchResult


class ISearchClient(ABC):
    """Interface for movie search clients."""

    @abstractmethod
    def build_search_url(self, query: str) -> str:
        """Build the upstream search URL for a query.

        Args:
            query: Search text, possibly empty.

        Returns:
            Fully encoded request URL.

        Raises:
            InvalidRequestError: If the URL cannot be built.
        """
        pass

    @abstractmethod
    async def fetch_movies(self, query: str) -> List[MovieRecord]:
        """Search movies by title.

        Args:
            query: Search text, possibly empty.

        Returns:
            Decoded records in upstream order.

        Raises:
            InvalidRequestError: If the URL cannot be built.
            NetworkError: If the transport fails.
            DecodeError: If the response cannot be decoded.
        """
        pass

    @abstractmethod
    async def search(self, query: str) -> SearchResult:
        """Search movies by title without raising on search failures.

        Args:
            query: Search text, possibly empty.

        Returns:
            Records or the classified error.
        """
        pass

    async def close(self) -> None:
        """Release transport resources."""
        pass
