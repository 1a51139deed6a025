"""Core service implementations."""

from .search_client import TMDbSearchClient
from .search_store import SearchStore, reduce

__all__ = [
    "TMDbSearchClient",
    "SearchStore",
    "reduce",
]
