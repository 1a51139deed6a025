"""Core interfaces for dependency injection."""

from .search_client import ISearchClient

__all__ = [
    "ISearchClient",
]
