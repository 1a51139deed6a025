"""Core data models."""

from .movie import MovieRecord, SearchResults
from .search_result import SearchResult
from .search_state import (
    MovieSelected,
    QueryChanged,
    QueryCleared,
    SearchAction,
    SearchFailed,
    SearchStarted,
    SearchState,
    SearchStatus,
    SearchSucceeded,
    SelectionCleared,
)

__all__ = [
    "MovieRecord",
    "SearchResults",
    "SearchResult",
    "SearchState",
    "SearchStatus",
    "SearchAction",
    "QueryChanged",
    "QueryCleared",
    "SearchStarted",
    "SearchSucceeded",
    "SearchFailed",
    "MovieSelected",
    "SelectionCleared",
]
