"""Search screen state and the actions that change it."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .movie import MovieRecord


class SearchStatus(str, Enum):
    """Search status enumeration."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class SearchState:
    """Immutable snapshot of the search screen.

    ``latest_request`` is the sequence number of the newest search issued;
    only its response may change ``results``.
    """

    query: str = ""
    status: SearchStatus = SearchStatus.IDLE
    results: Tuple[MovieRecord, ...] = ()
    selected: Optional[MovieRecord] = None
    error_message: Optional[str] = None
    latest_request: int = 0

    @property
    def is_loading(self) -> bool:
        """Check if a search is in flight."""
        return self.status == SearchStatus.LOADING

    @property
    def is_empty(self) -> bool:
        """Check if the last search succeeded with no matches."""
        return self.status == SearchStatus.LOADED and not self.results

    def find(self, movie_id: int) -> Optional[MovieRecord]:
        """Find a record in the visible result list by ID."""
        for record in self.results:
            if record.id == movie_id:
                return record
        return None


@dataclass(frozen=True)
class QueryChanged:
    """The user edited the search text."""

    query: str


@dataclass(frozen=True)
class QueryCleared:
    """The user cleared the search text."""


@dataclass(frozen=True)
class SearchStarted:
    """A search request was issued."""

    request_id: int
    query: str


@dataclass(frozen=True)
class SearchSucceeded:
    """A search request returned records."""

    request_id: int
    records: List[MovieRecord]


@dataclass(frozen=True)
class SearchFailed:
    """A search request failed."""

    request_id: int
    message: str


@dataclass(frozen=True)
class MovieSelected:
    """The user opened the detail view of a record."""

    movie_id: int


@dataclass(frozen=True)
class SelectionCleared:
    """The user closed the detail view."""


SearchAction = Union[
    QueryChanged,
    QueryCleared,
    SearchStarted,
    SearchSucceeded,
    SearchFailed,
    MovieSelected,
    SelectionCleared,
]
