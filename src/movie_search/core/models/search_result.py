"""Typed outcome of a single search request."""

from dataclasses import dataclass, field
from typing import List, Optional

from ...utils.exceptions import SearchError
from .movie import MovieRecord


@dataclass(frozen=True)
class SearchResult:
    """Either the decoded records of a search or the error that stopped it."""

    query: str
    records: List[MovieRecord] = field(default_factory=list)
    error: Optional[SearchError] = None

    @classmethod
    def success(cls, query: str, records: List[MovieRecord]) -> "SearchResult":
        """Build a successful result."""
        return cls(query=query, records=records)

    @classmethod
    def failure(cls, query: str, error: SearchError) -> "SearchResult":
        """Build a failed result."""
        return cls(query=query, error=error)

    @property
    def ok(self) -> bool:
        """Check if the search succeeded."""
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        """Get the error category (invalid_request, network, decode)."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> List[MovieRecord]:
        """Return the records or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.records
