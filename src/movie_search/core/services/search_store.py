"""Search screen state container."""

from dataclasses import replace
from typing import Callable, List, Optional

from ...infrastructure.logging import LoggerMixin
from ..interfaces import ISearchClient
from ..models import (
    MovieRecord,
    MovieSelected,
    QueryChanged,
    QueryCleared,
    SearchAction,
    SearchFailed,
    SearchResult,
    SearchStarted,
    SearchState,
    SearchStatus,
    SearchSucceeded,
    SelectionCleared,
)

Listener = Callable[[SearchState], None]


def reduce(state: SearchState, action: SearchAction) -> SearchState:
    """Apply an action to a state snapshot.

    Responses of any request other than the latest one issued are dropped,
    so an older search finishing late never overwrites a newer one.

    Args:
        state: Current state.
        action: Action to apply.

    Returns:
        New state, or the same object when the action changes nothing.
    """
    if isinstance(action, QueryChanged):
        return replace(state, query=action.query)

    if isinstance(action, QueryCleared):
        return replace(state, query="")

    if isinstance(action, SearchStarted):
        return replace(
            state,
            query=action.query,
            status=SearchStatus.LOADING,
            error_message=None,
            latest_request=action.request_id,
        )

    if isinstance(action, SearchSucceeded):
        if action.request_id != state.latest_request:
            return state
        return replace(
            state,
            status=SearchStatus.LOADED,
            results=tuple(action.records),
            selected=None,
            error_message=None,
        )

    if isinstance(action, SearchFailed):
        if action.request_id != state.latest_request:
            return state
        # Results stay as they were
        return replace(state, status=SearchStatus.ERROR, error_message=action.message)

    if isinstance(action, MovieSelected):
        record = state.find(action.movie_id)
        if record is None:
            return state
        return replace(state, selected=record)

    if isinstance(action, SelectionCleared):
        return replace(state, selected=None)

    raise TypeError(f"Unknown search action: {type(action).__name__}")


class SearchStore(LoggerMixin):
    """Holds the search screen state and runs searches against a client.

    All methods must be called from the event loop that owns the store.
    """

    def __init__(self, search_client: ISearchClient) -> None:
        """Initialize search store.

        Args:
            search_client: Client used to run searches.
        """
        self._search_client = search_client
        self._state = SearchState()
        self._next_request = 0
        self._listeners: List[Listener] = []

    @property
    def state(self) -> SearchState:
        """Get the current state snapshot."""
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new state.

        Args:
            listener: Callable receiving the new state.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: SearchAction) -> SearchState:
        """Apply an action and notify listeners if the state changed.

        Args:
            action: Action to apply.

        Returns:
            The state after the action.
        """
        new_state = reduce(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return self._state

    def set_query(self, query: str) -> SearchState:
        """Update the search text."""
        return self.dispatch(QueryChanged(query=query))

    def clear_query(self) -> SearchState:
        """Clear the search text."""
        return self.dispatch(QueryCleared())

    async def search(self, query: Optional[str] = None) -> SearchResult:
        """Run a search and fold its outcome into the state.

        Args:
            query: Search text. If None, uses the current query.

        Returns:
            Outcome of this request, even when it arrived too late to be shown.
        """
        text = self._state.query if query is None else query
        self._next_request += 1
        request_id = self._next_request

        self.dispatch(SearchStarted(request_id=request_id, query=text))
        try:
            result = await self._search_client.search(text)
        except Exception as e:
            self.logger.error(f"Search for {text!r} raised: {e!r}")
            self.dispatch(SearchFailed(request_id=request_id, message=str(e) or repr(e)))
            raise

        if request_id != self._state.latest_request:
            self.logger.debug(f"Discarding stale response for request {request_id} ({text!r})")
        elif not result.ok:
            self.logger.warning(f"Search for {text!r} failed: {result.error}")

        if result.ok:
            self.dispatch(SearchSucceeded(request_id=request_id, records=result.records))
        else:
            self.dispatch(SearchFailed(request_id=request_id, message=str(result.error)))

        return result

    def select(self, movie_id: int) -> Optional[MovieRecord]:
        """Open the detail view of a record from the current results.

        Args:
            movie_id: ID of the record to select.

        Returns:
            Selected record, or None if it is not in the current results.
        """
        if self._state.find(movie_id) is None:
            self.logger.debug(f"Movie {movie_id} is not in the current results")
            return None
        return self.dispatch(MovieSelected(movie_id=movie_id)).selected

    def close_detail(self) -> SearchState:
        """Close the detail view."""
        return self.dispatch(SelectionCleared())
