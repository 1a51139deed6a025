"""Custom exceptions for the application."""


class MovieSearchError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(MovieSearchError):
    """Configuration-related errors."""

    pass


class SearchError(MovieSearchError):
    """Base class for failures of a single movie search."""

    kind = "search"


class InvalidRequestError(SearchError):
    """The search URL could not be built."""

    kind = "invalid_request"


class NetworkError(SearchError):
    """The transport could not complete the request."""

    kind = "network"


class DecodeError(SearchError):
    """The response body is not valid JSON or has an unexpected shape."""

    kind = "decode"
