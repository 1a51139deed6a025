"""Utility functions and classes."""

from .exceptions import (
    ConfigurationError,
    DecodeError,
    InvalidRequestError,
    MovieSearchError,
    NetworkError,
    SearchError,
)
from .text_utils import clamp_lines, format_rating, redact_api_key, release_year

__all__ = [
    "MovieSearchError",
    "ConfigurationError",
    "SearchError",
    "InvalidRequestError",
    "NetworkError",
    "DecodeError",
    "redact_api_key",
    "release_year",
    "format_rating",
    "clamp_lines",
]
