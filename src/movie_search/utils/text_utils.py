"""Text processing utilities."""

import re
import textwrap

_API_KEY_PATTERN = re.compile(r"(api_key=)[^&]*")


def redact_api_key(url: str) -> str:
    """Hide the API key in a URL before it is logged.

    Args:
        url: URL that may carry an ``api_key`` query parameter.

    Returns:
        URL with the key value replaced by ``***``.
    """
    return _API_KEY_PATTERN.sub(r"\1***", url)


def release_year(release_date: str) -> str:
    """Get the display year of a release date.

    Takes the first four characters as-is, so an empty date gives an
    empty year.

    Args:
        release_date: Date in ``YYYY-MM-DD`` form, possibly empty.

    Returns:
        Year text.
    """
    return release_date[:4]


def format_rating(vote_average: float) -> str:
    """Format a vote average for display."""
    return str(float(vote_average))


def clamp_lines(text: str, max_lines: int, width: int = 72) -> str:
    """Wrap text and cut it to a maximum number of lines.

    Args:
        text: Text to wrap.
        max_lines: Maximum number of lines to keep.
        width: Line width.

    Returns:
        Wrapped text, ending with an ellipsis when lines were dropped.
    """
    if not text:
        return ""

    lines = textwrap.wrap(text, width=width)
    if len(lines) <= max_lines:
        return "\n".join(lines)

    kept = lines[:max_lines]
    kept[-1] = kept[-1].rstrip() + "..."
    return "\n".join(kept)
