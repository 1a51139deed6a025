"""Text presentation of the search and detail screens."""

from .views import (
    ImageRef,
    MovieDetailView,
    MovieRowView,
    build_detail,
    build_row,
    render_detail,
    render_row,
    render_state,
)

__all__ = [
    "ImageRef",
    "MovieRowView",
    "MovieDetailView",
    "build_row",
    "build_detail",
    "render_row",
    "render_detail",
    "render_state",
]
