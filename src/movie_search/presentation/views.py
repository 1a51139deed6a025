"""View models and text rendering for the search and detail screens."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.models import MovieRecord, SearchState, SearchStatus
from ..utils import clamp_lines, format_rating

SCREEN_TITLE = "Movie Search"
POSTER_PLACEHOLDER = "[no poster]"
BACKDROP_PLACEHOLDER = "[no backdrop]"
OVERVIEW_LINES_IN_LIST = 3


class ImageRef(BaseModel):
    """Image to load from a URL, or a placeholder when there is none."""

    url: Optional[str] = Field(None, description="Image URL")
    placeholder_text: str = Field(..., description="Text shown instead of the image")

    model_config = ConfigDict(frozen=True)

    @property
    def is_placeholder(self) -> bool:
        """Check if the placeholder is shown instead of an image."""
        return self.url is None

    def render(self) -> str:
        """Render the image reference as text."""
        return self.placeholder_text if self.url is None else self.url


class MovieRowView(BaseModel):
    """One row of the result list."""

    movie_id: int
    title: str
    year: str
    overview: str
    rating: str
    poster: ImageRef

    model_config = ConfigDict(frozen=True)


class MovieDetailView(BaseModel):
    """Detail screen of a selected movie."""

    movie_id: int
    title: str
    year: str
    overview: str
    rating: str
    poster: ImageRef
    backdrop: ImageRef

    model_config = ConfigDict(frozen=True)


def build_row(record: MovieRecord, image_base_url: str) -> MovieRowView:
    """Build the list row of a record."""
    return MovieRowView(
        movie_id=record.id,
        title=record.title,
        year=record.year,
        overview=record.overview,
        rating=format_rating(record.vote_average),
        poster=ImageRef(url=record.poster_url(image_base_url), placeholder_text=POSTER_PLACEHOLDER),
    )


def build_detail(record: MovieRecord, image_base_url: str) -> MovieDetailView:
    """Build the detail view of a record.

    Uses only the already-decoded record; nothing is fetched.
    """
    return MovieDetailView(
        movie_id=record.id,
        title=record.title,
        year=record.year,
        overview=record.overview,
        rating=format_rating(record.vote_average),
        poster=ImageRef(url=record.poster_url(image_base_url), placeholder_text=POSTER_PLACEHOLDER),
        backdrop=ImageRef(
            url=record.backdrop_url(image_base_url), placeholder_text=BACKDROP_PLACEHOLDER
        ),
    )


def render_row(view: MovieRowView, index: int) -> str:
    """Render a list row as text.

    Args:
        view: Row to render.
        index: 1-based position shown to the user.

    Returns:
        Multi-line text block.
    """
    heading = f"{index:>2}. {view.title}"
    if view.year:
        heading += f" ({view.year})"
    heading += f"  * {view.rating}"

    lines = [heading, f"    {view.poster.render()}"]
    overview = clamp_lines(view.overview, OVERVIEW_LINES_IN_LIST, width=68)
    lines.extend(f"    {line}" for line in overview.splitlines())
    return "\n".join(lines)


def render_detail(view: MovieDetailView) -> str:
    """Render the detail screen as text."""
    lines = [
        f"Backdrop: {view.backdrop.render()}",
        f"Poster:   {view.poster.render()}",
        "",
        view.title,
    ]
    if view.year:
        lines.append(view.year)
    lines.append(f"* {view.rating}")
    if view.overview:
        lines.extend(["", view.overview])
    return "\n".join(lines)


def render_state(state: SearchState, image_base_url: str) -> str:
    """Render the result list part of the search screen.

    Loading, empty and error states get an explicit line so a failed search
    is never silent.

    Args:
        state: Current search state.
        image_base_url: Base URL of the image CDN.

    Returns:
        Text of the screen body.
    """
    blocks: List[str] = []

    if state.status == SearchStatus.LOADING:
        blocks.append(f"Searching for {state.query!r}...")
    elif state.status == SearchStatus.ERROR:
        blocks.append(f"Search failed: {state.error_message}")
    elif state.is_empty:
        blocks.append(f"No movies found for {state.query!r}.")

    for index, record in enumerate(state.results, start=1):
        blocks.append(render_row(build_row(record, image_base_url), index))

    return "\n\n".join(blocks)
