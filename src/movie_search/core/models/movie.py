"""Movie-related data models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...utils.text_utils import release_year

POSTER_SIZE = "w500"
BACKDROP_SIZE = "w1280"


class MovieRecord(BaseModel):
    """One movie entry decoded from a TMDb search response.

    Records are immutable snapshots of the upstream payload; unknown fields
    are ignored and field types are checked strictly.
    """

    id: int = Field(..., description="TMDb ID")
    title: str = Field(..., description="Movie title")
    release_date: str = Field(..., description="Release date as YYYY-MM-DD, may be empty")
    overview: str = Field(..., description="Movie overview/plot, may be empty")
    poster_path: Optional[str] = Field(None, description="Poster image path")
    backdrop_path: Optional[str] = Field(None, description="Backdrop image path")
    vote_average: float = Field(..., description="Average rating, 0.0 to 10.0")

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    @property
    def year(self) -> str:
        """Get the display year (first four characters of the release date)."""
        return release_year(self.release_date)

    @property
    def has_poster(self) -> bool:
        """Check if the record carries a poster image."""
        return self.poster_path is not None

    @property
    def has_backdrop(self) -> bool:
        """Check if the record carries a backdrop image."""
        return self.backdrop_path is not None

    def poster_url(self, image_base_url: str) -> Optional[str]:
        """Build the poster URL, or None when there is no poster."""
        if self.poster_path is None:
            return None
        return f"{image_base_url}/{POSTER_SIZE}{self.poster_path}"

    def backdrop_url(self, image_base_url: str) -> Optional[str]:
        """Build the backdrop URL, or None when there is no backdrop."""
        if self.backdrop_path is None:
            return None
        return f"{image_base_url}/{BACKDROP_SIZE}{self.backdrop_path}"


class SearchResults(BaseModel):
    """Envelope of a TMDb movie search response."""

    results: List[MovieRecord] = Field(..., description="Matching movies in upstream order")

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")
