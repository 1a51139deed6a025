"""Pytest configuration and fixtures."""

import json
from unittest.mock import Mock

import aiohttp
import pytest

from movie_search.config import ConfigManager
from movie_search.core.services import TMDbSearchClient
from movie_search.infrastructure import Container


class FakeResponse:
    """Stand-in for ``aiohttp.ClientResponse`` used as an async context manager."""

    def __init__(self, body=b"", status=200, error=None):
        self.status = status
        self._body = body.encode("utf-8") if isinstance(body, str) else body
        self._error = error

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    def raise_for_status(self):
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                request_info=Mock(real_url="https://api.themoviedb.org/3/search/movie"),
                history=(),
                status=self.status,
                message="Unauthorized" if self.status == 401 else "Error",
            )

    async def read(self):
        return self._body


class FakeSession:
    """Stand-in for ``aiohttp.ClientSession`` that replays canned responses."""

    def __init__(self, *responses):
        self._responses = list(responses)
        self.requested_urls = []
        self.closed = False

    def get(self, url):
        self.requested_urls.append(url)
        return self._responses.pop(0)

    async def close(self):
        self.closed = True


def make_payload(*movies):
    """Serialize movie dicts into a search response body."""
    return json.dumps({"page": 1, "results": list(movies), "total_results": len(movies)})


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary configuration file."""
    config_content = """
tmdb:
  api_key: "test-tmdb-key"
  language: "pt-BR"

logging:
  level: "WARNING"
"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def config_manager(temp_config_file):
    """Create a configuration manager with test config."""
    return ConfigManager(temp_config_file, load_env_file=False)


@pytest.fixture
def config(config_manager):
    """Load test configuration."""
    return config_manager.load_config()


@pytest.fixture
def container(config_manager):
    """Create a test container."""
    container = Container(config_manager)
    return container


@pytest.fixture
def matrix_movie():
    """Raw TMDb search entry with images."""
    return {
        "adult": False,
        "id": 603,
        "title": "Matrix",
        "original_title": "The Matrix",
        "release_date": "1999-03-30",
        "overview": "Um hacker descobre a verdade sobre a realidade.",
        "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
        "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
        "vote_average": 8.2,
        "vote_count": 25000,
    }


@pytest.fixture
def bare_movie():
    """Raw TMDb search entry without images or release date."""
    return {
        "id": 1,
        "title": "A",
        "release_date": "",
        "overview": "",
        "poster_path": None,
        "backdrop_path": None,
        "vote_average": 0,
    }


@pytest.fixture
def search_client(config):
    """Factory for a search client wired to a fake session with canned responses."""

    def _make(*responses):
        session = FakeSession(*responses)
        client = TMDbSearchClient(config, session=session)
        return client, session

    return _make


@pytest.fixture
def fake_response():
    """Class used to build canned HTTP responses."""
    return FakeResponse


@pytest.fixture
def payload():
    """Serializer for search response bodies."""
    return make_payload


@pytest.fixture
def fake_session():
    """Class used to build sessions that replay canned responses."""
    return FakeSession
