"""Test movie record decoding."""

import json

import pytest
from pydantic import ValidationError

from movie_search.core.models import MovieRecord, SearchResults

IMAGE_BASE = "https://image.tmdb.org/t/p"


@pytest.mark.unit
def test_decode_two_entries_matches_input(matrix_movie, bare_movie):
    """Test that every field of every entry is decoded as sent."""
    body = json.dumps({"results": [matrix_movie, bare_movie]})

    results = SearchResults.model_validate_json(body).results

    assert len(results) == 2
    first, second = results
    assert first.id == 603
    assert first.title == "Matrix"
    assert first.release_date == "1999-03-30"
    assert first.overview == matrix_movie["overview"]
    assert first.poster_path == matrix_movie["poster_path"]
    assert first.backdrop_path == matrix_movie["backdrop_path"]
    assert first.vote_average == 8.2
    assert second.id == 1
    assert second.poster_path is None
    assert second.backdrop_path is None
    assert second.vote_average == 0.0


@pytest.mark.unit
def test_decode_sample_record():
    """Test the single-entry sample response."""
    body = (
        '{"results":[{"id":1,"title":"A","release_date":"2020-05-01","overview":"x",'
        '"poster_path":null,"backdrop_path":null,"vote_average":7.5}]}'
    )

    (record,) = SearchResults.model_validate_json(body).results

    assert record.id == 1
    assert record.year == "2020"
    assert record.poster_path is None
    assert record.vote_average == 7.5


@pytest.mark.unit
def test_missing_title_fails(bare_movie):
    """Test that a record without a title cannot be decoded."""
    del bare_movie["title"]

    with pytest.raises(ValidationError):
        SearchResults.model_validate_json(json.dumps({"results": [bare_movie]}))


@pytest.mark.unit
@pytest.mark.parametrize(
    "field, value",
    [("id", "603"), ("title", 42), ("vote_average", "8.2"), ("poster_path", 5)],
)
def test_wrong_type_fails(matrix_movie, field, value):
    """Test that values of the wrong type are rejected instead of coerced."""
    matrix_movie[field] = value

    with pytest.raises(ValidationError):
        SearchResults.model_validate_json(json.dumps({"results": [matrix_movie]}))


@pytest.mark.unit
def test_missing_results_fails():
    """Test that an error envelope is not mistaken for an empty result."""
    body = '{"status_code": 7, "status_message": "Invalid API key", "success": false}'

    with pytest.raises(ValidationError):
        SearchResults.model_validate_json(body)


@pytest.mark.unit
def test_missing_optional_image_paths(matrix_movie):
    """Test that image paths may be left out entirely."""
    del matrix_movie["poster_path"]
    del matrix_movie["backdrop_path"]

    record = MovieRecord.model_validate(matrix_movie)

    assert record.poster_path is None
    assert record.backdrop_path is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "release_date, year",
    [("1999-03-30", "1999"), ("", ""), ("20", "20"), ("2024", "2024")],
)
def test_year_is_first_four_characters(bare_movie, release_date, year):
    """Test year derivation, including the empty release date."""
    bare_movie["release_date"] = release_date

    assert MovieRecord.model_validate(bare_movie).year == year


@pytest.mark.unit
def test_image_urls(matrix_movie):
    """Test poster and backdrop URL sizes."""
    record = MovieRecord.model_validate(matrix_movie)

    assert record.poster_url(IMAGE_BASE) == f"{IMAGE_BASE}/w500/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg"
    assert record.backdrop_url(IMAGE_BASE) == f"{IMAGE_BASE}/w1280/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg"
    assert record.has_poster and record.has_backdrop


@pytest.mark.unit
def test_no_image_url_without_path(bare_movie):
    """Test that a missing path never turns into a URL."""
    record = MovieRecord.model_validate(bare_movie)

    assert record.poster_url(IMAGE_BASE) is None
    assert record.backdrop_url(IMAGE_BASE) is None
    assert not record.has_poster and not record.has_backdrop


@pytest.mark.unit
def test_record_is_immutable(matrix_movie):
    """Test that decoded records cannot be changed."""
    record = MovieRecord.model_validate(matrix_movie)

    with pytest.raises(ValidationError):
        record.title = "Changed"
