"""Test logging setup."""

import logging
import logging.handlers

import pytest

from movie_search.config import LoggingConfig
from movie_search.infrastructure import setup_logging
from movie_search.infrastructure.logging import LoggerMixin
from movie_search.utils import redact_api_key


@pytest.fixture(autouse=True)
def restore_logging():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.mark.unit
def test_setup_logging_console_only():
    """Test that a console handler is installed at the configured level."""
    setup_logging(LoggingConfig(level="warning"))

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 1
    assert logging.getLogger("aiohttp").level == logging.WARNING


@pytest.mark.unit
def test_setup_logging_with_file(tmp_path):
    """Test that a rotating file handler is added when a file is configured."""
    log_file = tmp_path / "logs" / "movie_search.log"

    setup_logging(LoggingConfig(level="INFO", file=str(log_file), max_size_mb=1, backup_count=2))
    logging.getLogger("movie_search.test").info("hello")

    file_handlers = [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 1024 * 1024
    assert file_handlers[0].backupCount == 2
    file_handlers[0].flush()
    assert "hello" in log_file.read_text()


@pytest.mark.unit
def test_logger_mixin_name():
    """Test that the mixin logger is named after the class."""

    class Probe(LoggerMixin):
        pass

    assert Probe().logger.name == f"{__name__}.Probe"


@pytest.mark.unit
def test_redact_api_key():
    """Test that API keys are hidden in logged URLs."""
    url = "https://api.themoviedb.org/3/search/movie?api_key=secret&adult=false&query=x"

    assert redact_api_key(url) == (
        "https://api.themoviedb.org/3/search/movie?api_key=***&adult=false&query=x"
    )
