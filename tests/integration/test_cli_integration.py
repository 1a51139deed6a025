"""CLI integration tests."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _run_cli(*args, timeout=60):
    return subprocess.run(
        [sys.executable, "-m", "movie_search.cli", *args],
        capture_output=True,
        text=True,
        timeout=timeout,
        cwd=PROJECT_ROOT,
    )


@pytest.mark.integration
def test_cli_help():
    """Test CLI help command."""
    result = _run_cli("--help")

    assert result.returncode == 0
    assert "Movie Search" in result.stdout
    assert "search" in result.stdout
    assert "interactive" in result.stdout
    assert "init" in result.stdout


@pytest.mark.integration
def test_cli_init_command(tmp_path):
    """Test CLI init command."""
    config_path = tmp_path / "test_config.yaml"

    result = _run_cli("init", "--output", str(config_path))

    assert result.returncode == 0
    assert config_path.exists()

    content = config_path.read_text()
    assert "tmdb:" in content
    assert "logging:" in content


@pytest.mark.integration
def test_cli_status_command(temp_config_file):
    """Test CLI status command."""
    result = _run_cli("--config", str(temp_config_file), "status")

    assert result.returncode == 0
    assert "Movie Search Status" in result.stdout
    assert "TMDb Configured" in result.stdout


@pytest.mark.integration
def test_cli_with_real_api_key(tmp_path):
    """Test a real search if a TMDb API key is available."""
    api_key = os.getenv("TMDB_API_KEY")
    if not api_key:
        pytest.skip("TMDB_API_KEY not set")

    config_path = tmp_path / "config.yaml"
    config_path.write_text('tmdb:\n  api_key: "${TMDB_API_KEY}"\n  timeout: 30\n')

    result = _run_cli("--config", str(config_path), "search", "Matrix", "--json", timeout=120)

    print("STDOUT:", result.stdout)
    print("STDERR:", result.stderr)

    assert result.returncode == 0
    assert '"results"' in result.stdout
