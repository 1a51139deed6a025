"""Configuration management."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from .models import Config

API_KEY_ENV = "TMDB_API_KEY"
CONFIG_PATH_ENV = "MOVIE_SEARCH_CONFIG"


class ConfigManager:
    """Manages application configuration loading and validation."""

    def __init__(self, config_path: Optional[Path] = None, load_env_file: bool = True):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file. If None, searches standard locations.
            load_env_file: Load a ``.env`` file from the working directory before
                expanding environment variables.
        """
        self._config_path = config_path
        self._load_env_file = load_env_file
        self._config: Optional[Config] = None

    def load_config(self) -> Config:
        """Load and validate configuration.

        When no configuration file exists and no explicit path was given, a
        configuration is built from the ``TMDB_API_KEY`` environment variable.

        Returns:
            Validated configuration object.

        Raises:
            FileNotFoundError: If configuration file is not found.
            ValueError: If configuration is invalid.
            yaml.YAMLError: If YAML parsing fails.
        """
        if self._config is not None:
            return self._config

        if self._load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        try:
            config_path = self._find_config_file()
        except FileNotFoundError:
            if self._config_path is not None or not os.getenv(API_KEY_ENV):
                raise
            raw_config: Dict[str, Any] = {"tmdb": {"api_key": os.environ[API_KEY_ENV]}}
        else:
            raw_config = self._load_yaml_file(config_path)

        try:
            self._config = Config(**raw_config)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}")

        return self._config

    def reload_config(self) -> Config:
        """Reload configuration from file.

        Returns:
            Newly loaded configuration object.
        """
        self._config = None
        return self.load_config()

    def get_config(self) -> Config:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            return self.load_config()
        return self._config

    def _find_config_file(self) -> Path:
        """Find configuration file in standard locations.

        Returns:
            Path to configuration file.

        Raises:
            FileNotFoundError: If no configuration file is found.
        """
        if self._config_path is not None:
            if self._config_path.exists():
                return self._config_path
            raise FileNotFoundError(f"Configuration file not found: {self._config_path}")

        search_paths = [
            Path.cwd() / "config" / "config.yaml",
            Path.cwd() / "config.yaml",
            Path.home() / ".config" / "movie_search" / "config.yaml",
            Path.home() / ".movie_search" / "config.yaml",
        ]

        env_config = os.getenv(CONFIG_PATH_ENV)
        if env_config:
            search_paths.insert(0, Path(env_config))

        for path in search_paths:
            if path.exists():
                return path

        raise FileNotFoundError(
            f"Configuration file not found in any of these locations: "
            f"{[str(p) for p in search_paths]}"
        )

    def _load_yaml_file(self, path: Path) -> Dict[str, Any]:
        """Load YAML file with environment variable expansion.

        Args:
            path: Path to YAML file.

        Returns:
            Parsed YAML data with environment variables expanded.

        Raises:
            yaml.YAMLError: If YAML parsing fails.
        """
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        content = os.path.expandvars(content)

        try:
            result = yaml.safe_load(content)
            if not isinstance(result, dict):
                raise yaml.YAMLError(f"YAML file {path} must contain a dictionary at root level")
            return result
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}")

    @classmethod
    def create_default_config(cls, output_path: Path) -> None:
        """Create a default configuration file.

        The API key is written as an environment reference, never as a literal.

        Args:
            output_path: Path where to create the configuration file.
        """
        default_config = {
            "tmdb": {
                "api_key": "${TMDB_API_KEY}",
                "base_url": "https://api.themoviedb.org/3",
                "image_base_url": "https://image.tmdb.org/t/p",
                "language": "pt-BR",
                "include_adult": False,
            },
            "logging": {
                "level": "INFO",
            },
        }

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(default_config, f, default_flow_style=False, indent=2, sort_keys=False)

    def validate_config_file(self, config_path: Path) -> bool:
        """Validate a configuration file without loading it as current config.

        Args:
            config_path: Path to configuration file to validate.

        Returns:
            True if configuration is valid, False otherwise.
        """
        try:
            raw_config = self._load_yaml_file(config_path)
            Config(**raw_config)
            return True
        except (ValidationError, yaml.YAMLError, FileNotFoundError):
            return False
