"""Allow running the CLI with ``python -m movie_search.cli``."""

from .main import main

main()
