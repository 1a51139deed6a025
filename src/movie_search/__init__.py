"""Movie Search.

Search the TMDb movie catalog by title, list the matches and show the
details of a selected movie.
"""

__version__ = "0.1.0"
