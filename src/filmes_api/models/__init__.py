"""SQLAlchemy ORM models."""

from filmes_api.models.cinema import Cinema
from filmes_api.models.movie import Movie
from filmes_api.models.session import MovieSession

__all__ = [
    "Cinema",
    "Movie",
    "MovieSession",
]
