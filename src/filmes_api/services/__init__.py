"""Business logic: errors, DTO mapping and JSON-Patch support."""

from filmes_api.services.base import (
    NotFoundError,
    ProblemError,
    ValidationProblemError,
)
from filmes_api.services.mapper import MovieMapper, get_movie_mapper
from filmes_api.services.patching import apply_patch

__all__ = [
    "ProblemError",
    "NotFoundError",
    "ValidationProblemError",
    "MovieMapper",
    "get_movie_mapper",
    "apply_patch",
]
