"""Pydantic schemas for request/response validation."""

from filmes_api.schemas.movie import (
    MovieBase,
    MovieCreate,
    MovieRead,
    MovieUpdate,
    SessionRead,
)
from filmes_api.schemas.patch import PatchOperation
from filmes_api.schemas.problem import ProblemDetails

__all__ = [
    # Movie schemas
    "MovieBase",
    "MovieCreate",
    "MovieUpdate",
    "MovieRead",
    "SessionRead",
    # JSON-Patch
    "PatchOperation",
    # Errors
    "ProblemDetails",
]
