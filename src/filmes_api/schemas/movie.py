"""Pydantic schemas for movie API endpoints."""

from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field


class MovieBase(BaseModel):
    """Fields shared by every writable movie representation."""

    title: str = Field(min_length=1, max_length=100, description="Movie title")
    genre: str = Field(min_length=1, max_length=50, description="Movie genre")
    duration: int = Field(ge=70, le=600, description="Duration in minutes (70-600)")
    release_date: date | None = Field(default=None, description="Release date")


class MovieCreate(MovieBase):
    """Schema for creating a new movie."""

    pass


class MovieUpdate(MovieBase):
    """Schema for replacing the writable fields of a movie.

    Also the document a JSON-Patch is applied to, so unknown fields are
    rejected rather than silently dropped.
    """

    model_config = ConfigDict(extra="forbid")


class SessionRead(BaseModel):
    """A cinema session of a movie."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Session ID")
    movie_id: int = Field(description="Movie ID")
    cinema_id: int = Field(description="Cinema ID")


class MovieRead(BaseModel):
    """Read-only movie representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Movie ID")
    title: str = Field(description="Movie title")
    genre: str = Field(description="Movie genre")
    duration: int = Field(description="Duration in minutes")
    release_date: date | None = Field(default=None, description="Release date")
    sessions: list[SessionRead] = Field(default_factory=list, description="Cinema sessions")
    queried_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When this representation was produced",
    )
