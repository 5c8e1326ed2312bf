"""Pydantic schema for RFC 7807 problem responses."""

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """Machine-readable error body."""

    type: str = Field(default="about:blank", description="Problem type URI")
    title: str = Field(description="Short summary of the problem")
    status: int = Field(description="HTTP status code")
    detail: str | None = Field(default=None, description="Explanation of this occurrence")
    errors: dict[str, list[str]] | None = Field(
        default=None, description="Validation messages keyed by field"
    )
