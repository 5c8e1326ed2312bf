"""Exceptions rendered as RFC 7807 problem responses."""

from pydantic import ValidationError

from filmes_api.schemas.problem import ProblemDetails


class ProblemError(Exception):
    """Base exception for errors answered with a problem response."""

    status_code: int = 500
    title: str = "An error occurred while processing your request."
    type: str = "https://tools.ietf.org/html/rfc9110#section-15.6.1"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.title)
        self.detail = message

    def to_problem(self) -> ProblemDetails:
        """Build the response body for this error."""
        return ProblemDetails(
            type=self.type,
            title=self.title,
            status=self.status_code,
            detail=self.detail,
        )


class NotFoundError(ProblemError):
    """Raised when a resource is not found."""

    status_code = 404
    title = "Not Found"
    type = "https://tools.ietf.org/html/rfc9110#section-15.5.5"


class ValidationProblemError(ProblemError):
    """Raised when input fails validation.

    Carries a map of field name to error messages.
    """

    status_code = 400
    title = "One or more validation errors occurred."
    type = "https://tools.ietf.org/html/rfc9110#section-15.5.1"

    def __init__(self, errors: dict[str, list[str]], message: str | None = None) -> None:
        super().__init__(message)
        self.errors = errors

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ValidationProblemError":
        """Collect the messages of a Pydantic ValidationError by field."""
        return cls(collect_errors(exc.errors()))

    def to_problem(self) -> ProblemDetails:
        problem = super().to_problem()
        problem.errors = self.errors
        return problem


def collect_errors(
    errors: list[dict], skip: tuple[str, ...] = ("body", "query", "path")
) -> dict[str, list[str]]:
    """Group Pydantic/FastAPI error entries by dotted field location.

    Leading location parts listed in ``skip`` (the request part) are dropped.
    Errors without a field location are grouped under ``""``.
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        while loc and loc[0] in skip:
            loc.pop(0)
        grouped.setdefault(".".join(loc), []).append(error.get("msg", "Invalid value"))
    return grouped
