"""Tests for JSON-Patch application."""

from datetime import date

import pytest
from pydantic import ValidationError

from filmes_api.schemas.movie import MovieUpdate
from filmes_api.schemas.patch import PatchOperation
from filmes_api.services.base import ValidationProblemError
from filmes_api.services.patching import apply_patch


@pytest.fixture
def document() -> MovieUpdate:
    """A valid movie update document."""
    return MovieUpdate(title="Tropa de Elite", genre="Ação", duration=115)


def ops(*operations: dict) -> list[PatchOperation]:
    """Build patch operations from their wire form."""
    return [PatchOperation.model_validate(operation) for operation in operations]


def test_replace(document: MovieUpdate) -> None:
    """Test replacing a single field."""
    patched = apply_patch(document, ops({"op": "replace", "path": "/duration", "value": 118}))

    assert patched.duration == 118
    assert patched.title == "Tropa de Elite"
    assert document.duration == 115


def test_add_date(document: MovieUpdate) -> None:
    """Test that string values are validated into the field's type."""
    patched = apply_patch(
        document, ops({"op": "add", "path": "/release_date", "value": "2007-10-12"})
    )

    assert patched.release_date == date(2007, 10, 12)


def test_copy_and_move(document: MovieUpdate) -> None:
    """Test operations that use a source pointer."""
    patched = apply_patch(
        document,
        ops(
            {"op": "copy", "from": "/genre", "path": "/title"},
        ),
    )

    assert patched.title == "Ação"

    with pytest.raises(ValidationProblemError) as exc_info:
        apply_patch(document, ops({"op": "move", "from": "/genre", "path": "/subgenre"}))

    errors = exc_info.value.errors
    assert "genre" in errors
    assert "subgenre" in errors


def test_failed_test_operation(document: MovieUpdate) -> None:
    """Test that a failing test operation aborts the patch."""
    with pytest.raises(ValidationProblemError) as exc_info:
        apply_patch(
            document,
            ops(
                {"op": "test", "path": "/genre", "value": "Drama"},
                {"op": "replace", "path": "/genre", "value": "Drama"},
            ),
        )

    assert exc_info.value.status_code == 400
    assert "" in exc_info.value.errors


def test_replace_missing_path(document: MovieUpdate) -> None:
    """Test that replacing a field that does not exist is rejected."""
    with pytest.raises(ValidationProblemError):
        apply_patch(document, ops({"op": "replace", "path": "/director", "value": "Padilha"}))


def test_invalid_pointer(document: MovieUpdate) -> None:
    """Test that a malformed JSON pointer is rejected."""
    with pytest.raises(ValidationProblemError):
        apply_patch(document, ops({"op": "replace", "path": "title", "value": "x"}))


def test_patched_document_is_revalidated(document: MovieUpdate) -> None:
    """Test that constraint violations in the result are reported by field."""
    with pytest.raises(ValidationProblemError) as exc_info:
        apply_patch(
            document,
            ops(
                {"op": "replace", "path": "/duration", "value": 601},
                {"op": "replace", "path": "/title", "value": ""},
            ),
        )

    assert set(exc_info.value.errors) == {"duration", "title"}


def test_replace_root_with_non_object(document: MovieUpdate) -> None:
    """Test that replacing the whole document with a scalar is rejected."""
    with pytest.raises(ValidationProblemError):
        apply_patch(document, ops({"op": "replace", "path": "", "value": 3}))


def test_problem_body() -> None:
    """Test the RFC 7807 body of a validation problem."""
    problem = ValidationProblemError({"title": ["Field required"]}).to_problem()

    assert problem.status == 400
    assert problem.title == "One or more validation errors occurred."
    assert problem.errors == {"title": ["Field required"]}


@pytest.mark.parametrize("op", ["add", "replace", "test"])
def test_value_is_required(op: str) -> None:
    """Test that add, replace and test without a value member are rejected."""
    with pytest.raises(ValidationError, match="requires 'value'"):
        PatchOperation.model_validate({"op": op, "path": "/release_date"})


def test_explicit_null_value(document: MovieUpdate) -> None:
    """Test that an explicit null value is applied as given."""
    dated = document.model_copy(update={"release_date": date(2007, 10, 12)})

    patched = apply_patch(dated, ops({"op": "replace", "path": "/release_date", "value": None}))

    assert patched.release_date is None


def test_source_pointer_uses_from_key() -> None:
    """Test that only the RFC 6902 'from' member names the source."""
    with pytest.raises(ValidationError, match="requires 'from'"):
        PatchOperation.model_validate({"op": "move", "from_": "/genre", "path": "/title"})

    operation = PatchOperation.model_validate({"op": "move", "from": "/genre", "path": "/title"})
    assert operation.to_document() == {"op": "move", "path": "/title", "from": "/genre"}


def test_patch_repairs_out_of_range_document() -> None:
    """Test that only the patched document is validated."""
    stored = MovieUpdate.model_construct(title="Curta", genre="Drama", duration=10)

    patched = apply_patch(stored, ops({"op": "replace", "path": "/duration", "value": 120}))

    assert patched.duration == 120
