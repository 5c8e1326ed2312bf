"""JSON-Patch (RFC 6902) support for movie updates."""

import logging

import jsonpatch
import jsonpointer
from pydantic import ValidationError

from filmes_api.schemas.movie import MovieUpdate
from filmes_api.schemas.patch import PatchOperation
from filmes_api.services.base import ValidationProblemError

logger = logging.getLogger(__name__)


def apply_patch(document: MovieUpdate, operations: list[PatchOperation]) -> MovieUpdate:
    """Apply a JSON-Patch to a movie update document and re-validate it.

    Args:
        document: The current state of the movie as an update document.
        operations: The patch operations, applied in order.

    Returns:
        A new, validated update document.

    Raises:
        ValidationProblemError: If an operation cannot be applied (failed
            ``test``, missing target, malformed pointer) or the patched
            document is not a valid movie.
    """
    try:
        patch = jsonpatch.JsonPatch([operation.to_document() for operation in operations])
        patched = patch.apply(document.model_dump(mode="json"))
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as e:
        logger.debug("Rejected JSON-Patch: %s", e)
        raise ValidationProblemError({"": [str(e)]}) from e

    if not isinstance(patched, dict):
        raise ValidationProblemError({"": ["The patched document must be a JSON object"]})

    try:
        return MovieUpdate.model_validate(patched)
    except ValidationError as e:
        raise ValidationProblemError.from_validation_error(e) from e
