"""Pydantic schema for JSON-Patch (RFC 6902) documents."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


class PatchOperation(BaseModel):
    """A single JSON-Patch operation."""

    op: Literal["add", "remove", "replace", "move", "copy", "test"] = Field(
        description="Operation to perform"
    )
    path: str = Field(description="JSON Pointer to the target location")
    value: Any = Field(default=None, description="Value for add, replace and test")
    from_: str | None = Field(
        default=None, alias="from", description="Source pointer for move and copy"
    )

    @model_validator(mode="after")
    def check_operands(self) -> "PatchOperation":
        """Require a value for add, replace and test, and a source for move and copy."""
        if self.op in ("add", "replace", "test") and "value" not in self.model_fields_set:
            msg = f"'{self.op}' operation requires 'value'"
            raise ValueError(msg)
        if self.op in ("move", "copy") and self.from_ is None:
            msg = f"'{self.op}' operation requires 'from'"
            raise ValueError(msg)
        return self

    def to_document(self) -> dict[str, Any]:
        """Return the operation in its RFC 6902 wire form."""
        document: dict[str, Any] = {"op": self.op, "path": self.path}
        if self.op in ("add", "replace", "test"):
            document["value"] = self.value
        if self.from_ is not None:
            document["from"] = self.from_
        return document
