"""Canonical JSON Schema object and validator configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JSONSchema(BaseModel):
    """One JSON Schema document, independent of how it was supplied.

    Only the dialect marker is modelled as a field, and it is read from the
    ``$schema`` keyword alone; every other keyword (a literal ``dialect``
    included) is kept verbatim as an extra attribute::

        schema = JSONSchema.model_validate({"$schema": "...", "type": "string"})
        schema = JSONSchema(type="object", additionalProperties=False)

    A ``null`` marker is the same as no marker.
    """

    model_config = ConfigDict(extra="allow")

    dialect: str = Field(default="", validation_alias="$schema")

    @field_validator("dialect", mode="before")
    @classmethod
    def _null_dialect(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_document(self) -> dict[str, Any]:
        """Return the schema as a plain JSON object."""
        document: dict[str, Any] = {}
        if self.dialect:
            document["$schema"] = self.dialect
        document.update(self.model_extra or {})
        return document


class ValidatorConfig(BaseModel):
    """Configuration for :class:`~toolmodel.schema.validator.DefaultValidator`."""

    format_checking: bool = Field(
        default=False,
        description="Assert the 'format' keyword instead of treating it as an annotation.",
    )
    check_schema: bool = Field(
        default=True,
        description="Check the schema against the 2020-12 meta-schema before validating.",
    )
