"""Schema normalizer: turn any accepted schema representation into a :class:`JSONSchema`.

Accepted representations:

- a :class:`JSONSchema` instance (shallow-copied, never mutated)
- a mapping of string keys to JSON values
- bytes-like JSON text (``bytes``, ``bytearray``, ``memoryview``)

Everything else is rejected with :class:`~toolmodel.errors.InvalidSchemaError`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from toolmodel.errors import InvalidSchemaError
from toolmodel.schema.models import JSONSchema

_BYTES_TYPES = (bytes, bytearray, memoryview)


def to_json_schema(schema: Any) -> JSONSchema:
    """Return a :class:`JSONSchema` owned exclusively by the caller.

    Raises:
        InvalidSchemaError: If *schema* is absent, empty, undecodable, or of
            an unsupported type.
    """
    if schema is None:
        raise InvalidSchemaError("nil schema")

    if isinstance(schema, JSONSchema):
        # Dialect negotiation rewrites the marker; keep that off the caller's object.
        return schema.model_copy()

    if isinstance(schema, _BYTES_TYPES):
        data = bytes(schema)
        if not data:
            raise InvalidSchemaError("empty schema")
        return _decode(data)

    if isinstance(schema, Mapping):
        try:
            data = json.dumps(dict(schema)).encode()
        except (TypeError, ValueError, RecursionError) as exc:
            raise InvalidSchemaError(f"failed to marshal schema: {exc}") from exc
        return _decode(data)

    raise InvalidSchemaError(
        f"expected a mapping, JSON bytes or JSONSchema, got {type(schema).__name__}"
    )


def schema_to_document(schema: Any) -> dict[str, Any] | None:
    """Return *schema* as a plain JSON object, passing ``None`` through."""
    if schema is None:
        return None
    if isinstance(schema, Mapping):
        return dict(schema)
    return to_json_schema(schema).to_document()


def _decode(data: bytes) -> JSONSchema:
    try:
        return JSONSchema.model_validate_json(data)
    except ValidationError as exc:
        raise InvalidSchemaError(f"failed to parse schema: {exc}") from exc
