"""JSON Schema layer: normalization, dialect negotiation, and validation."""

from toolmodel.schema.dialect import (
    SCHEMA_DIALECT_2020_12,
    SCHEMA_DIALECT_DRAFT_07,
    SCHEMA_DIALECT_DRAFT_07_ALT,
    Dialect,
    negotiate_dialect,
)
from toolmodel.schema.models import JSONSchema, ValidatorConfig
from toolmodel.schema.normalizer import schema_to_document, to_json_schema
from toolmodel.schema.validator import DefaultValidator, SchemaValidator

__all__ = [
    "SCHEMA_DIALECT_2020_12",
    "SCHEMA_DIALECT_DRAFT_07",
    "SCHEMA_DIALECT_DRAFT_07_ALT",
    "DefaultValidator",
    "Dialect",
    "JSONSchema",
    "SchemaValidator",
    "ValidatorConfig",
    "negotiate_dialect",
    "schema_to_document",
    "to_json_schema",
]
