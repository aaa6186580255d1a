"""JSON Schema dialect negotiation.

MCP assumes JSON Schema 2020-12 when a schema carries no ``$schema``.
Draft-07 schemas are accepted by clearing their marker and validating with
the 2020-12 rule set; keywords whose meaning changed between the two drafts
(tuple-form ``items``, ``additionalItems``, ``dependencies``) are not
reinterpreted.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from toolmodel.errors import UnsupportedSchemaDialectError

if TYPE_CHECKING:
    from toolmodel.schema.models import JSONSchema

logger = logging.getLogger(__name__)

SCHEMA_DIALECT_2020_12 = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_DIALECT_DRAFT_07 = "http://json-schema.org/draft-07/schema#"
SCHEMA_DIALECT_DRAFT_07_ALT = "http://json-schema.org/draft-07/schema"

_PREFIX_2020_12 = "https://json-schema.org/draft/2020-12/"
_PREFIX_DRAFT_07 = "http://json-schema.org/draft-07/"


class Dialect(str, Enum):
    """Rule set a schema is validated with."""

    DRAFT_2020_12 = "2020-12"
    DRAFT_07 = "draft-07"


def negotiate_dialect(schema: JSONSchema) -> Dialect:
    """Accept or reject *schema*'s ``$schema`` marker.

    Draft-07 markers are cleared on *schema* itself, so callers must pass an
    owned copy (see :func:`~toolmodel.schema.normalizer.to_json_schema`).

    Raises:
        UnsupportedSchemaDialectError: For any marker outside the two
            supported families.
    """
    dialect = schema.dialect
    if not dialect:
        return Dialect.DRAFT_2020_12

    if dialect == SCHEMA_DIALECT_2020_12 or dialect.startswith(_PREFIX_2020_12):
        return Dialect.DRAFT_2020_12

    if dialect in (SCHEMA_DIALECT_DRAFT_07, SCHEMA_DIALECT_DRAFT_07_ALT) or dialect.startswith(
        _PREFIX_DRAFT_07
    ):
        logger.debug("Validating draft-07 schema (%s) with 2020-12 rules", dialect)
        schema.dialect = ""
        return Dialect.DRAFT_07

    raise UnsupportedSchemaDialectError(dialect)
