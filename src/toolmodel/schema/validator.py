"""SchemaValidator protocol and the default jsonschema-backed implementation.

Validation runs in four steps:

1. normalize the schema into an owned :class:`JSONSchema`;
2. negotiate its dialect (2020-12 by default, draft-07 downgraded);
3. resolve every ``$ref`` / ``$dynamicRef`` through a registry whose loader
   refuses all retrievals, so only references inside the document work,
   and reject reference cycles that never descend into the instance;
4. validate the instance with :class:`jsonschema.Draft202012Validator`.

No step performs I/O and no state is shared between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError, best_match
from referencing import Registry, Resource
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT202012

from toolmodel.errors import (
    ExternalRefBlockedError,
    InvalidSchemaError,
    JSONSchemaError,
    SchemaResolutionError,
    SchemaValidationError,
)
from toolmodel.schema.dialect import negotiate_dialect
from toolmodel.schema.models import ValidatorConfig
from toolmodel.schema.normalizer import to_json_schema
from toolmodel.utils.telemetry import (
    ATTR_SCHEMA_DIALECT,
    ATTR_TOOL_DIRECTION,
    ATTR_TOOL_ID,
    ATTR_VALIDATION_ERROR,
    ATTR_VALIDATION_OUTCOME,
    get_tracer,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from referencing import Resolver

    from toolmodel.tool import Tool

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_REF_KEYWORDS = ("$ref", "$dynamicRef")

# Applicators evaluated against the same instance location as their parent.
_IN_PLACE_ARRAYS = ("allOf", "anyOf", "oneOf")
_IN_PLACE_SCHEMAS = ("not", "if", "then", "else")

_ON_PATH = 0
_DONE = 1


@runtime_checkable
class SchemaValidator(Protocol):
    """Validates JSON instances against JSON Schemas.

    Implementations must not mutate caller-owned schemas or instances, must
    be deterministic, and must be safe for concurrent use.  Every method
    returns ``None`` on success and raises a
    :class:`~toolmodel.errors.JSONSchemaError` subclass on failure.
    """

    def validate(self, schema: Any, instance: Any) -> None:
        """Validate *instance* against *schema*."""
        ...

    def validate_input(self, tool: Tool | None, args: Any) -> None:
        """Validate tool arguments against ``tool.input_schema``.

        Raises :class:`~toolmodel.errors.InvalidSchemaError` when the tool or
        its input schema is missing.
        """
        ...

    def validate_output(self, tool: Tool | None, result: Any) -> None:
        """Validate a tool result against ``tool.output_schema`` when present."""
        ...


class DefaultValidator:
    """JSON Schema 2020-12 validator with draft-07 compatibility.

    Satisfies the :class:`SchemaValidator` protocol.

    External ``$ref`` resolution is disabled: the registry's loader raises
    :class:`~toolmodel.errors.ExternalRefBlockedError` for every URI it is
    asked to fetch.  The ``format`` keyword is an annotation unless
    ``config.format_checking`` is set; content keywords
    (``contentEncoding``, ``contentMediaType``) are never asserted.
    """

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self._config = config or ValidatorConfig()

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def validate(self, schema: Any, instance: Any) -> None:
        """Validate *instance* against *schema*.

        Raises:
            InvalidSchemaError: The schema cannot be normalized.
            UnsupportedSchemaDialectError: ``$schema`` is not 2020-12 or draft-07.
            ExternalRefBlockedError: The schema references another document.
            SchemaResolutionError: Any other reference or meta-schema defect.
            SchemaValidationError: The instance does not conform.
        """
        with _tracer.start_as_current_span("toolmodel.schema.validate") as span:
            try:
                json_schema = to_json_schema(schema)
                dialect = negotiate_dialect(json_schema)
                span.set_attribute(ATTR_SCHEMA_DIALECT, dialect.value)

                document = json_schema.to_document()
                registry = self._resolve(document)
                self._check_instance(document, registry, instance)
            except JSONSchemaError as exc:
                span.set_attribute(ATTR_VALIDATION_OUTCOME, "error")
                span.set_attribute(ATTR_VALIDATION_ERROR, type(exc).__name__)
                raise
            span.set_attribute(ATTR_VALIDATION_OUTCOME, "ok")

    def validate_input(self, tool: Tool | None, args: Any) -> None:
        """Validate *args* against the tool's input schema."""
        if tool is None:
            raise InvalidSchemaError("tool is None")
        if tool.input_schema is None:
            raise InvalidSchemaError("input schema is None")
        with _tracer.start_as_current_span("toolmodel.tool.validate") as span:
            span.set_attribute(ATTR_TOOL_ID, tool.tool_id())
            span.set_attribute(ATTR_TOOL_DIRECTION, "input")
            self.validate(tool.input_schema, args)

    def validate_output(self, tool: Tool | None, result: Any) -> None:
        """Validate *result* against the tool's output schema.

        Output schemas are optional: a tool without one accepts any result.
        A missing tool is an error rather than a silent pass.
        """
        if tool is None:
            raise InvalidSchemaError("tool is None")
        if tool.output_schema is None:
            return
        with _tracer.start_as_current_span("toolmodel.tool.validate") as span:
            span.set_attribute(ATTR_TOOL_ID, tool.tool_id())
            span.set_attribute(ATTR_TOOL_DIRECTION, "output")
            self.validate(tool.output_schema, result)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve(self, document: dict[str, Any]) -> Registry[Any]:
        """Check the schema and resolve all of its references."""
        if self._config.check_schema:
            try:
                Draft202012Validator.check_schema(document)
            except SchemaError as exc:
                raise SchemaResolutionError(exc.message) from exc

        resource = DRAFT202012.create_resource(document)
        registry: Registry[Any] = Registry(retrieve=_block_external_refs)
        try:
            _lookup_refs(registry.resolver_with_root(resource), resource, {})
        except Unresolvable as exc:
            blocked = _blocked_cause(exc)
            if blocked is not None:
                raise ExternalRefBlockedError(blocked.ref) from exc
            raise SchemaResolutionError(str(exc)) from exc
        except RecursionError as exc:
            raise SchemaResolutionError("schema nesting exceeds the recursion limit") from exc
        return registry

    def _check_instance(
        self, document: dict[str, Any], registry: Registry[Any], instance: Any
    ) -> None:
        format_checker = Draft202012Validator.FORMAT_CHECKER if self._config.format_checking else None
        validator = Draft202012Validator(document, registry=registry, format_checker=format_checker)
        try:
            error = best_match(validator.iter_errors(instance))
        except Unresolvable as exc:
            raise SchemaResolutionError(str(exc)) from exc
        except RecursionError as exc:
            raise SchemaResolutionError("recursion limit exceeded during validation") from exc

        if error is not None:
            logger.debug("Instance rejected: %s", error.message)
            raise SchemaValidationError(error.message, list(error.absolute_path))


def _block_external_refs(uri: str) -> Resource[Any]:
    """Registry loader that refuses every retrieval."""
    logger.debug("Blocked external $ref: %s", uri)
    raise ExternalRefBlockedError(uri)


def _lookup_refs(resolver: Resolver[Any], resource: Resource[Any], visits: dict[int, int]) -> None:
    """Look up every reference in *resource* and its subschemas.

    Also rejects reference cycles that come back to a schema without
    descending into the instance, such as ``{"$ref": "#"}``.
    """
    _check_cycles(resolver, resource.contents, visits)
    for subresource in resource.subresources():
        _lookup_refs(resolver.in_subresource(subresource), subresource, visits)


def _check_cycles(resolver: Resolver[Any], contents: Any, visits: dict[int, int]) -> None:
    if not isinstance(contents, Mapping):
        return
    # Subschemas are keyed by identity; lookups return objects from the document itself.
    key = id(contents)
    state = visits.get(key)
    if state == _DONE:
        return
    if state == _ON_PATH:
        raise SchemaResolutionError("recursive $ref cycle")

    visits[key] = _ON_PATH
    for next_resolver, subschema in _in_place_subschemas(resolver, contents):
        _check_cycles(next_resolver, subschema, visits)
    visits[key] = _DONE


def _in_place_subschemas(
    resolver: Resolver[Any], contents: Mapping[str, Any]
) -> Iterator[tuple[Resolver[Any], Any]]:
    """Yield the subschemas applied at the same instance location as *contents*."""
    for keyword in _REF_KEYWORDS:
        ref = contents.get(keyword)
        if isinstance(ref, str):
            resolved = resolver.lookup(ref)
            yield resolved.resolver, resolved.contents

    children: list[Any] = []
    for keyword in _IN_PLACE_ARRAYS:
        value = contents.get(keyword)
        if isinstance(value, list):
            children.extend(value)  # pyright: ignore[reportUnknownArgumentType]
    for keyword in _IN_PLACE_SCHEMAS:
        if keyword in contents:
            children.append(contents[keyword])
    dependent = contents.get("dependentSchemas")
    if isinstance(dependent, Mapping):
        children.extend(dependent.values())  # pyright: ignore[reportUnknownArgumentType]

    for child in children:
        if isinstance(child, Mapping):
            yield resolver.in_subresource(DRAFT202012.create_resource(child)), child


def _blocked_cause(exc: BaseException) -> ExternalRefBlockedError | None:
    """Find the loader's refusal in *exc*'s cause chain, if any."""
    cause: BaseException | None = exc
    while cause is not None:
        if isinstance(cause, ExternalRefBlockedError):
            return cause
        cause = cause.__cause__
    return None
