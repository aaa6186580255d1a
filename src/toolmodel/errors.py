"""Shared error types for the tool model and schema validation."""

from __future__ import annotations


class ToolModelError(Exception):
    """Base error for all toolmodel failures."""


class InvalidToolIDError(ToolModelError):
    """A tool ID string is malformed."""

    def __init__(self, tool_id: str) -> None:
        self.tool_id = tool_id
        super().__init__(f"invalid tool ID format: {tool_id!r}")


class InvalidToolError(ToolModelError):
    """A :class:`~toolmodel.tool.Tool` violates a basic invariant."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid tool: {detail}")


class InvalidBackendError(ToolModelError):
    """A :class:`~toolmodel.backend.ToolBackend` is missing required details."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid backend: {detail}")


class ToolLoadError(ToolModelError):
    """A tool or schema file could not be read or parsed."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot load {path}" + (f": {detail}" if detail else ""))


# ---------------------------------------------------------------------------
# JSON Schema errors
# ---------------------------------------------------------------------------


class JSONSchemaError(ToolModelError):
    """Base error for schema normalization, resolution, and validation."""


class InvalidSchemaError(JSONSchemaError):
    """The schema is absent, empty, undecodable, or of an unsupported type."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("invalid JSON Schema" + (f": {detail}" if detail else ""))


class UnsupportedSchemaDialectError(JSONSchemaError):
    """The schema declares a ``$schema`` outside 2020-12 and draft-07."""

    def __init__(self, dialect: str) -> None:
        self.dialect = dialect
        super().__init__(
            f"unsupported JSON Schema dialect: {dialect} "
            "(only 2020-12 and draft-07 are supported)"
        )


class SchemaResolutionError(JSONSchemaError):
    """Resolving the schema's references failed."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("schema resolution failed" + (f": {detail}" if detail else ""))


class ExternalRefBlockedError(SchemaResolutionError):
    """The schema needs a reference from outside its own document."""

    def __init__(self, ref: str) -> None:
        self.ref = ref
        super().__init__(f"external $ref resolution is disabled: {ref}")


class SchemaValidationError(JSONSchemaError):
    """The instance does not conform to the schema."""

    def __init__(self, message: str, path: list[str | int] | None = None) -> None:
        self.message = message
        self.path = list(path or [])
        text = f"validation failed: {message}"
        if self.path:
            text += f" at {self.pointer}"
        super().__init__(text)

    @property
    def pointer(self) -> str:
        """JSON Pointer to the failing location in the instance."""
        if not self.path:
            return ""
        return "/" + "/".join(
            str(p).replace("~", "~0").replace("/", "~1") for p in self.path
        )
