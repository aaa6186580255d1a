"""Tool model: the MCP Tool definition plus toolmodel extensions.

:class:`MCPTool` mirrors the MCP Tool object field for field (see
:data:`MCP_VERSION`).  :class:`Tool` extends it with ``namespace``,
``version`` and ``tags``, which are dropped when serializing to MCP JSON.

Schemas may be given as a mapping, JSON bytes, or a
:class:`~toolmodel.schema.models.JSONSchema`; they always serialize as
plain JSON objects.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_serializer

from toolmodel.errors import InvalidToolError, InvalidToolIDError
from toolmodel.schema.normalizer import schema_to_document

MCP_VERSION = "2025-11-25"

MAX_TOOL_NAME_LEN = 128

_NAME_EXTRA_CHARS = frozenset("_-.")


class ToolIcon(BaseModel):
    """An icon for display in user interfaces (MCP ``Icon``)."""

    model_config = {"populate_by_name": True}

    src: str
    mime_type: str | None = Field(default=None, alias="mimeType")
    sizes: list[str] | None = None
    theme: Literal["light", "dark"] | None = None


class ToolAnnotations(BaseModel):
    """Behavioural hints about a tool (MCP ``ToolAnnotations``)."""

    model_config = {"populate_by_name": True}

    title: str | None = None
    read_only_hint: bool | None = Field(default=None, alias="readOnlyHint")
    destructive_hint: bool | None = Field(default=None, alias="destructiveHint")
    idempotent_hint: bool | None = Field(default=None, alias="idempotentHint")
    open_world_hint: bool | None = Field(default=None, alias="openWorldHint")


class MCPTool(BaseModel):
    """A tool definition exactly as MCP describes it."""

    model_config = {"populate_by_name": True}

    name: str = ""
    title: str | None = None
    description: str = ""
    input_schema: Any = Field(default=None, alias="inputSchema")
    output_schema: Any = Field(default=None, alias="outputSchema")
    annotations: ToolAnnotations | None = None
    icons: list[ToolIcon] | None = None
    meta: dict[str, Any] | None = Field(default=None, alias="_meta")

    @field_serializer("input_schema", "output_schema")
    def _serialize_schema(self, value: Any) -> dict[str, Any] | None:
        return schema_to_document(value)


class Tool(MCPTool):
    """An MCP tool with a namespace, version, and search tags."""

    namespace: str = ""
    version: str = ""
    tags: list[str] = Field(default_factory=list)

    def tool_id(self) -> str:
        """Return ``"namespace:name"``, or just ``"name"`` without a namespace."""
        if not self.namespace:
            return self.name
        return f"{self.namespace}:{self.name}"

    def check(self) -> None:
        """Check the invariants consumers rely on.

        Schemas themselves are not validated here; use a
        :class:`~toolmodel.schema.validator.SchemaValidator` for that.

        Raises:
            InvalidToolError: If the name is missing, too long, or contains
                characters outside ``[A-Za-z0-9_.-]``, or the input schema
                is missing.
        """
        if not self.name:
            raise InvalidToolError("name is required")
        if len(self.name) > MAX_TOOL_NAME_LEN:
            raise InvalidToolError(f"name exceeds {MAX_TOOL_NAME_LEN} characters")

        invalid = [c for c in dict.fromkeys(self.name) if not _valid_name_char(c)]
        if invalid:
            raise InvalidToolError(f"name contains invalid characters: {', '.join(invalid)}")

        if self.input_schema is None:
            raise InvalidToolError("inputSchema is required")

    def to_mcp_json(self) -> bytes:
        """Serialize only the standard MCP fields."""
        return self.model_dump_json(
            by_alias=True,
            exclude_defaults=True,
            include=set(MCPTool.model_fields),
        ).encode()

    def to_json(self) -> bytes:
        """Serialize the full tool, extensions included."""
        return self.model_dump_json(by_alias=True, exclude_defaults=True).encode()


def parse_tool_id(tool_id: str) -> tuple[str, str]:
    """Split *tool_id* into ``(namespace, name)``.

    ``"name"`` yields an empty namespace.

    Raises:
        InvalidToolIDError: If *tool_id* is empty, has more than one colon,
            or has an empty namespace or name around its colon.
    """
    if not tool_id or tool_id.count(":") > 1:
        raise InvalidToolIDError(tool_id)

    namespace, sep, name = tool_id.partition(":")
    if not sep:
        return "", tool_id
    if not namespace or not name:
        raise InvalidToolIDError(tool_id)
    return namespace, name


def from_mcp_json(data: str | bytes) -> Tool:
    """Parse MCP Tool JSON; ``namespace``, ``version`` and ``tags`` stay empty."""
    mcp_tool = MCPTool.model_validate_json(data)
    return Tool.model_validate(mcp_tool.model_dump())


def from_json(data: str | bytes) -> Tool:
    """Parse full Tool JSON, extensions included."""
    return Tool.model_validate_json(data)


def _valid_name_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in _NAME_EXTRA_CHARS
