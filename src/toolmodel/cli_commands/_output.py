"""Shared CLI output formatters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from toolmodel.errors import (
    ExternalRefBlockedError,
    InvalidSchemaError,
    SchemaResolutionError,
    SchemaValidationError,
    ToolModelError,
    UnsupportedSchemaDialectError,
)

if TYPE_CHECKING:
    from toolmodel.tool import Tool

console = Console()

# Most specific first: ExternalRefBlockedError is a SchemaResolutionError.
_ERROR_KINDS: list[tuple[type[ToolModelError], str]] = [
    (InvalidSchemaError, "InvalidSchema"),
    (UnsupportedSchemaDialectError, "UnsupportedSchemaDialect"),
    (ExternalRefBlockedError, "ExternalReferenceBlocked"),
    (SchemaResolutionError, "ResolutionFailed"),
    (SchemaValidationError, "ValidationFailed"),
]


def error_kind(exc: ToolModelError) -> str:
    """Return the taxonomy name for *exc*."""
    for cls, kind in _ERROR_KINDS:
        if isinstance(exc, cls):
            return kind
    return type(exc).__name__


def print_error(exc: ToolModelError) -> None:
    """Print a classified error."""
    console.print(f"[red]{error_kind(exc)}:[/red] {escape(str(exc))}")


def print_valid() -> None:
    console.print("[green]valid[/green]")


def print_tool(tool: Tool) -> None:
    """Pretty-print a tool summary as a table."""
    table = Table(title=f"Tool {tool.tool_id()}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("ID", escape(tool.tool_id()))
    table.add_row("Name", escape(tool.name))
    table.add_row("Namespace", escape(tool.namespace) or "-")
    table.add_row("Version", escape(tool.version) or "-")
    table.add_row("Description", escape(_truncate(tool.description)) or "-")
    table.add_row("Tags", escape(", ".join(tool.tags)) or "-")
    table.add_row("Input schema", "yes" if tool.input_schema is not None else "no")
    table.add_row("Output schema", "yes" if tool.output_schema is not None else "no")

    console.print(table)


def print_json_bytes(data: bytes) -> None:
    """Pretty-print serialized JSON."""
    console.print_json(data.decode())


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
