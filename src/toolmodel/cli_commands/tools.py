"""``toolmodel tools``: inspect tool definitions and check payloads against them."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import click

from toolmodel.cli_commands._output import (
    console,
    print_error,
    print_json_bytes,
    print_tool,
    print_valid,
)
from toolmodel.errors import ToolModelError
from toolmodel.loader import load_document, load_tool
from toolmodel.schema.validator import DefaultValidator
from toolmodel.tool import parse_tool_id

if TYPE_CHECKING:
    from collections.abc import Callable

    from toolmodel.tool import Tool

_FILE = click.Path(exists=True, dir_okay=False)


@click.group()
def tools() -> None:
    """Inspect tool definitions."""


@tools.command("show")
@click.argument("tool_file", type=_FILE)
@click.option(
    "--json",
    "output",
    flag_value="json",
    default=None,
    help="Print the full tool JSON, extensions included.",
)
@click.option("--mcp", "output", flag_value="mcp", help="Print MCP-compatible JSON only.")
def show(tool_file: str, output: str | None) -> None:
    """Load TOOL_FILE, check its invariants, and print it."""
    tool = _load_checked(tool_file)

    if output == "json":
        print_json_bytes(tool.to_json())
    elif output == "mcp":
        print_json_bytes(tool.to_mcp_json())
    else:
        print_tool(tool)


@tools.command("check-input")
@click.argument("tool_file", type=_FILE)
@click.argument("args_file", type=_FILE)
def check_input(tool_file: str, args_file: str) -> None:
    """Validate ARGS_FILE against the input schema of TOOL_FILE."""
    tool = _load_checked(tool_file)
    _run(lambda v, payload: v.validate_input(tool, payload), args_file)


@tools.command("check-output")
@click.argument("tool_file", type=_FILE)
@click.argument("result_file", type=_FILE)
def check_output(tool_file: str, result_file: str) -> None:
    """Validate RESULT_FILE against the output schema of TOOL_FILE (if any)."""
    tool = _load_checked(tool_file)
    if tool.output_schema is None:
        console.print("[yellow]Tool has no output schema; any result is accepted.[/yellow]")
    _run(lambda v, payload: v.validate_output(tool, payload), result_file)


@tools.command("parse-id")
@click.argument("tool_id")
def parse_id(tool_id: str) -> None:
    """Split TOOL_ID into namespace and name."""
    try:
        namespace, name = parse_tool_id(tool_id)
    except ToolModelError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    console.print(f"namespace: {namespace or '(none)'}")
    console.print(f"name: {name}")


def _load_checked(path: str) -> Tool:
    try:
        tool = load_tool(path)
        tool.check()
    except ToolModelError as exc:
        console.print(f"[red]Invalid tool:[/red] {exc}")
        sys.exit(1)
    return tool


def _run(check: Callable[[DefaultValidator, Any], None], payload_file: str) -> None:
    try:
        payload = load_document(payload_file)
        check(DefaultValidator(), payload)
    except ToolModelError as exc:
        print_error(exc)
        sys.exit(1)

    print_valid()
