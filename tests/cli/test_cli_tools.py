"""Tests for ``toolmodel tools`` CLI commands."""

from __future__ import annotations

from typing import Any

import pytest
from click.testing import CliRunner

from toolmodel.cli import main

READ_TOOL = {
    "name": "read",
    "namespace": "filesystem",
    "version": "1.2.0",
    "description": "Read a file",
    "tags": ["fs", "io"],
    "inputSchema": {
        "type": "object",
        "properties": {"path": {"type": "string"}},
        "required": ["path"],
    },
    "outputSchema": {"type": "object", "properties": {"content": {"type": "string"}}},
}


@pytest.fixture
def tool_file(write_json: Any) -> str:
    return write_json("tool.json", READ_TOOL)


class TestToolsShow:
    def test_table(self, tool_file: str) -> None:
        result = CliRunner().invoke(main, ["tools", "show", tool_file])
        assert result.exit_code == 0
        assert "filesystem:read" in result.output
        assert "1.2.0" in result.output

    def test_json(self, tool_file: str) -> None:
        result = CliRunner().invoke(main, ["tools", "show", tool_file, "--json"])
        assert result.exit_code == 0
        assert '"namespace"' in result.output
        assert '"inputSchema"' in result.output

    def test_mcp(self, tool_file: str) -> None:
        result = CliRunner().invoke(main, ["tools", "show", tool_file, "--mcp"])
        assert result.exit_code == 0
        assert '"inputSchema"' in result.output
        assert '"namespace"' not in result.output
        assert '"tags"' not in result.output

    def test_invalid_tool(self, write_json: Any) -> None:
        path = write_json("tool.json", {"name": "bad name", "inputSchema": {"type": "object"}})
        result = CliRunner().invoke(main, ["tools", "show", path])
        assert result.exit_code == 1
        assert "Invalid tool" in result.output

    def test_missing_input_schema(self, write_json: Any) -> None:
        path = write_json("tool.json", {"name": "bare"})
        result = CliRunner().invoke(main, ["tools", "show", path])
        assert result.exit_code == 1
        assert "inputSchema is required" in result.output


class TestToolsCheckInput:
    def test_valid(self, tool_file: str, write_json: Any) -> None:
        args = write_json("args.json", {"path": "/tmp/a.txt"})
        result = CliRunner().invoke(main, ["tools", "check-input", tool_file, args])
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_missing_required(self, tool_file: str, write_json: Any) -> None:
        args = write_json("args.json", {})
        result = CliRunner().invoke(main, ["tools", "check-input", tool_file, args])
        assert result.exit_code == 1
        assert "ValidationFailed" in result.output


class TestToolsCheckOutput:
    def test_valid(self, tool_file: str, write_json: Any) -> None:
        res = write_json("result.json", {"content": "hello"})
        result = CliRunner().invoke(main, ["tools", "check-output", tool_file, res])
        assert result.exit_code == 0

    def test_invalid(self, tool_file: str, write_json: Any) -> None:
        res = write_json("result.json", {"content": 1})
        result = CliRunner().invoke(main, ["tools", "check-output", tool_file, res])
        assert result.exit_code == 1
        assert "ValidationFailed" in result.output

    def test_no_output_schema(self, write_json: Any) -> None:
        path = write_json("tool.json", {"name": "echo", "inputSchema": {"type": "object"}})
        res = write_json("result.json", [1, "anything"])
        result = CliRunner().invoke(main, ["tools", "check-output", path, res])
        assert result.exit_code == 0
        assert "no output schema" in result.output


class TestToolsParseID:
    def test_namespaced(self) -> None:
        result = CliRunner().invoke(main, ["tools", "parse-id", "filesystem:read"])
        assert result.exit_code == 0
        assert "namespace: filesystem" in result.output
        assert "name: read" in result.output

    def test_bare(self) -> None:
        result = CliRunner().invoke(main, ["tools", "parse-id", "read"])
        assert result.exit_code == 0
        assert "namespace: (none)" in result.output

    def test_invalid(self) -> None:
        result = CliRunner().invoke(main, ["tools", "parse-id", "a:b:c"])
        assert result.exit_code == 1
        assert "Error" in result.output
