"""Tests for the Tool model, IDs, and JSON interchange."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest
from pydantic import ValidationError

from toolmodel.errors import InvalidToolError, InvalidToolIDError
from toolmodel.schema.models import JSONSchema
from toolmodel.tool import (
    MAX_TOOL_NAME_LEN,
    MCP_VERSION,
    Tool,
    ToolAnnotations,
    ToolIcon,
    from_json,
    from_mcp_json,
    parse_tool_id,
)

SIMPLE_SCHEMA = {"type": "object", "properties": {"input": {"type": "string"}}}


class TestToolID:
    def test_with_namespace(self) -> None:
        assert Tool(name="read", namespace="filesystem").tool_id() == "filesystem:read"

    def test_without_namespace(self) -> None:
        assert Tool(name="read").tool_id() == "read"

    @pytest.mark.parametrize(
        ("tool_id", "expected"),
        [
            ("filesystem:read", ("filesystem", "read")),
            ("read", ("", "read")),
            ("my-namespace:my-tool", ("my-namespace", "my-tool")),
        ],
    )
    def test_parse(self, tool_id: str, expected: tuple[str, str]) -> None:
        assert parse_tool_id(tool_id) == expected

    @pytest.mark.parametrize("tool_id", ["", "a:b:c", ":name", "namespace:", ":"])
    def test_parse_invalid(self, tool_id: str) -> None:
        with pytest.raises(InvalidToolIDError):
            parse_tool_id(tool_id)

    @pytest.mark.parametrize(("namespace", "name"), [("filesystem", "read"), ("", "read")])
    def test_round_trip(self, namespace: str, name: str) -> None:
        tool = Tool(name=name, namespace=namespace)
        assert parse_tool_id(tool.tool_id()) == (namespace, name)


class TestToolCheck:
    def test_valid(self) -> None:
        Tool(name="get_time.v2-beta", input_schema={"type": "object"}).check()

    def test_name_required(self) -> None:
        with pytest.raises(InvalidToolError, match="name is required"):
            Tool(input_schema={"type": "object"}).check()

    def test_name_too_long(self) -> None:
        tool = Tool(name="a" * (MAX_TOOL_NAME_LEN + 1), input_schema={"type": "object"})
        with pytest.raises(InvalidToolError, match="exceeds 128"):
            tool.check()

    def test_name_at_limit(self) -> None:
        Tool(name="a" * MAX_TOOL_NAME_LEN, input_schema={"type": "object"}).check()

    def test_invalid_characters_listed_once(self) -> None:
        tool = Tool(name="bad name!!", input_schema={"type": "object"})
        with pytest.raises(InvalidToolError) as exc_info:
            tool.check()
        assert str(exc_info.value).endswith("invalid characters:  , !")

    def test_non_ascii_rejected(self) -> None:
        with pytest.raises(InvalidToolError, match="invalid characters"):
            Tool(name="naïve", input_schema={"type": "object"}).check()

    def test_input_schema_required(self) -> None:
        with pytest.raises(InvalidToolError, match="inputSchema is required"):
            Tool(name="bare").check()


class TestToolModel:
    def test_mcp_version(self) -> None:
        assert MCP_VERSION == "2025-11-25"

    def test_extensions(self) -> None:
        tool = Tool(
            name="test-tool",
            description="A test tool",
            input_schema=SIMPLE_SCHEMA,
            namespace="test",
            version="1.0.0",
            tags=["alpha", "beta"],
        )
        assert tool.name == "test-tool"
        assert tool.namespace == "test"
        assert tool.version == "1.0.0"
        assert tool.tags == ["alpha", "beta"]

    def test_icon_aliases(self) -> None:
        icon = ToolIcon(src="https://example.com/icon.png", mime_type="image/png", theme="dark")
        data = icon.model_dump(by_alias=True, exclude_none=True)
        assert data == {"src": "https://example.com/icon.png", "mimeType": "image/png", "theme": "dark"}

    def test_icon_theme_restricted(self) -> None:
        with pytest.raises(ValidationError):
            ToolIcon.model_validate({"src": "x", "theme": "purple"})

    def test_annotations_aliases(self) -> None:
        ann = ToolAnnotations.model_validate({"readOnlyHint": True, "openWorldHint": False})
        assert ann.read_only_hint is True
        assert ann.open_world_hint is False
        assert ann.destructive_hint is None


class TestToolJSON:
    def _tool(self) -> Tool:
        return Tool(
            name="test-tool",
            description="A test tool",
            input_schema=SIMPLE_SCHEMA,
            namespace="test-ns",
            version="1.0.0",
            tags=["search", "discovery"],
        )

    def test_to_mcp_json_strips_extensions(self) -> None:
        data = json.loads(self._tool().to_mcp_json())
        assert "namespace" not in data
        assert "version" not in data
        assert "tags" not in data
        assert data["name"] == "test-tool"
        assert data["description"] == "A test tool"
        assert data["inputSchema"] == SIMPLE_SCHEMA

    def test_to_json_keeps_extensions(self) -> None:
        data = json.loads(self._tool().to_json())
        assert data["namespace"] == "test-ns"
        assert data["version"] == "1.0.0"
        assert data["tags"] == ["search", "discovery"]
        assert data["name"] == "test-tool"

    def test_schema_representations_serialize_as_objects(self) -> None:
        tool = Tool(
            name="t",
            input_schema=b'{"type": "object"}',
            output_schema=JSONSchema(type="string"),
        )
        data = json.loads(tool.to_mcp_json())
        assert data["inputSchema"] == {"type": "object"}
        assert data["outputSchema"] == {"type": "string"}

    def test_meta_and_annotations_use_wire_names(self) -> None:
        tool = Tool(
            name="t",
            input_schema={"type": "object"},
            annotations=ToolAnnotations(read_only_hint=True),
            meta={"trace": "abc"},
        )
        data = json.loads(tool.to_mcp_json())
        assert data["_meta"] == {"trace": "abc"}
        assert data["annotations"] == {"readOnlyHint": True}

    def test_from_mcp_json(self) -> None:
        tool = from_mcp_json(
            '{"name": "mcp-tool", "description": "A tool from MCP",'
            ' "inputSchema": {"type": "object"}, "namespace": "ignored"}'
        )
        assert tool.name == "mcp-tool"
        assert tool.description == "A tool from MCP"
        assert tool.input_schema == {"type": "object"}
        assert tool.namespace == ""
        assert tool.version == ""

    def test_from_json(self) -> None:
        tool = from_json(
            b'{"name": "full-tool", "inputSchema": {"type": "object"},'
            b' "namespace": "my-ns", "version": "2.0.0", "tags": ["t1", "t2"]}'
        )
        assert tool.tool_id() == "my-ns:full-tool"
        assert tool.version == "2.0.0"
        assert tool.tags == ["t1", "t2"]

    @pytest.mark.parametrize("parser", [from_json, from_mcp_json])
    def test_invalid_json(self, parser: Callable[[str], Tool]) -> None:
        with pytest.raises(ValidationError):
            parser("not valid json")

    def test_full_round_trip(self) -> None:
        original = self._tool()
        restored = from_json(original.to_json())
        assert restored == original

    def test_mcp_round_trip_drops_extensions(self) -> None:
        restored = from_mcp_json(self._tool().to_mcp_json())
        assert restored.name == "test-tool"
        assert restored.description == "A test tool"
        assert restored.namespace == ""
        assert restored.version == ""
        assert restored.tags == []
