"""toolmodel: canonical MCP tool model with schema validation.

This package defines what a "tool" is (fields, IDs, backends, tags) and
validates tool inputs and outputs against their JSON Schemas.  It performs
no network access: external ``$ref`` resolution is always refused.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from toolmodel.backend import BackendKind as BackendKind
    from toolmodel.backend import LocalBackend as LocalBackend
    from toolmodel.backend import MCPBackend as MCPBackend
    from toolmodel.backend import ProviderBackend as ProviderBackend
    from toolmodel.backend import ToolBackend as ToolBackend
    from toolmodel.schema.models import JSONSchema as JSONSchema
    from toolmodel.schema.models import ValidatorConfig as ValidatorConfig
    from toolmodel.schema.validator import DefaultValidator as DefaultValidator
    from toolmodel.schema.validator import SchemaValidator as SchemaValidator
    from toolmodel.tags import normalize_tags as normalize_tags
    from toolmodel.tool import MCP_VERSION as MCP_VERSION
    from toolmodel.tool import Tool as Tool
    from toolmodel.tool import ToolAnnotations as ToolAnnotations
    from toolmodel.tool import ToolIcon as ToolIcon
    from toolmodel.tool import from_json as from_json
    from toolmodel.tool import from_mcp_json as from_mcp_json
    from toolmodel.tool import parse_tool_id as parse_tool_id

_EXPORTS = {
    "BackendKind": "toolmodel.backend",
    "LocalBackend": "toolmodel.backend",
    "MCPBackend": "toolmodel.backend",
    "ProviderBackend": "toolmodel.backend",
    "ToolBackend": "toolmodel.backend",
    "JSONSchema": "toolmodel.schema.models",
    "ValidatorConfig": "toolmodel.schema.models",
    "DefaultValidator": "toolmodel.schema.validator",
    "SchemaValidator": "toolmodel.schema.validator",
    "normalize_tags": "toolmodel.tags",
    "MCP_VERSION": "toolmodel.tool",
    "Tool": "toolmodel.tool",
    "ToolAnnotations": "toolmodel.tool",
    "ToolIcon": "toolmodel.tool",
    "from_json": "toolmodel.tool",
    "from_mcp_json": "toolmodel.tool",
    "parse_tool_id": "toolmodel.tool",
}


def __getattr__(name: str) -> object:
    module_path = _EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'toolmodel' has no attribute {name!r}")
