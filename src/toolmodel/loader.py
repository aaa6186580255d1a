"""Load tool definitions and JSON documents from JSON or YAML files.

Files ending in ``.json`` are parsed as JSON; everything else as YAML
(a superset of JSON).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from toolmodel.errors import ToolLoadError
from toolmodel.tool import Tool


def load_document(path: str | Path) -> Any:
    """Read and parse a JSON or YAML document.

    Raises:
        ToolLoadError: On read or parse errors.
    """
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ToolLoadError(str(p), str(exc)) from exc

    if p.suffix == ".json":
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ToolLoadError(str(p), f"JSON parse error: {exc}") from exc

    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ToolLoadError(str(p), f"YAML parse error: {exc}") from exc


def load_tool(path: str | Path) -> Tool:
    """Load a :class:`Tool` (MCP fields plus extensions) from *path*.

    Raises:
        ToolLoadError: If the file is unreadable, unparsable, not a mapping,
            or fails model validation.
    """
    data = load_document(path)
    if not isinstance(data, dict):
        raise ToolLoadError(str(path), "tool definition must be a mapping")

    try:
        return Tool.model_validate(data)
    except ValidationError as exc:
        raise ToolLoadError(str(path), str(exc)) from exc
