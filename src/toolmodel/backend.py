"""Backend bindings: where a tool actually executes.

A tool can carry several backends, though usually only one is active.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from toolmodel.errors import InvalidBackendError


class BackendKind(str, Enum):
    """Kind of backend serving a tool."""

    MCP = "mcp"
    PROVIDER = "provider"
    LOCAL = "local"


class MCPBackend(BaseModel):
    """A tool served by an MCP server."""

    model_config = {"populate_by_name": True}

    server_name: str = Field(default="", alias="serverName")


class ProviderBackend(BaseModel):
    """A tool served by an external or manually registered provider."""

    model_config = {"populate_by_name": True}

    provider_id: str = Field(alias="providerId")
    tool_id: str = Field(alias="toolId")


class LocalBackend(BaseModel):
    """A tool implemented by a local function or handler."""

    name: str


class ToolBackend(BaseModel):
    """Execution binding for a tool; only the block matching ``kind`` is used."""

    kind: BackendKind
    mcp: MCPBackend | None = None
    provider: ProviderBackend | None = None
    local: LocalBackend | None = None

    def check(self) -> None:
        """Raise :class:`InvalidBackendError` if the active block is incomplete."""
        if self.kind is BackendKind.MCP:
            if self.mcp is None or not self.mcp.server_name:
                raise InvalidBackendError("MCP backend requires serverName")
        elif self.kind is BackendKind.PROVIDER:
            if self.provider is None:
                raise InvalidBackendError("provider backend requires provider details")
            if not self.provider.provider_id:
                raise InvalidBackendError("provider backend requires providerId")
            if not self.provider.tool_id:
                raise InvalidBackendError("provider backend requires toolId")
        elif self.kind is BackendKind.LOCAL:
            if self.local is None or not self.local.name:
                raise InvalidBackendError("local backend requires name")
