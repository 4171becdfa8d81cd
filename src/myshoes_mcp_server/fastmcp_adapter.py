"""Adapters for exposing myshoes MCP tools via FastMCP."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent

from myshoes_mcp_server.registry import ToolRegistry
from myshoes_mcp_server.tooling import ToolDefinition
from myshoes_mcp_server.tools import build_registry
from myshoes_mcp_server.tools.common import ToolContext


class ToolDefinitionAdapter(Tool):
    """Expose a registered :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition, registry: ToolRegistry) -> None:
        """Create a FastMCP tool wrapper dispatching through ``registry``."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.parameters_model.model_json_schema(),
            tags=set(),
        )
        self._registry = registry

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Run the registered tool; the registry validates the arguments."""
        result = await self._registry.run_tool(self.name, parameters=arguments)
        return ToolResult(content=[TextContent(type="text", text=result.text)])


def to_fastmcp_tools(registry: ToolRegistry) -> list[Tool]:
    """Convert every registered tool into a FastMCP-compatible tool."""
    return [
        ToolDefinitionAdapter(registry.get(name), registry)
        for name in registry.available_tools()
    ]


def build_fastmcp_app(context: ToolContext) -> tuple[FastMCP, ToolRegistry]:
    """Create a FastMCP server instance with all myshoes tools registered."""
    app = FastMCP(
        name="myshoes-mcp-server",
        instructions="Manage myshoes targets over the Model Context Protocol.",
    )
    registry = build_registry(context)
    for tool in to_fastmcp_tools(registry):
        app.add_tool(tool)
    return app, registry
