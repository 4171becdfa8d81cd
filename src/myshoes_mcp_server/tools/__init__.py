"""Tool registration helpers for the myshoes MCP server."""

from __future__ import annotations

from myshoes_mcp_server.registry import ToolRegistry
from myshoes_mcp_server.tooling import ToolDefinition
from myshoes_mcp_server.tools.common import ToolContext
from myshoes_mcp_server.tools.targets import (
    create_target_tool,
    delete_target_tool,
    get_target_tool,
    list_target_tool,
    update_target_tool,
)


def build_tools(context: ToolContext) -> list[ToolDefinition]:
    """Instantiate all tool definitions bound to the provided context."""
    return [
        list_target_tool(context),
        get_target_tool(context),
        create_target_tool(context),
        update_target_tool(context),
        delete_target_tool(context),
    ]


def build_registry(context: ToolContext) -> ToolRegistry:
    """Register every tool bound to ``context`` in a fresh registry."""
    registry = ToolRegistry()
    registry.register_tools(*build_tools(context))
    return registry
