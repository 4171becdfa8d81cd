"""In-memory tool registry and dispatcher.

The registry keeps tool lookup and execution free of transport details, so the
same definitions can be driven directly in tests or exposed through FastMCP.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from myshoes_mcp_server.tooling import ToolDefinition


@dataclass
class ToolResult:
    """Result returned by tool execution.

    Attributes:
        name: Name of the tool that produced the result.
        text: Text payload returned by the tool.

    """

    name: str
    text: str


class ToolRegistry:
    """Registry mapping tool names to their definitions."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List the names of registered tools.

        Returns:
            Sorted list of tool names.

        """
        return sorted(self._tools)

    def get(self, name: str) -> ToolDefinition:
        """Look up a registered tool.

        Raises:
            KeyError: If the tool name is not registered.

        """
        if name not in self._tools:
            raise KeyError(f"Tool '{name}' is not registered")
        return self._tools[name]

    async def run_tool(
        self, name: str, *, parameters: dict[str, Any] | None = None
    ) -> ToolResult:
        """Execute a registered tool.

        Args:
            name: Name of the registered tool to execute.
            parameters: Optional parameters for the tool.

        Raises:
            KeyError: If the tool name is not registered.
            MCPError: If validation, the API call or encoding fails.

        Returns:
            ToolResult containing the tool name and text payload.

        """
        tool = self.get(name)
        params = tool.validate(parameters or {})
        text = await tool.handler(params)
        return ToolResult(name=name, text=text)

    def to_catalog(self) -> dict[str, dict[str, Any]]:
        """Produce a catalog for discovery.

        Returns:
            Mapping of tool names to their metadata.

        """
        return {name: tool.metadata() for name, tool in self._tools.items()}
