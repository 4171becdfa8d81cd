"""Model Context Protocol server for the myshoes target API."""

__version__ = "0.1.0"

from myshoes_mcp_server.errors import MCPError  # noqa: E402
from myshoes_mcp_server.registry import ToolRegistry  # noqa: E402
from myshoes_mcp_server.tooling import ToolDefinition, ToolParameters  # noqa: E402

__all__ = [
    "MCPError",
    "ToolDefinition",
    "ToolParameters",
    "ToolRegistry",
    "__version__",
]
