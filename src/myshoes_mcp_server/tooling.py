"""Tool definitions shared by the registry and the FastMCP adapter."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Callable, Dict

from pydantic import BaseModel, ConfigDict, ValidationError

from myshoes_mcp_server.errors import from_validation_error

logger = logging.getLogger(__name__)


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools."""

    model_config = ConfigDict(extra="forbid")


ToolHandler = Callable[[Any], Awaitable[str]]


@dataclass
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Coroutine function that receives the validated parameters
            model and returns the text payload.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: ToolHandler

    def validate(self, parameters: Dict[str, Any]) -> ToolParameters:
        """Validate and coerce incoming tool parameters.

        This is the only place tool arguments are checked; handlers trust the
        model they receive.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            MCPError: If parameter validation fails.

        Returns:
            Validated parameters model.
        """

        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            mcp_error = from_validation_error(
                error, f"Invalid parameters for tool '{self.name}'"
            )
            logger.warning("%s", mcp_error)
            raise mcp_error from error
        return model

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "schema": self.parameters_model.model_json_schema(),
        }
