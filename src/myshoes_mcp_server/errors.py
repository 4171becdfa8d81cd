"""Custom error types for MCP tooling."""

from __future__ import annotations

from typing import TypedDict

from pydantic import ValidationError

VALIDATION_ERROR = "ValidationError"
NOT_FOUND = "NotFound"
REJECTED = "Rejected"
SERVER_ERROR = "ServerError"
TRANSPORT_ERROR = "TransportError"
INVALID_RESPONSE = "InvalidResponse"
ENCODING_ERROR = "EncodingError"


class MCPErrorPayload(TypedDict):
    """Structured JSON payload for MCP errors."""

    error: dict[str, object | None]


class MCPError(Exception):
    """Structured MCP error containing a JSON-friendly payload."""

    def __init__(
        self, error_type: str, message: str, details: object | None = None
    ) -> None:
        """Create a structured MCP error payload."""
        super().__init__(message)
        self.error_type = error_type
        self.error: MCPErrorPayload = {
            "error": {
                "type": error_type,
                "message": message,
                "details": details,
            }
        }

    def to_dict(self) -> MCPErrorPayload:
        """Return the structured error payload."""
        return self.error


def from_validation_error(error: ValidationError, context: str) -> MCPError:
    """Summarize a pydantic validation failure as a ``ValidationError``."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}"
        for item in error.errors()
    )
    return MCPError(
        VALIDATION_ERROR,
        f"{context}: {problems}",
        error.errors(include_url=False, include_context=False),
    )

