"""Shared helpers for MCP tools."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import TypeAdapter

from myshoes_mcp_server.client import (
    InvalidResponseError,
    MyshoesAPIError,
    NotFoundError,
    RejectedError,
    ServerError,
    TargetClient,
    TransportError,
)
from myshoes_mcp_server.errors import (
    ENCODING_ERROR,
    INVALID_RESPONSE,
    NOT_FOUND,
    REJECTED,
    SERVER_ERROR,
    TRANSPORT_ERROR,
    VALIDATION_ERROR,
    MCPError,
)
from myshoes_mcp_server.models import ResourceType, Target

T = TypeVar("T")

_TARGET_LIST = TypeAdapter(list[Target])

_ERROR_TYPES: tuple[tuple[type[MyshoesAPIError], str], ...] = (
    (NotFoundError, NOT_FOUND),
    (RejectedError, REJECTED),
    (ServerError, SERVER_ERROR),
    (TransportError, TRANSPORT_ERROR),
    (InvalidResponseError, INVALID_RESPONSE),
)


def _default_logger() -> logging.Logger:
    return logging.getLogger("myshoes_mcp_server.tools")


@dataclass(frozen=True)
class ToolContext:
    """Read-only state shared by every tool handler.

    Attributes:
        client: API client used for all remote calls.
        log_commands: Log each request and response at INFO when enabled.
        logger: Destination for failure warnings and command logs.
    """

    client: TargetClient
    log_commands: bool = False
    logger: logging.Logger = field(default_factory=_default_logger)

    def log_request(self, tool: str, params: Mapping[str, Any]) -> None:
        """Record the arguments of a call when command logging is on."""
        if self.log_commands:
            self.logger.info(
                "tool %s request: %s", tool, json.dumps(dict(params), default=str)
            )

    def log_response(self, tool: str, text: str) -> None:
        """Record the payload of a call when command logging is on."""
        if self.log_commands:
            self.logger.info("tool %s response: %s", tool, text)


def present(value: str | None) -> str | None:
    """Treat an empty string the same as an omitted optional argument."""
    if value is None or value == "":
        return None
    return value


def parse_resource_type(context: ToolContext, value: str) -> ResourceType:
    """Decode ``value`` strictly or raise a validation error naming it."""
    try:
        return ResourceType.parse(value)
    except ValueError as exc:
        context.logger.warning("rejected arguments: %s", exc)
        raise MCPError(
            VALIDATION_ERROR,
            str(exc),
            {"field": "resource_type", "value": value},
        ) from exc


def classify_api_error(error: MyshoesAPIError) -> str:
    """Map a client failure onto an MCP error type."""
    for error_cls, error_type in _ERROR_TYPES:
        if isinstance(error, error_cls):
            return error_type
    return SERVER_ERROR


async def call_api(context: ToolContext, action: str, call: Awaitable[T]) -> T:
    """Await a client call, converting failures into :class:`MCPError`."""
    try:
        return await call
    except MyshoesAPIError as exc:
        context.logger.warning("failed to %s: %s", action, exc)
        raise MCPError(
            classify_api_error(exc), f"failed to {action}: {exc}", exc.detail
        ) from exc


def encode_result(
    context: ToolContext, action: str, value: Target | list[Target]
) -> str:
    """Serialize a target or list of targets to JSON text."""
    try:
        if isinstance(value, list):
            return _TARGET_LIST.dump_json(value, exclude_none=True).decode()
        return value.model_dump_json(exclude_none=True)
    except (TypeError, ValueError, AttributeError) as exc:
        context.logger.warning("failed to marshal %s: %s", action, exc)
        raise MCPError(ENCODING_ERROR, f"failed to marshal {action}: {exc}") from exc
