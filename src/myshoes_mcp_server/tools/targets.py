"""Tools for listing, reading and changing myshoes targets."""

from __future__ import annotations

from pydantic import Field

from myshoes_mcp_server.models import (
    ResourceType,
    TargetCreateParams,
    TargetUpdateParams,
)
from myshoes_mcp_server.tooling import ToolDefinition, ToolParameters
from myshoes_mcp_server.tools.common import (
    ToolContext,
    call_api,
    encode_result,
    parse_resource_type,
    present,
)

_RESOURCE_TYPES = ", ".join(ResourceType.values())


class ListTargetParams(ToolParameters):
    """Parameters for the list_target tool."""


class TargetIdParams(ToolParameters):
    """Parameters for tools addressing a single target."""

    target_id: str = Field(description="Identifier (UUID) of the target.")


class CreateTargetParams(ToolParameters):
    """Parameters for the create_target tool."""

    scope: str = Field(
        min_length=1,
        description="Repository (owner/repo) or organization the target serves.",
    )
    resource_type: str = Field(
        description=f"Runner size. One of: {_RESOURCE_TYPES}.",
    )
    provider_url: str | None = Field(
        default=None, description="Shoes provider URL; omit to use the default."
    )
    runner_user: str | None = Field(
        default=None, description="User that runs the runner process."
    )


class UpdateTargetParams(ToolParameters):
    """Parameters for the update_target tool."""

    target_id: str = Field(description="Identifier (UUID) of the target.")
    resource_type: str | None = Field(
        default=None,
        description=f"New runner size. One of: {_RESOURCE_TYPES}.",
    )
    provider_url: str | None = Field(
        default=None, description="New shoes provider URL."
    )


def list_target_tool(context: ToolContext) -> ToolDefinition:
    """Create the list_target tool definition."""

    async def handler(params: ListTargetParams) -> str:
        context.log_request("list_target", params.model_dump())
        targets = await call_api(
            context, "list targets", context.client.list_targets()
        )
        text = encode_result(context, "targets", targets)
        context.log_response("list_target", text)
        return text

    return ToolDefinition(
        name="list_target",
        description="List target from myshoes API",
        parameters_model=ListTargetParams,
        handler=handler,
    )


def get_target_tool(context: ToolContext) -> ToolDefinition:
    """Create the get_target tool definition."""

    async def handler(params: TargetIdParams) -> str:
        context.log_request("get_target", params.model_dump())
        target = await call_api(
            context, "get target", context.client.get_target(params.target_id)
        )
        text = encode_result(context, "target", target)
        context.log_response("get_target", text)
        return text

    return ToolDefinition(
        name="get_target",
        description="Get a target by ID from myshoes API",
        parameters_model=TargetIdParams,
        handler=handler,
    )


def create_target_tool(context: ToolContext) -> ToolDefinition:
    """Create the create_target tool definition.

    Empty ``provider_url`` and ``runner_user`` values are left out of the
    request body so the server applies its own defaults.
    """

    async def handler(params: CreateTargetParams) -> str:
        context.log_request("create_target", params.model_dump())
        request = TargetCreateParams(
            scope=params.scope,
            resource_type=parse_resource_type(context, params.resource_type),
            provider_url=present(params.provider_url),
            runner_user=present(params.runner_user),
        )
        target = await call_api(
            context, "create target", context.client.create_target(request)
        )
        text = encode_result(context, "target", target)
        context.log_response("create_target", text)
        return text

    return ToolDefinition(
        name="create_target",
        description="Create a new target in myshoes API",
        parameters_model=CreateTargetParams,
        handler=handler,
    )


def update_target_tool(context: ToolContext) -> ToolDefinition:
    """Create the update_target tool definition.

    Only the fields supplied with a non-empty value are sent, so the update
    never overwrites remote state the caller did not mention.
    """

    async def handler(params: UpdateTargetParams) -> str:
        context.log_request("update_target", params.model_dump())
        resource_type = present(params.resource_type)
        request = TargetUpdateParams(
            resource_type=(
                parse_resource_type(context, resource_type)
                if resource_type is not None
                else None
            ),
            provider_url=present(params.provider_url),
        )
        target = await call_api(
            context,
            "update target",
            context.client.update_target(params.target_id, request),
        )
        text = encode_result(context, "target", target)
        context.log_response("update_target", text)
        return text

    return ToolDefinition(
        name="update_target",
        description="Update an existing target in myshoes API",
        parameters_model=UpdateTargetParams,
        handler=handler,
    )


def delete_target_tool(context: ToolContext) -> ToolDefinition:
    """Create the delete_target tool definition."""

    async def handler(params: TargetIdParams) -> str:
        context.log_request("delete_target", params.model_dump())
        await call_api(
            context, "delete target", context.client.delete_target(params.target_id)
        )
        text = f"Successfully deleted target {params.target_id}"
        context.log_response("delete_target", text)
        return text

    return ToolDefinition(
        name="delete_target",
        description="Delete a target from myshoes API",
        parameters_model=TargetIdParams,
        handler=handler,
    )
