"""HTTP client for the myshoes target management API.

Tools depend on the :class:`TargetClient` protocol only. :class:`MyshoesClient`
is the production implementation backed by ``httpx``; tests substitute an
in-memory fake or an ``httpx.MockTransport``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from myshoes_mcp_server import __version__
from myshoes_mcp_server.models import Target, TargetCreateParams, TargetUpdateParams

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"myshoes-mcp-server/{__version__}"
DEFAULT_TIMEOUT = 30.0

_TARGET_LIST = TypeAdapter(list[Target])


@dataclass(eq=False)
class MyshoesAPIError(RuntimeError):
    """Base class for failures talking to the myshoes API."""

    message: str
    status_code: int | None = None
    detail: Any | None = None

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"


class NotFoundError(MyshoesAPIError):
    """The referenced target does not exist."""


class RejectedError(MyshoesAPIError):
    """The API refused the request, usually because of invalid input."""


class ServerError(MyshoesAPIError):
    """The API failed while handling an otherwise valid request."""


class TransportError(MyshoesAPIError):
    """The API could not be reached."""


class InvalidResponseError(MyshoesAPIError):
    """The API answered with a body that does not decode as expected."""


class TargetClient(Protocol):
    """Operations the tools need from the myshoes API."""

    async def list_targets(self) -> list[Target]: ...

    async def get_target(self, target_id: str) -> Target: ...

    async def create_target(self, params: TargetCreateParams) -> Target: ...

    async def update_target(
        self, target_id: str, params: TargetUpdateParams
    ) -> Target: ...

    async def delete_target(self, target_id: str) -> None: ...


def _error_from_response(response: httpx.Response) -> MyshoesAPIError:
    payload: Any = None
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and payload.get("error"):
        message = str(payload["error"])
    else:
        message = response.text.strip() or response.reason_phrase

    status = response.status_code
    if status == 404:
        return NotFoundError(message, status, payload)
    if status >= 500:
        return ServerError(message, status, payload)
    return RejectedError(message, status, payload)


def _target_path(target_id: str) -> str:
    return f"/target/{quote(target_id, safe='')}"


class MyshoesClient:
    """Async client for the ``/target`` endpoints of a myshoes server.

    The instance holds only immutable configuration, and every request opens
    its own ``httpx.AsyncClient``, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        host: str,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Configure the client for the API rooted at ``host``.

        Args:
            host: Base URL of the myshoes server.
            user_agent: Value of the ``User-Agent`` header on every request.
            timeout: Per-request timeout in seconds.
            transport: Optional ``httpx`` transport, mainly for tests.

        Raises:
            ValueError: If ``host`` is empty.
        """
        if not host:
            raise ValueError("host is required")
        self._host = host.rstrip("/")
        self._headers = {"User-Agent": user_agent, "Accept": "application/json"}
        self._timeout = timeout
        self._transport = transport

    @property
    def host(self) -> str:
        """Base URL requests are sent to."""
        return self._host

    async def _request(
        self, method: str, path: str, json_body: dict[str, Any] | None = None
    ) -> httpx.Response:
        url = f"{self._host}{path}"
        try:
            async with httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, json=json_body)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url}: {exc}") from exc

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if response.status_code >= 400:
            raise _error_from_response(response)
        return response

    @staticmethod
    def _decode_target(response: httpx.Response) -> Target:
        try:
            return Target.model_validate(response.json())
        except ValueError as exc:
            raise InvalidResponseError(
                f"unexpected target payload: {exc}", response.status_code
            ) from exc

    async def list_targets(self) -> list[Target]:
        """Return every target registered on the server."""
        response = await self._request("GET", "/target")
        try:
            return _TARGET_LIST.validate_python(response.json())
        except ValueError as exc:
            raise InvalidResponseError(
                f"unexpected target list payload: {exc}", response.status_code
            ) from exc

    async def get_target(self, target_id: str) -> Target:
        """Fetch a single target by identifier."""
        response = await self._request("GET", _target_path(target_id))
        return self._decode_target(response)

    async def create_target(self, params: TargetCreateParams) -> Target:
        """Create a target; omitted optional fields take server defaults."""
        response = await self._request("POST", "/target", params.to_body())
        return self._decode_target(response)

    async def update_target(
        self, target_id: str, params: TargetUpdateParams
    ) -> Target:
        """Apply a partial update; only supplied fields are sent."""
        response = await self._request(
            "POST", _target_path(target_id), params.to_body()
        )
        return self._decode_target(response)

    async def delete_target(self, target_id: str) -> None:
        """Delete a target."""
        await self._request("DELETE", _target_path(target_id))
