"""Shared test fixtures."""

from __future__ import annotations

import asyncio
import json
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone

import httpx
import pytest

from myshoes_mcp_server.client import MyshoesClient, NotFoundError
from myshoes_mcp_server.models import Target, TargetCreateParams, TargetUpdateParams
from myshoes_mcp_server.tools.common import ToolContext

TARGET_ID = "1b4e28ba-2fa1-11d2-883f-0016d3cca427"
API_HOST = "http://myshoes.test"
TIMESTAMP = "2025-01-01T00:00:00Z"


def target_payload(
    target_id: str = TARGET_ID, **overrides: object
) -> dict[str, object]:
    """Build a target as the myshoes API serializes it."""
    payload: dict[str, object] = {
        "id": target_id,
        "scope": "octocat/hello-world",
        "resource_type": "nano",
        "provider_url": "http://provider.example.com",
        "status": "active",
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }
    payload.update(overrides)
    return payload


class FakeTargetClient:
    """In-memory stand-in for the myshoes API client that records calls."""

    def __init__(self, targets: Iterable[Target] = (), delay: float = 0.0) -> None:
        self.targets = {target.id: target for target in targets}
        self.calls: list[tuple[str, object]] = []
        self.delay = delay

    def _lookup(self, target_id: str) -> Target:
        if target_id not in self.targets:
            raise NotFoundError("target not found", 404, {"error": "target not found"})
        return self.targets[target_id]

    async def list_targets(self) -> list[Target]:
        self.calls.append(("list_targets", None))
        return list(self.targets.values())

    async def get_target(self, target_id: str) -> Target:
        self.calls.append(("get_target", target_id))
        await asyncio.sleep(self.delay)
        return self._lookup(target_id)

    async def create_target(self, params: TargetCreateParams) -> Target:
        self.calls.append(("create_target", params))
        now = datetime.now(timezone.utc)
        target = Target(
            id=str(uuid.uuid4()),
            scope=params.scope,
            resource_type=params.resource_type.value,
            provider_url=params.provider_url or "",
            status="active",
            created_at=now,
            updated_at=now,
        )
        self.targets[target.id] = target
        return target

    async def update_target(
        self, target_id: str, params: TargetUpdateParams
    ) -> Target:
        self.calls.append(("update_target", (target_id, params)))
        await asyncio.sleep(self.delay)
        changes: dict[str, object] = params.model_dump(mode="json", exclude_none=True)
        changes["updated_at"] = datetime.now(timezone.utc)
        updated = self._lookup(target_id).model_copy(update=changes)
        self.targets[target_id] = updated
        return updated

    async def delete_target(self, target_id: str) -> None:
        self.calls.append(("delete_target", target_id))
        await asyncio.sleep(self.delay)
        self._lookup(target_id)
        del self.targets[target_id]


class FakeMyshoesAPI:
    """``httpx.MockTransport`` handler emulating the myshoes ``/target`` API."""

    def __init__(self) -> None:
        self.targets: dict[str, dict[str, object]] = {TARGET_ID: target_payload()}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/target":
            return self._collection(request)
        if path.startswith("/target/"):
            return self._member(request, path[len("/target/") :])
        return httpx.Response(404, json={"error": "not found"})

    def _collection(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=list(self.targets.values()))
        if request.method != "POST":
            return httpx.Response(405, json={"error": "method not allowed"})
        body = json.loads(request.content)
        scope = body.get("scope", "")
        if not scope:
            return httpx.Response(400, json={"error": "scope must be set"})
        created = target_payload(
            str(uuid.uuid4()),
            scope=scope,
            resource_type=body.get("resource_type") or "nano",
            provider_url=body.get("provider_url") or "",
        )
        self.targets[str(created["id"])] = created
        return httpx.Response(201, json=created)

    def _member(self, request: httpx.Request, target_id: str) -> httpx.Response:
        if target_id not in self.targets:
            return httpx.Response(404, json={"error": "target not found"})
        if request.method == "GET":
            return httpx.Response(200, json=self.targets[target_id])
        if request.method == "POST":
            body = json.loads(request.content)
            updated = dict(self.targets[target_id])
            for key in ("resource_type", "provider_url"):
                if body.get(key):
                    updated[key] = body[key]
            self.targets[target_id] = updated
            return httpx.Response(200, json=updated)
        if request.method == "DELETE":
            del self.targets[target_id]
            return httpx.Response(204)
        return httpx.Response(405, json={"error": "method not allowed"})


@pytest.fixture()
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture()
def sample_target() -> Target:
    """Provide the target every fake starts with."""
    return Target.model_validate(target_payload())


@pytest.fixture()
def fake_client(sample_target: Target) -> FakeTargetClient:
    """Provide an in-memory client seeded with the sample target."""
    return FakeTargetClient([sample_target])


@pytest.fixture()
def tool_context(fake_client: FakeTargetClient) -> ToolContext:
    """Provide a tool context bound to the in-memory client."""
    return ToolContext(client=fake_client)


@pytest.fixture()
def fake_api() -> FakeMyshoesAPI:
    """Provide the emulated myshoes HTTP API."""
    return FakeMyshoesAPI()


@pytest.fixture()
def api_client(fake_api: FakeMyshoesAPI) -> MyshoesClient:
    """Provide a real HTTP client wired to the emulated API."""
    return MyshoesClient(API_HOST, transport=httpx.MockTransport(fake_api))
