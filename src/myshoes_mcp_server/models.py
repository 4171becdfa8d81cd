"""Data model for myshoes targets and the request bodies sent to the API."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ResourceType(str, Enum):
    """Instance-size tiers accepted by myshoes."""

    NANO = "nano"
    MICRO = "micro"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"
    XLARGE2 = "2xlarge"
    XLARGE3 = "3xlarge"
    XLARGE4 = "4xlarge"

    @classmethod
    def values(cls) -> list[str]:
        """Return the accepted literals in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: str) -> ResourceType:
        """Decode a literal strictly, naming the offending value on failure.

        Raises:
            ValueError: If ``value`` is not one of the known tiers.
        """
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(cls.values())
            raise ValueError(
                f"invalid resource_type '{value}' (must be one of: {allowed})"
            ) from None


class Target(BaseModel):
    """A myshoes target as returned by the management API.

    ``resource_type`` is kept as the server sent it; only values this server
    sends to the API are checked against :class:`ResourceType`.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    scope: str
    resource_type: str
    provider_url: str = ""
    status: str = ""
    status_description: str = ""
    token_expired_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class _RequestBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def to_body(self) -> dict[str, Any]:
        """Serialize only the fields that were supplied."""
        return self.model_dump(mode="json", exclude_none=True)


class TargetCreateParams(_RequestBody):
    """Body of ``POST /target``."""

    scope: str
    resource_type: ResourceType
    provider_url: str | None = None
    runner_user: str | None = None


class TargetUpdateParams(_RequestBody):
    """Body of ``POST /target/{id}``; absent fields leave remote state alone."""

    resource_type: ResourceType | None = None
    provider_url: str | None = None
