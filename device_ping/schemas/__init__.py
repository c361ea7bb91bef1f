"""Pydantic schemas used across the project."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

LAST_SEEN_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class TokenData(BaseModel):
    user_id: str
    tenant_id: str
    authority: str
    customer_id: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class DevicePingResponse(BaseModel):
    """Device reachability status and activity information."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    device_id: str = Field(
        ...,
        description="Device ID (UUID format)",
        examples=["784f394c-42b6-435a-983c-b7beff2784f9"],
    )
    reachable: bool = Field(
        ...,
        description=(
            "Whether the device is reachable: it has been active within the configured "
            "timeout period (default: 60 seconds) or is explicitly flagged active"
        ),
    )
    last_seen: Optional[datetime] = Field(
        default=None,
        description="Last time the device was seen. Null if the device has never been active.",
        examples=["2024-12-06T10:30:00Z"],
    )
    device_name: str = Field(..., description="Human-readable device name", examples=["Temperature Sensor 01"])
    inactivity_seconds: Optional[int] = Field(
        default=None,
        description="Time since last activity in seconds. Null if the device has never been active.",
        examples=[120],
    )

    @field_serializer("last_seen")
    def _format_last_seen(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        return value.astimezone(timezone.utc).strftime(LAST_SEEN_FORMAT)
