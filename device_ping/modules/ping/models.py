"""Reachability domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional

from device_ping.modules.attributes import AttributeKvEntry

LAST_ACTIVITY_TIME = "lastActivityTime"
ACTIVE = "active"
ACTIVITY_KEYS = (LAST_ACTIVITY_TIME, ACTIVE)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# latest instant a datetime can hold, 9999-12-31T23:59:59.999Z
MAX_EPOCH_MILLIS = (datetime.max.replace(tzinfo=timezone.utc) - _EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(value: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=value)


def _check_last_seen_pair(last_seen: Optional[datetime], inactivity_seconds: Optional[int]) -> None:
    if (last_seen is None) != (inactivity_seconds is None):
        raise ValueError("last_seen and inactivity_seconds must be both set or both empty")


@dataclass(frozen=True, slots=True)
class ActivitySnapshot:
    """Stored activity signals of a device; either one may be missing."""

    last_activity_time: Optional[int] = None
    active: Optional[bool] = None

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, AttributeKvEntry]) -> "ActivitySnapshot":
        last_activity = attributes.get(LAST_ACTIVITY_TIME)
        active = attributes.get(ACTIVE)
        return cls(
            last_activity_time=last_activity.long_value if last_activity else None,
            active=active.boolean_value if active else None,
        )


@dataclass(frozen=True, slots=True)
class Reachability:
    reachable: bool
    last_seen: Optional[datetime] = None
    inactivity_seconds: Optional[int] = None

    def __post_init__(self) -> None:
        _check_last_seen_pair(self.last_seen, self.inactivity_seconds)


@dataclass(frozen=True, slots=True)
class PingResult:
    device_id: str
    device_name: str
    reachable: bool
    last_seen: Optional[datetime] = None
    inactivity_seconds: Optional[int] = None

    def __post_init__(self) -> None:
        _check_last_seen_pair(self.last_seen, self.inactivity_seconds)
