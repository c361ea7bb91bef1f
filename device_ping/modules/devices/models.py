"""Device domain models."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from device_ping.db import models as orm


@dataclass(frozen=True, slots=True)
class Device:
    id: uuid.UUID
    tenant_id: str
    customer_id: Optional[str]
    name: str
    type: Optional[str]
    label: Optional[str]
    created_at: Optional[datetime]

    @classmethod
    def from_orm(cls, instance: orm.Device) -> "Device":
        return cls(
            id=uuid.UUID(str(instance.id)),
            tenant_id=instance.tenant_id,
            customer_id=instance.customer_id,
            name=instance.name,
            type=instance.type,
            label=instance.label,
            created_at=instance.created_at,
        )
