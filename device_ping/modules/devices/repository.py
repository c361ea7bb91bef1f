"""Repository protocol for device persistence operations."""

from __future__ import annotations

from typing import Optional, Protocol

from device_ping.db.models import Device as DeviceModel


class DeviceRepository(Protocol):
    async def get_by_id(self, device_id: str) -> DeviceModel | None:
        ...

    async def create_device(
        self,
        *,
        device_id: str,
        tenant_id: str,
        name: str,
        customer_id: Optional[str],
        device_type: Optional[str],
        label: Optional[str],
    ) -> DeviceModel:
        ...
