"""Domain service for device lookup and access checks."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from device_ping.db.models import generate_uuid
from device_ping.infrastructure.database.repositories.device_repository import SqlDeviceRepository

from .exceptions import DeviceAccessDeniedError, DeviceNotFoundError
from .models import Device
from .repository import DeviceRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeviceService:
    repository: DeviceRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "DeviceService":
        return cls(SqlDeviceRepository(session))

    async def create_device(
        self,
        *,
        tenant_id: str,
        name: str,
        device_id: Optional[str] = None,
        customer_id: Optional[str] = None,
        device_type: Optional[str] = None,
        label: Optional[str] = None,
    ) -> Device:
        model = await self.repository.create_device(
            device_id=device_id or generate_uuid(),
            tenant_id=tenant_id,
            name=name,
            customer_id=customer_id,
            device_type=device_type,
            label=label,
        )
        return Device.from_orm(model)

    async def get_device(self, device_id: uuid.UUID) -> Device | None:
        model = await self.repository.get_by_id(str(device_id))
        return Device.from_orm(model) if model else None

    async def check_device_access(
        self,
        device_id: uuid.UUID,
        *,
        tenant_id: str,
        customer_id: Optional[str] = None,
    ) -> Device:
        """Load a device readable by the given tenant (and customer, when set).

        Devices of other tenants are reported as missing so their existence is
        not disclosed.
        """
        device = await self.get_device(device_id)
        if device is None or device.tenant_id != tenant_id:
            raise DeviceNotFoundError(f"Device with id [{device_id}] is not found")
        if customer_id is not None and device.customer_id != customer_id:
            logger.info("Customer %s denied read access to device %s", customer_id, device_id)
            raise DeviceAccessDeniedError("You don't have permission to perform this operation!")
        return device
