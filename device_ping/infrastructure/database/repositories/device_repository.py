"""SQLAlchemy powered repository for device persistence."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from device_ping.db.models import Device as DeviceModel


class SqlDeviceRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, device_id: str) -> DeviceModel | None:
        stmt = select(DeviceModel).where(DeviceModel.id == device_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

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
        model = DeviceModel(
            id=device_id,
            tenant_id=tenant_id,
            customer_id=customer_id,
            name=name,
            type=device_type or "default",
            label=label,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return model
