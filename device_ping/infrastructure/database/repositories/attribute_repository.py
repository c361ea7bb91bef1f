"""SQLAlchemy powered repository for the attribute key/value store."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from device_ping.db.models import AttributeKv as AttributeKvModel
from device_ping.db.models import Device as DeviceModel


class SqlAttributeRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find(
        self,
        tenant_id: str,
        entity_id: str,
        scope: str,
        keys: Sequence[str],
    ) -> list[AttributeKvModel]:
        if not keys:
            return []
        stmt = (
            select(AttributeKvModel)
            .join(DeviceModel, DeviceModel.id == AttributeKvModel.entity_id)
            .where(
                DeviceModel.tenant_id == tenant_id,
                AttributeKvModel.entity_id == entity_id,
                AttributeKvModel.attribute_scope == scope,
                AttributeKvModel.attribute_key.in_(keys),
            )
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def save(
        self,
        entity_id: str,
        scope: str,
        rows: Mapping[str, Mapping[str, Any]],
    ) -> None:
        for key, columns in rows.items():
            model = await self._session.get(AttributeKvModel, (entity_id, scope, key))
            if model is None:
                model = AttributeKvModel(entity_id=entity_id, attribute_scope=scope, attribute_key=key)
                self._session.add(model)
            for column, value in columns.items():
                setattr(model, column, value)
        await self._session.flush()
