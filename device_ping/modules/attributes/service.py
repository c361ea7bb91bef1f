"""Domain service reading and writing device attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from device_ping.infrastructure.database.repositories.attribute_repository import SqlAttributeRepository

from .exceptions import AttributeStoreError
from .models import AttributeKvEntry, AttributeScope
from .repository import AttributeRepository


@dataclass(slots=True)
class AttributesService:
    repository: AttributeRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AttributesService":
        return cls(SqlAttributeRepository(session))

    async def find(
        self,
        tenant_id: str,
        entity_id: str,
        scope: AttributeScope,
        keys: Sequence[str],
    ) -> list[AttributeKvEntry]:
        """Return the stored entries for ``keys``; missing keys are simply omitted."""
        try:
            models = await self.repository.find(tenant_id, entity_id, scope.value, list(keys))
        except SQLAlchemyError as exc:
            raise AttributeStoreError(f"attribute lookup failed for {entity_id}: {exc}") from exc
        return [AttributeKvEntry.from_orm(model) for model in models]

    async def save(
        self,
        entity_id: str,
        scope: AttributeScope,
        entries: Iterable[AttributeKvEntry],
    ) -> None:
        rows = {entry.key: entry.to_columns() for entry in entries}
        try:
            await self.repository.save(entity_id, scope.value, rows)
        except SQLAlchemyError as exc:
            raise AttributeStoreError(f"attribute save failed for {entity_id}: {exc}") from exc
