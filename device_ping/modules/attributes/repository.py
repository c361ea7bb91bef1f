"""Repository protocol for attribute persistence operations."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from device_ping.db.models import AttributeKv as AttributeKvModel


class AttributeRepository(Protocol):
    async def find(
        self,
        tenant_id: str,
        entity_id: str,
        scope: str,
        keys: Sequence[str],
    ) -> list[AttributeKvModel]:
        ...

    async def save(
        self,
        entity_id: str,
        scope: str,
        rows: Mapping[str, Mapping[str, Any]],
    ) -> None:
        ...
