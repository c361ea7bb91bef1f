"""Reads the activity attributes of a device from the attribute store."""

from __future__ import annotations

import logging
import uuid
from typing import Sequence

from device_ping.modules.attributes import AttributeKvEntry, AttributeScope, AttributesService

from .models import ACTIVITY_KEYS, ActivitySnapshot

logger = logging.getLogger(__name__)


class ActivityAttributeFetcher:
    """Batched, failure tolerant lookup of activity attributes.

    Each key is looked up on its own so that a failing lookup only drops that
    key from the result. Failures are logged and never raised; there are no
    retries.
    """

    def __init__(
        self,
        attributes: AttributesService,
        scope: AttributeScope = AttributeScope.SERVER_SCOPE,
    ) -> None:
        self._attributes = attributes
        self._scope = scope

    async def fetch(
        self,
        tenant_id: str,
        device_id: uuid.UUID,
        keys: Sequence[str] = ACTIVITY_KEYS,
    ) -> dict[str, AttributeKvEntry]:
        found: dict[str, AttributeKvEntry] = {}
        for key in keys:
            try:
                entries = await self._attributes.find(tenant_id, str(device_id), self._scope, [key])
            except Exception as exc:
                logger.warning("Failed to retrieve %s for device %s: %s", key, device_id, exc)
                continue
            entry = next((item for item in entries if item.key == key), None)
            if entry is not None:
                found[key] = entry
        return found

    async def fetch_snapshot(self, tenant_id: str, device_id: uuid.UUID) -> ActivitySnapshot:
        return ActivitySnapshot.from_attributes(await self.fetch(tenant_id, device_id))
