"""Domain service answering device ping requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from device_ping.modules.attributes import AttributesService
from device_ping.modules.devices import Device

from .assembler import assemble_ping_result
from .evaluator import ReachabilityEvaluator
from .fetcher import ActivityAttributeFetcher
from .models import PingResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DevicePingService:
    fetcher: ActivityAttributeFetcher
    evaluator: ReachabilityEvaluator

    @classmethod
    def with_session(cls, session: AsyncSession, evaluator: ReachabilityEvaluator) -> "DevicePingService":
        return cls(ActivityAttributeFetcher(AttributesService.with_session(session)), evaluator)

    async def ping_device(self, tenant_id: str, device: Device) -> PingResult:
        logger.debug("Checking reachability for device: %s (%s)", device.name, device.id)
        snapshot = await self.fetcher.fetch_snapshot(tenant_id, device.id)
        reachability = self.evaluator.evaluate(snapshot.last_activity_time, snapshot.active)
        return assemble_ping_result(device, reachability)
