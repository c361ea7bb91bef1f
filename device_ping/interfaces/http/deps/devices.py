"""Device and ping service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from device_ping.core.container import get_container
from device_ping.modules.devices import DeviceService
from device_ping.modules.ping import DevicePingService, ReachabilityEvaluator

from .database import get_db_session


def get_device_service(db: AsyncSession = Depends(get_db_session)) -> DeviceService:
    return DeviceService.with_session(db)


def get_reachability_evaluator() -> ReachabilityEvaluator:
    return get_container().reachability_evaluator


def get_ping_service(
    db: AsyncSession = Depends(get_db_session),
    evaluator: ReachabilityEvaluator = Depends(get_reachability_evaluator),
) -> DevicePingService:
    return DevicePingService.with_session(db, evaluator)


__all__ = [
    "get_device_service",
    "get_ping_service",
    "get_reachability_evaluator",
]
