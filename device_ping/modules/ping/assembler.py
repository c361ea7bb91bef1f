"""Shapes evaluator output into the per-request ping result."""

from __future__ import annotations

from device_ping.modules.devices import Device

from .models import PingResult, Reachability


def assemble_ping_result(device: Device, reachability: Reachability) -> PingResult:
    return PingResult(
        device_id=str(device.id),
        device_name=device.name,
        reachable=reachability.reachable,
        last_seen=reachability.last_seen,
        inactivity_seconds=reachability.inactivity_seconds,
    )
