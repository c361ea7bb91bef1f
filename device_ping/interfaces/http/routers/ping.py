"""Device reachability endpoint."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from device_ping.core.security import CUSTOMER_USER, TENANT_ADMIN, require_authority
from device_ping.interfaces.http.deps import get_device_service, get_ping_service
from device_ping.modules.devices import DeviceAccessDeniedError, DeviceNotFoundError, DeviceService
from device_ping.modules.ping import DevicePingService
from device_ping.schemas import DevicePingResponse, TokenData

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_device_id(raw: str) -> uuid.UUID:
    """Accept only the hyphenated 8-4-4-4-12 form, in any letter case."""
    try:
        parsed = uuid.UUID(raw)
    except ValueError:
        parsed = None
    if parsed is None or str(parsed) != raw.lower():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid UUID string: {raw}",
        )
    return parsed


@router.get(
    "/device/ping/{device_id}",
    response_model=DevicePingResponse,
    summary="Ping Device",
    description=(
        "Check if a device is reachable based on its last activity timestamp. A device is "
        "considered reachable if it has sent data within the configured timeout period "
        "(default: 60 seconds). Available for users with 'TENANT_ADMIN' or 'CUSTOMER_USER' authority."
    ),
)
async def ping_device(
    device_id: str,
    user: TokenData = Depends(require_authority(TENANT_ADMIN, CUSTOMER_USER)),
    device_service: DeviceService = Depends(get_device_service),
    ping_service: DevicePingService = Depends(get_ping_service),
) -> DevicePingResponse:
    parsed_id = _parse_device_id(device_id)
    customer_id = None
    if user.authority == CUSTOMER_USER:
        if not user.customer_id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You don't have permission to perform this operation!",
            )
        customer_id = user.customer_id
    try:
        device = await device_service.check_device_access(
            parsed_id,
            tenant_id=user.tenant_id,
            customer_id=customer_id,
        )
    except DeviceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except DeviceAccessDeniedError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc

    logger.debug("Pinging device: %s (%s)", device.name, parsed_id)
    result = await ping_service.ping_device(user.tenant_id, device)
    return DevicePingResponse(
        device_id=result.device_id,
        reachable=result.reachable,
        last_seen=result.last_seen,
        device_name=result.device_name,
        inactivity_seconds=result.inactivity_seconds,
    )
