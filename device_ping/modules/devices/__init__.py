"""Device registry: identity, ownership and access checks."""

from .exceptions import DeviceAccessDeniedError, DeviceError, DeviceNotFoundError
from .models import Device
from .service import DeviceService

__all__ = [
    "Device",
    "DeviceService",
    "DeviceError",
    "DeviceNotFoundError",
    "DeviceAccessDeniedError",
]
