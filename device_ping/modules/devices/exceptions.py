"""Device domain specific exceptions."""


class DeviceError(Exception):
    """Base class for device related domain errors."""


class DeviceNotFoundError(DeviceError):
    """Raised when the requested device could not be found for the caller's tenant."""


class DeviceAccessDeniedError(DeviceError):
    """Raised when the caller may not read the requested device."""
