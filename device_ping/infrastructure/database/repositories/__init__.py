"""SQLAlchemy repository implementations."""

from .attribute_repository import SqlAttributeRepository
from .device_repository import SqlDeviceRepository

__all__ = ["SqlAttributeRepository", "SqlDeviceRepository"]
