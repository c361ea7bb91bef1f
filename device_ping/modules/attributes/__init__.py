"""Typed key/value attributes stored per entity and scope."""

from .exceptions import AttributeStoreError
from .models import AttributeKvEntry, AttributeScope, DataType
from .service import AttributesService

__all__ = [
    "AttributeKvEntry",
    "AttributeScope",
    "AttributeStoreError",
    "AttributesService",
    "DataType",
]
