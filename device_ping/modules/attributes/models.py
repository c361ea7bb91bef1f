"""Attribute domain models."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from device_ping.db import models as orm


class AttributeScope(str, Enum):
    CLIENT_SCOPE = "CLIENT_SCOPE"
    SERVER_SCOPE = "SERVER_SCOPE"
    SHARED_SCOPE = "SHARED_SCOPE"


class DataType(str, Enum):
    BOOLEAN = "BOOLEAN"
    LONG = "LONG"
    DOUBLE = "DOUBLE"
    STRING = "STRING"
    JSON = "JSON"


_VALUE_COLUMNS = {
    DataType.BOOLEAN: "bool_v",
    DataType.LONG: "long_v",
    DataType.DOUBLE: "dbl_v",
    DataType.STRING: "str_v",
    DataType.JSON: "json_v",
}


@dataclass(frozen=True, slots=True)
class AttributeKvEntry:
    """A single typed attribute value together with its last update time."""

    key: str
    data_type: DataType
    value: Any
    last_update_ts: int

    @property
    def long_value(self) -> Optional[int]:
        if self.data_type is DataType.LONG and _is_integer(self.value):
            return self.value
        return None

    @property
    def boolean_value(self) -> Optional[bool]:
        if self.data_type is DataType.BOOLEAN and isinstance(self.value, bool):
            return self.value
        return None

    @classmethod
    def of(cls, key: str, value: Any, last_update_ts: int) -> "AttributeKvEntry":
        """Build an entry, inferring the data type from the Python value."""
        if isinstance(value, bool):
            data_type = DataType.BOOLEAN
        elif isinstance(value, int):
            data_type = DataType.LONG
        elif isinstance(value, float):
            data_type = DataType.DOUBLE
        elif isinstance(value, str):
            data_type = DataType.STRING
        else:
            data_type = DataType.JSON
        return cls(key=key, data_type=data_type, value=value, last_update_ts=last_update_ts)

    def to_columns(self) -> dict[str, Any]:
        """Column values for persisting this entry in the attribute table."""
        columns: dict[str, Any] = {
            "data_type": self.data_type.value,
            "bool_v": None,
            "long_v": None,
            "dbl_v": None,
            "str_v": None,
            "json_v": None,
            "last_update_ts": self.last_update_ts,
        }
        column = _VALUE_COLUMNS[self.data_type]
        columns[column] = json.dumps(self.value) if self.data_type is DataType.JSON else self.value
        return columns

    @classmethod
    def from_orm(cls, instance: orm.AttributeKv) -> "AttributeKvEntry":
        data_type = DataType(instance.data_type)
        if data_type is DataType.BOOLEAN:
            value: Any = instance.bool_v
        elif data_type is DataType.LONG:
            value = instance.long_v
        elif data_type is DataType.DOUBLE:
            value = instance.dbl_v
        elif data_type is DataType.STRING:
            value = instance.str_v
        else:
            value = json.loads(instance.json_v) if instance.json_v is not None else None
        return cls(
            key=instance.attribute_key,
            data_type=data_type,
            value=value,
            last_update_ts=int(instance.last_update_ts),
        )


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
