"""Domain modules and their public exports."""

from . import attributes, devices, ping

__all__ = [
    "attributes",
    "devices",
    "ping",
]
