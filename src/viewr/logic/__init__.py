"""
Logic Layer Module.

Functions here combine several reads against a namespace into one answer.
They sit between the handlers, which only build responses, and the data access
layer, which only reads.
"""

from viewr.logic.overview import (
    collect_device_connections,
    group_connection_devices,
    group_devices_by_state,
)

__all__ = [
    "collect_device_connections",
    "group_connection_devices",
    "group_devices_by_state",
]
