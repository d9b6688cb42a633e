"""
Viewr Models Package

This package contains the namespace definitions and the Pydantic domain models
describing what the collector stores and what the API returns.
"""

from .device import (
    ConnectionDeviceKey,
    ConnectionDeviceStatus,
    DeviceConnectionMapping,
    DeviceState,
    decode_status,
)
from .namespaces import Namespace, ResponseEncoding

__all__ = [
    "ConnectionDeviceKey",
    "ConnectionDeviceStatus",
    "DeviceConnectionMapping",
    "DeviceState",
    "decode_status",
    "Namespace",
    "ResponseEncoding",
]
