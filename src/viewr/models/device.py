"""
Device domain models.

These models describe the values the collector stores in the key-value
namespaces and the shapes the API assembles from them.
"""

import json
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, Field

CONNECTION_DEVICE_SEPARATOR = '::'


class DeviceState(str, Enum):
    """States a monitored device can be reported in."""

    REPORTING = 'Reporting'
    OFFLINE = 'Offline'
    STOPPED = 'Stopped'
    NEW = 'New'


def decode_status(value: Optional[str]) -> str:
    """
    Decode a stored status payload into its state name.

    Status values are written JSON-serialized (``"Reporting"``); anything that is
    not a JSON string is returned as stored.
    """
    if not value:
        return ''
    try:
        decoded = json.loads(value)
    except ValueError:
        return value
    return decoded if isinstance(decoded, str) else value


class ConnectionDeviceKey(BaseModel):
    """Key of a CONNECTION_DEVICE_STATUS entry: ``<connection>::<device id>``."""

    connection: Annotated[str, Field(
        description='Connection the device reported over',
        examples=['ssid=home']
    )]

    device_id: Annotated[str, Field(
        description='Device identifier',
        examples=['dev-1']
    )]

    @classmethod
    def parse(cls, key: str) -> Optional['ConnectionDeviceKey']:
        """Split a key on its first separator, None when it has none."""
        connection, separator, device_id = key.partition(CONNECTION_DEVICE_SEPARATOR)
        if not separator:
            return None
        return cls(connection=connection, device_id=device_id)

    def __str__(self) -> str:
        return f'{self.connection}{CONNECTION_DEVICE_SEPARATOR}{self.device_id}'


class DeviceConnectionMapping(BaseModel):
    """One entry of the device to connection listing."""

    device_id: Annotated[str, Field(
        description='Device identifier',
        examples=['dev-1']
    )]

    connection: Annotated[Optional[str], Field(
        default=None,
        description='Connection descriptor stored for the device',
        examples=['ssid=home']
    )] = None


class ConnectionDeviceStatus(BaseModel):
    """A device reporting over a connection, with its decoded status."""

    device_id: Annotated[str, Field(description='Device identifier')]

    status: Annotated[str, Field(
        description='Decoded device state',
        examples=[DeviceState.REPORTING.value]
    )]
