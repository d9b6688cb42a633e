"""
Aggregations over the key-value namespaces.

Each aggregation lists a namespace and then reads every entry in list order,
one read at a time.
"""

from typing import Dict, List

from viewr.dal import KeyValueNamespace
from viewr.handlers.utils.observability import logger, tracer
from viewr.models.device import (
    ConnectionDeviceKey,
    ConnectionDeviceStatus,
    DeviceConnectionMapping,
    DeviceState,
    decode_status,
)


@tracer.capture_method
def collect_device_connections(store: KeyValueNamespace) -> List[DeviceConnectionMapping]:
    """
    Pair every device id with the connection stored for it.

    Args:
        store: DEVICE_ID_CONNECTION_MAPPING namespace

    Returns:
        One mapping per listed key, in list order
    """
    mappings: List[DeviceConnectionMapping] = []
    for device_id in store.list_keys():
        connection = store.get(device_id)
        mappings.append(DeviceConnectionMapping(device_id=device_id, connection=connection))

    tracer.put_metadata("device_connection_count", len(mappings))
    return mappings


@tracer.capture_method
def group_connection_devices(store: KeyValueNamespace) -> Dict[str, List[ConnectionDeviceStatus]]:
    """
    Group the devices reporting over each connection.

    Args:
        store: CONNECTION_DEVICE_STATUS namespace

    Returns:
        Connection name to the devices seen on it with their decoded status,
        connections in order of first appearance
    """
    groups: Dict[str, List[ConnectionDeviceStatus]] = {}
    for key in store.list_keys():
        connection_device = ConnectionDeviceKey.parse(key)
        if connection_device is None:
            logger.warning("Skipping malformed connection device key", extra={"key": key})
            continue

        status = decode_status(store.get(key))
        groups.setdefault(connection_device.connection, []).append(
            ConnectionDeviceStatus(device_id=connection_device.device_id, status=status)
        )

    return groups


@tracer.capture_method
def group_devices_by_state(store: KeyValueNamespace) -> Dict[str, List[str]]:
    """
    Group device ids by their current state.

    Known states are always present, in DeviceState order, even when empty.
    Unrecognised state values follow them in order of first appearance.

    Args:
        store: DEVICE_STATUS namespace

    Returns:
        State name to device ids in that state
    """
    groups: Dict[str, List[str]] = {state.value: [] for state in DeviceState}
    for device_id in store.list_keys():
        status = decode_status(store.get(device_id))
        groups.setdefault(status, []).append(device_id)

    return groups
