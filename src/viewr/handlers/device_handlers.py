"""
Handlers for the device namespaces.

Covers DEVICE_STATUS, DEVICE_DETAILS and DEVICE_ID_CONNECTION_MAPPING. Every
handler takes the namespace it reads as its first argument.
"""

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from viewr.dal import KeyValueNamespace
from viewr.handlers.utils.errors import EntryNotFoundError, MissingIdentifierError, handle_lookup_errors
from viewr.handlers.utils.observability import logger, metrics, tracer
from viewr.handlers.utils.responses import json_response, plain_text_response, value_response
from viewr.logic.overview import collect_device_connections, group_devices_by_state
from viewr.models.namespaces import Namespace

DEVICE_DETAILS_NOT_FOUND_MESSAGE = 'Device with that id was not found'


def _lookup(store: KeyValueNamespace, namespace: Namespace, device_id: str) -> Response:
    if not device_id:
        raise MissingIdentifierError()

    tracer.put_annotation("device_id", device_id)
    value = store.get(device_id)
    if not value:
        raise EntryNotFoundError(store.name, device_id)

    metrics.add_metric(name="EntryFound", unit=MetricUnit.Count, value=1)
    return value_response(namespace, value)


@tracer.capture_method
@handle_lookup_errors
def get_device_status(store: KeyValueNamespace, device_id: str) -> Response:
    """
    Look up the status last reported by a device.

    Args:
        store: DEVICE_STATUS namespace
        device_id: Device identifier

    Returns:
        200 with the stored status, 404 when the id is empty or unknown
    """
    return _lookup(store, Namespace.DEVICE_STATUS, device_id)


@tracer.capture_method
@handle_lookup_errors
def get_device_connection(store: KeyValueNamespace, device_id: str) -> Response:
    """
    Look up the connection a device last reported over.

    Args:
        store: DEVICE_ID_CONNECTION_MAPPING namespace
        device_id: Device identifier

    Returns:
        200 with the connection as a JSON string, 404 when the id is empty or unknown
    """
    return _lookup(store, Namespace.DEVICE_ID_CONNECTION_MAPPING, device_id)


@tracer.capture_method
@handle_lookup_errors
def get_device_details(store: KeyValueNamespace, device_id: str, require_entry: bool = False) -> Response:
    """
    Look up the details recorded for a device.

    A missing entry answers 200 with an empty body unless ``require_entry`` is set,
    in which case it answers 404 like the other lookups.

    Args:
        store: DEVICE_DETAILS namespace
        device_id: Device identifier
        require_entry: Answer 404 when the store has no details for the device

    Returns:
        Response carrying the stored details
    """
    if not device_id:
        raise MissingIdentifierError(DEVICE_DETAILS_NOT_FOUND_MESSAGE)

    tracer.put_annotation("device_id", device_id)
    details = store.get(device_id)
    if require_entry and not details:
        raise EntryNotFoundError(store.name, device_id)

    return value_response(Namespace.DEVICE_DETAILS, details)


@tracer.capture_method
def list_device_statuses(store: KeyValueNamespace) -> Response:
    """List every device id with a recorded status as a JSON array."""
    devices = store.list_keys()
    metrics.add_metric(name="KeysListed", unit=MetricUnit.Count, value=len(devices))
    return json_response(devices)


@tracer.capture_method
def list_device_connections(store: KeyValueNamespace) -> Response:
    """
    List every device together with the connection stored for it.

    Returns:
        200 with a JSON array of ``{"device_id", "connection"}`` objects in list order
    """
    mappings = collect_device_connections(store)
    metrics.add_metric(name="KeysListed", unit=MetricUnit.Count, value=len(mappings))
    return json_response([mapping.model_dump() for mapping in mappings])


@tracer.capture_method
def device_overview(store: KeyValueNamespace) -> Response:
    """Group device ids by state."""
    return json_response(group_devices_by_state(store))


@tracer.capture_method
def dump_devices(store: KeyValueNamespace) -> Response:
    """Log the device status keys and echo them back as plain text."""
    devices = store.list_keys()
    logger.info("Devices", extra={"devices": devices})
    return plain_text_response(200, ','.join(devices))
