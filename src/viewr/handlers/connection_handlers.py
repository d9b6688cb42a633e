"""
Handlers for the CONNECTION_DEVICE_STATUS namespace.

Entries are keyed ``<connection>::<device id>`` and hold the JSON-serialized
state the device last reported over that connection.
"""

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from viewr.dal import KeyValueNamespace
from viewr.handlers.utils.errors import EntryNotFoundError, MissingIdentifierError, handle_lookup_errors
from viewr.handlers.utils.observability import logger, metrics, tracer
from viewr.handlers.utils.responses import json_response, value_response
from viewr.logic.overview import group_connection_devices
from viewr.models.namespaces import Namespace


@tracer.capture_method
@handle_lookup_errors
def get_connection_status(store: KeyValueNamespace, connection_device_id: str) -> Response:
    """
    Look up the status of one device on one connection.

    Args:
        store: CONNECTION_DEVICE_STATUS namespace
        connection_device_id: ``<connection>::<device id>`` key

    Returns:
        200 with the stored status, 404 when the id is empty or unknown
    """
    if not connection_device_id:
        raise MissingIdentifierError()

    tracer.put_annotation("connection_device_id", connection_device_id)
    state_change = store.get(connection_device_id)
    if not state_change:
        raise EntryNotFoundError(store.name, connection_device_id)

    metrics.add_metric(name="EntryFound", unit=MetricUnit.Count, value=1)
    return value_response(Namespace.CONNECTION_DEVICE_STATUS, state_change)


@tracer.capture_method
def list_connection_statuses(store: KeyValueNamespace) -> Response:
    """List every ``<connection>::<device id>`` key as a JSON array."""
    connection_devices = store.list_keys()

    logger.info("Connection device keys listed", extra={"key_count": len(connection_devices)})
    metrics.add_metric(name="KeysListed", unit=MetricUnit.Count, value=len(connection_devices))

    return json_response(connection_devices)


@tracer.capture_method
def connection_overview(store: KeyValueNamespace) -> Response:
    """Group the devices of every connection together with their status."""
    groups = group_connection_devices(store)
    return json_response({
        connection: [status.model_dump() for status in statuses]
        for connection, statuses in groups.items()
    })
