"""
Viewr API Handler - Lambda function for the device monitor read API.

Every route resolves the namespace it reads for the current invocation and
passes it to the matching handler function. Path parameters arrive percent-encoded
and are decoded before they are used as keys.
"""

from typing import Any, Dict
from urllib.parse import unquote

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from viewr.dal import get_namespace
from viewr.handlers import connection_handlers, device_handlers
from viewr.handlers.models.env_vars import get_handler_env_vars
from viewr.handlers.utils.errors import NOT_FOUND_MESSAGE
from viewr.handlers.utils.observability import logger, metrics, tracer
from viewr.handlers.utils.responses import plain_text_response
from viewr.handlers.utils.rest_api_resolver import (
    CONNECTION_PATH,
    CONNECTIONS_TAG,
    DEVICE_CONNECTION_PATH,
    DEVICE_DETAILS_PATH,
    DEVICE_PATH,
    DEVICE_STATUS_PATH,
    DEVICES_DUMP_PATH,
    DEVICES_TAG,
    DIAGNOSTICS_TAG,
    app,
)
from viewr.models.namespaces import Namespace


@app.get(f'{CONNECTION_PATH}/list', tags=[CONNECTIONS_TAG.name])
@tracer.capture_method
def connection_status_list():
    return connection_handlers.list_connection_statuses(get_namespace(Namespace.CONNECTION_DEVICE_STATUS))


@app.get(f'{CONNECTION_PATH}/overview', tags=[CONNECTIONS_TAG.name])
@tracer.capture_method
def connection_overview():
    return connection_handlers.connection_overview(get_namespace(Namespace.CONNECTION_DEVICE_STATUS))


@app.get(f'{CONNECTION_PATH}/<connection_device_id>', tags=[CONNECTIONS_TAG.name])
@tracer.capture_method
def connection_status_by_id(connection_device_id: str):
    return connection_handlers.get_connection_status(
        get_namespace(Namespace.CONNECTION_DEVICE_STATUS),
        unquote(connection_device_id),
    )


@app.get(f'{DEVICE_CONNECTION_PATH}/list', tags=[DEVICES_TAG.name])
@tracer.capture_method
def device_connection_list():
    return device_handlers.list_device_connections(get_namespace(Namespace.DEVICE_ID_CONNECTION_MAPPING))


@app.get(f'{DEVICE_CONNECTION_PATH}/<device_id>', tags=[DEVICES_TAG.name])
@tracer.capture_method
def device_connection_by_id(device_id: str):
    return device_handlers.get_device_connection(get_namespace(Namespace.DEVICE_ID_CONNECTION_MAPPING), unquote(device_id))


@app.get(f'{DEVICE_DETAILS_PATH}/<device_id>', tags=[DEVICES_TAG.name])
@tracer.capture_method
def device_details_by_id(device_id: str):
    return device_handlers.get_device_details(
        get_namespace(Namespace.DEVICE_DETAILS),
        unquote(device_id),
        require_entry=get_handler_env_vars().DEVICE_DETAILS_REQUIRE_ENTRY,
    )


@app.get(f'{DEVICE_PATH}/list', tags=[DEVICES_TAG.name])
@tracer.capture_method
def device_status_list():
    return device_handlers.list_device_statuses(get_namespace(Namespace.DEVICE_STATUS))


@app.get(f'{DEVICE_PATH}/overview', tags=[DEVICES_TAG.name])
@tracer.capture_method
def device_overview():
    return device_handlers.device_overview(get_namespace(Namespace.DEVICE_STATUS))


@app.get(f'{DEVICE_STATUS_PATH}/<device_id>', tags=[DEVICES_TAG.name])
@tracer.capture_method
def device_status_by_id(device_id: str):
    return device_handlers.get_device_status(get_namespace(Namespace.DEVICE_STATUS), unquote(device_id))


@app.get(DEVICES_DUMP_PATH, tags=[DIAGNOSTICS_TAG.name])
@tracer.capture_method
def devices_debug_dump():
    return device_handlers.dump_devices(get_namespace(Namespace.DEVICE_STATUS))


@app.not_found
def route_not_found(exc: NotFoundError) -> Response:
    # A by-id path with its id left out matches no route
    if app.current_event.path.rstrip('/') == DEVICE_DETAILS_PATH:
        return plain_text_response(404, device_handlers.DEVICE_DETAILS_NOT_FOUND_MESSAGE)
    return plain_text_response(404, NOT_FOUND_MESSAGE)


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Store failures are not caught here and fail the invocation.

    Args:
        event: API Gateway event
        context: Lambda context

    Returns:
        API Gateway response
    """
    return app.resolve(event, context)
