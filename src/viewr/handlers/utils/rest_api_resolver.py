"""
REST API resolver utility for the viewr Lambda handlers.

This module provides the configured API Gateway REST resolver, the path constants
of every route and the OpenAPI documentation settings.
"""

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.event_handler.openapi.models import Tag

from viewr.handlers.models.env_vars import get_handler_env_vars

# API path constants
CONNECTION_PATH = '/api/connection'
DEVICE_PATH = '/api/device'
DEVICE_CONNECTION_PATH = f'{DEVICE_PATH}/connection'
DEVICE_DETAILS_PATH = f'{DEVICE_PATH}/details'
DEVICE_STATUS_PATH = f'{DEVICE_PATH}/status'
DEVICES_DUMP_PATH = '/devices'

# OpenAPI tags for documentation
CONNECTIONS_TAG = Tag(name='Connections', description='Devices seen per connection')
DEVICES_TAG = Tag(name='Devices', description='Device status, details and connection')
DIAGNOSTICS_TAG = Tag(name='Diagnostics', description='Diagnostic dumps')

cors_config = CORSConfig(
    allow_origin=get_handler_env_vars().CORS_ALLOW_ORIGIN,
    max_age=600,
)

# Static routes are matched before routes with path parameters
app = APIGatewayRestResolver(
    cors=cors_config,
    enable_validation=True,
    debug=False,
)

app.enable_swagger(
    path='/swagger',
    title='Viewr Device Monitor API',
    version='1.0.0',
    description='Read-only access to device status, details and connections',
    tags=[CONNECTIONS_TAG, DEVICES_TAG, DIAGNOSTICS_TAG],
)
