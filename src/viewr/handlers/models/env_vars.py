"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by the
viewr Lambda handlers: the DynamoDB table bound to each key-value namespace and
the switches that control legacy response behaviour.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class ViewrEnvVars(BaseModel):
    """Environment variables for the viewr handlers."""

    # One DynamoDB table per key-value namespace
    CONNECTION_DEVICE_STATUS_TABLE: Annotated[str, Field(
        description='Table holding "<connection>::<device id>" -> status entries',
        min_length=1
    )] = 'connection-device-status'

    DEVICE_ID_CONNECTION_MAPPING_TABLE: Annotated[str, Field(
        description='Table holding device id -> connection descriptor entries',
        min_length=1
    )] = 'device-id-connection-mapping'

    DEVICE_DETAILS_TABLE: Annotated[str, Field(
        description='Table holding device id -> details entries',
        min_length=1
    )] = 'device-details'

    DEVICE_STATUS_TABLE: Annotated[str, Field(
        description='Table holding device id -> status entries',
        min_length=1
    )] = 'device-status'

    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        description='DynamoDB endpoint override, used for local testing'
    )] = None

    AWS_REGION: Annotated[Optional[str], Field(
        description='Region of the DynamoDB tables, set by the Lambda runtime'
    )] = None

    # Details lookups answer 200 with an empty body on a miss unless this is enabled
    DEVICE_DETAILS_REQUIRE_ENTRY: Annotated[bool, Field(
        description='Answer 404 when a device details entry is missing'
    )] = False

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        description='CORS allowed origin for API responses'
    )] = '*'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'viewr'

    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    def table_name_for(self, namespace: str) -> str:
        """Return the table bound to a namespace name such as ``DEVICE_STATUS``."""
        return getattr(self, f'{namespace}_TABLE')


def get_handler_env_vars() -> ViewrEnvVars:
    """
    Get typed environment variables for the viewr handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ViewrEnvVars)
