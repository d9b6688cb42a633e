"""
DynamoDB implementation of a key-value namespace.

Each namespace is a table keyed by the string attribute ``key`` whose payload
lives in the string attribute ``value``. Only reads are implemented: entries are
written by the collector.
"""

import functools
import time
from typing import Dict, List, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from viewr.dal import BaseKeyValueNamespace
from viewr.handlers.utils.errors import UpstreamStoreError
from viewr.handlers.utils.observability import logger, metrics, tracer

KEY_ATTRIBUTE = 'key'
VALUE_ATTRIBUTE = 'value'


class DynamoDBNamespace(BaseKeyValueNamespace):
    """Read access to one namespace stored in a DynamoDB table."""

    def __init__(
        self,
        name: str,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        """
        Initialize the namespace.

        Args:
            name: Namespace name, used for logging
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        super().__init__(name)
        self.table_name = table_name

        resource_config = {}
        if region_name:
            resource_config['region_name'] = region_name
        if endpoint_url:
            resource_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **resource_config)
        self.table = self.dynamodb.Table(table_name)

        logger.debug("DynamoDB namespace initialized", extra={
            "namespace": name,
            "table_name": table_name,
            "endpoint_url": endpoint_url,
        })

    def _handle_dynamodb_errors(self, operation: str):
        """Decorator translating DynamoDB failures into UpstreamStoreError."""

        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                operation_start = time.time()

                try:
                    result = func(*args, **kwargs)

                    operation_duration = (time.time() - operation_start) * 1000
                    metrics.add_metric(name=f"KeyValue{operation}Duration", unit=MetricUnit.Milliseconds, value=operation_duration)
                    tracer.put_annotation("kv_operation", operation)
                    tracer.put_annotation("table_name", self.table_name)

                    return result

                except ClientError as e:
                    error_code = e.response['Error']['Code']
                    error_message = e.response['Error']['Message']

                    metrics.add_metric(name=f"KeyValue{operation}Error", unit=MetricUnit.Count, value=1)
                    logger.error(f"DynamoDB {operation} error", extra={
                        "error_code": error_code,
                        "error_message": error_message,
                        "namespace": self.name,
                        "table_name": self.table_name,
                    })

                    raise UpstreamStoreError(
                        message=f"DynamoDB error: {error_message}",
                        operation=operation,
                        table_name=self.table_name,
                        error_code=f"DYNAMODB_{error_code}",
                    ) from e

                except BotoCoreError as e:
                    metrics.add_metric(name=f"KeyValue{operation}Error", unit=MetricUnit.Count, value=1)
                    logger.error(f"DynamoDB connection error during {operation}", extra={
                        "error": str(e),
                        "namespace": self.name,
                        "table_name": self.table_name,
                    })

                    raise UpstreamStoreError(
                        message=f"Database connection error: {str(e)}",
                        operation=operation,
                        table_name=self.table_name,
                        error_code="DATABASE_CONNECTION_ERROR",
                    ) from e

            return wrapper
        return decorator

    @tracer.capture_method
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: Entry key

        Returns:
            Stored value, or None if the namespace has no such entry

        Raises:
            UpstreamStoreError: If the DynamoDB call fails
        """

        @self._handle_dynamodb_errors("Get")
        def _get():
            response = self.table.get_item(Key={KEY_ATTRIBUTE: key})
            item = response.get('Item')
            if not item:
                logger.debug("Entry not found", extra={"namespace": self.name, "key": key})
                return None
            return item.get(VALUE_ATTRIBUTE)

        return _get()

    @tracer.capture_method
    def list_keys(self) -> List[str]:
        """
        List every key of the namespace.

        Scan pages are concatenated in the order DynamoDB returns them.

        Returns:
            Keys of all entries

        Raises:
            UpstreamStoreError: If the DynamoDB call fails
        """

        @self._handle_dynamodb_errors("List")
        def _list_keys():
            scan_kwargs: Dict = {
                'ProjectionExpression': '#k',
                'ExpressionAttributeNames': {'#k': KEY_ATTRIBUTE},
            }
            keys: List[str] = []

            while True:
                response = self.table.scan(**scan_kwargs)
                keys.extend(item[KEY_ATTRIBUTE] for item in response.get('Items', []))

                last_evaluated_key = response.get('LastEvaluatedKey')
                if not last_evaluated_key:
                    break
                scan_kwargs['ExclusiveStartKey'] = last_evaluated_key

            logger.debug("Keys listed", extra={
                "namespace": self.name,
                "table_name": self.table_name,
                "key_count": len(keys),
            })
            return keys

        return _list_keys()
