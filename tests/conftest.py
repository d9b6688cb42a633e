"""
Pytest configuration and shared fixtures for the viewr API.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import os

# Handlers read their configuration when first imported
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "CONNECTION_DEVICE_STATUS_TABLE": "test-connection-device-status",
    "DEVICE_ID_CONNECTION_MAPPING_TABLE": "test-device-id-connection-mapping",
    "DEVICE_DETAILS_TABLE": "test-device-details",
    "DEVICE_STATUS_TABLE": "test-device-status",
    "POWERTOOLS_SERVICE_NAME": "test-viewr",
    "POWERTOOLS_METRICS_NAMESPACE": "TestViewr",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from viewr.models.namespaces import Namespace

TABLE_NAMES = {
    Namespace.CONNECTION_DEVICE_STATUS: "test-connection-device-status",
    Namespace.DEVICE_ID_CONNECTION_MAPPING: "test-device-id-connection-mapping",
    Namespace.DEVICE_DETAILS: "test-device-details",
    Namespace.DEVICE_STATUS: "test-device-status",
}


class InMemoryNamespace:
    """Dict backed namespace recording every call made against it."""

    def __init__(self, name: str, entries: Optional[Dict[str, str]] = None):
        self.name = name
        self.entries = dict(entries or {})
        self.get_calls: List[str] = []
        self.list_calls = 0

    def get(self, key: str) -> Optional[str]:
        self.get_calls.append(key)
        return self.entries.get(key)

    def list_keys(self) -> List[str]:
        self.list_calls += 1
        return list(self.entries)


@pytest.fixture
def make_namespace():
    """Factory for in-memory namespaces."""

    def _make(namespace: Namespace = Namespace.DEVICE_STATUS, entries: Optional[Dict[str, str]] = None):
        return InMemoryNamespace(namespace.value, entries)

    return _make


# DynamoDB fixtures
@pytest.fixture
def kv_tables():
    """Create one mock DynamoDB table per namespace."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        tables = {}
        for namespace, table_name in TABLE_NAMES.items():
            table = dynamodb.create_table(
                TableName=table_name,
                KeySchema=[{"AttributeName": "key", "KeyType": "HASH"}],
                AttributeDefinitions=[{"AttributeName": "key", "AttributeType": "S"}],
                BillingMode="PAY_PER_REQUEST",
            )
            table.wait_until_exists()
            tables[namespace] = table

        yield tables


@pytest.fixture
def put_entries(kv_tables):
    """Write entries into a namespace's mock table."""

    def _put(namespace: Namespace, entries: Dict[str, str]):
        with kv_tables[namespace].batch_writer() as batch:
            for key, value in entries.items():
                batch.put_item(Item={"key": key, "value": value})

    return _put


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-viewr-api"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-viewr-api"
    context.memory_limit_in_mb = 128
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-viewr-api"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def api_gateway_event():
    """Build an API Gateway REST GET event for a path."""

    def _event(path: str) -> Dict[str, Any]:
        return {
            "resource": path,
            "path": path,
            "httpMethod": "GET",
            "headers": {"Accept": "*/*", "User-Agent": "test-agent/1.0"},
            "multiValueHeaders": {"Accept": ["*/*"], "User-Agent": ["test-agent/1.0"]},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "resourcePath": path,
                "httpMethod": "GET",
                "path": path,
                "protocol": "HTTP/1.1",
                "identity": {"sourceIp": "127.0.0.1", "userAgent": "test-agent/1.0"},
            },
            "body": None,
            "isBase64Encoded": False,
        }

    return _event


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)


# End-to-end fixtures
@pytest.fixture
def integration_client():
    """HTTP client for the deployed API, skipped when no API_BASE_URL is set."""
    import httpx

    base_url = os.environ.get("API_BASE_URL")
    if not base_url:
        pytest.skip("API_BASE_URL is not set")

    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        yield client
