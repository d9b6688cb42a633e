"""
Error handling utilities for the viewr Lambda handlers.

This module defines the service error hierarchy and the decorator that turns
client-side lookup errors into plain-text HTTP responses. Store failures
propagate out of the handler.
"""

import functools
from enum import Enum
from typing import Any, Callable, Dict

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from viewr.handlers.utils.observability import logger, metrics
from viewr.handlers.utils.responses import plain_text_response

NOT_FOUND_MESSAGE = 'Not found'


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    LOOKUP = "LOOKUP"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory = ErrorCategory.LOOKUP,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_code": self.error_code,
            "error_message": self.message,
            "category": self.category.value,
        }


class MissingIdentifierError(BaseServiceError):
    """Raised when a lookup is requested without an identifier."""

    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message=message, error_code="MISSING_IDENTIFIER")


class EntryNotFoundError(BaseServiceError):
    """Raised when a namespace has no value for the requested key."""

    def __init__(self, namespace: str, key: str, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message=message, error_code="ENTRY_NOT_FOUND")
        self.namespace = namespace
        self.key = key


class UpstreamStoreError(BaseServiceError):
    """Raised when the key-value store rejects or fails a call."""

    def __init__(
        self,
        message: str,
        operation: str,
        table_name: str,
        error_code: str = "UPSTREAM_STORE_ERROR",
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.EXTERNAL_SERVICE,
        )
        self.operation = operation
        self.table_name = table_name


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""

    status_mapping = {
        "MISSING_IDENTIFIER": 404,
        "ENTRY_NOT_FOUND": 404,
    }

    return status_mapping.get(error.error_code, 502)


def handle_lookup_errors(func: Callable[..., Response]) -> Callable[..., Response]:
    """Decorator converting lookup errors into plain-text 4xx responses.

    Upstream store errors and anything unexpected are re-raised unchanged.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BaseServiceError as e:
            status_code = get_http_status_code(e)
            if status_code >= 500:
                raise

            logger.info("Lookup answered with client error", extra={
                **e.to_dict(),
                "status_code": status_code,
                "function_name": func.__name__,
            })
            metrics.add_metric(name="EntryNotFound", unit=MetricUnit.Count, value=1)

            return plain_text_response(status_code, e.message)

    return wrapper
