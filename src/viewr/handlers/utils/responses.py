"""
Response construction helpers for the viewr handlers.

Bodies are always serialized here so that a handler's response is final whether
it is returned through the REST resolver or inspected directly.
"""

import json
from typing import Any, Optional

from aws_lambda_powertools.event_handler import Response, content_types

from viewr.models.namespaces import Namespace, ResponseEncoding


def plain_text_response(status_code: int, body: Optional[str]) -> Response:
    """Build a plain-text response, an absent body becomes an empty one."""
    return Response(
        status_code=status_code,
        content_type=content_types.TEXT_PLAIN,
        body=body or '',
    )


def json_response(payload: Any, status_code: int = 200) -> Response:
    """Build a compact JSON response."""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(payload, separators=(',', ':')),
    )


def value_response(namespace: Namespace, value: Optional[str]) -> Response:
    """Relay a stored value using the encoding its namespace prescribes."""
    if namespace.encoding is ResponseEncoding.JSON:
        return json_response(value)
    return plain_text_response(200, value)
