"""
Key-value namespace definitions.

Each namespace is a flat, string-keyed collection owned by the collector. The
handlers only read them. A namespace also fixes how its values are written into
HTTP responses, so that every lookup against the same namespace answers with the
same encoding.
"""

from enum import Enum


class ResponseEncoding(str, Enum):
    """How a stored value is placed in a response body."""

    # Stored value relayed unchanged as text/plain
    RAW = 'raw'
    # Stored value JSON-encoded as application/json
    JSON = 'json'


class Namespace(str, Enum):
    """Key-value namespaces read by the API."""

    CONNECTION_DEVICE_STATUS = 'CONNECTION_DEVICE_STATUS'
    DEVICE_ID_CONNECTION_MAPPING = 'DEVICE_ID_CONNECTION_MAPPING'
    DEVICE_DETAILS = 'DEVICE_DETAILS'
    DEVICE_STATUS = 'DEVICE_STATUS'

    @property
    def encoding(self) -> ResponseEncoding:
        # The collector writes status and details values already JSON-serialized,
        # the connection mapping is the only namespace holding bare strings.
        if self is Namespace.DEVICE_ID_CONNECTION_MAPPING:
            return ResponseEncoding.JSON
        return ResponseEncoding.RAW
