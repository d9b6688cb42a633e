"""
Data Access Layer (DAL) for the key-value namespaces.

This module provides the read-only namespace interface the handlers depend on
and the factory that binds a namespace to its configured store.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from viewr.models.namespaces import Namespace


@runtime_checkable
class KeyValueNamespace(Protocol):
    """Protocol defining read access to one key-value namespace."""

    name: str

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None when absent."""
        ...

    def list_keys(self) -> List[str]:
        """Return every key of the namespace in store order."""
        ...


class BaseKeyValueNamespace(ABC):
    """Abstract base class for namespace implementations."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None when absent."""
        pass

    @abstractmethod
    def list_keys(self) -> List[str]:
        """Return every key of the namespace in store order."""
        pass


def get_namespace(namespace: Namespace) -> KeyValueNamespace:
    """
    Factory function binding a namespace to its DynamoDB table.

    Args:
        namespace: Namespace to bind

    Returns:
        Namespace reader for the configured table
    """
    # Import here to avoid circular imports
    from viewr.dal.dynamodb_handler import DynamoDBNamespace
    from viewr.handlers.models.env_vars import get_handler_env_vars

    env_vars = get_handler_env_vars()
    return DynamoDBNamespace(
        name=namespace.value,
        table_name=env_vars.table_name_for(namespace.value),
        region_name=env_vars.AWS_REGION,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )


__all__ = [
    'KeyValueNamespace',
    'BaseKeyValueNamespace',
    'get_namespace',
]
