"""
Viewr device monitor read API.

This package serves the key-value namespaces maintained by the device
collector over HTTP:

- handlers: API handlers and entry points
- logic: aggregations spanning several reads
- dal: read access to the key-value namespaces
- models: namespace definitions and domain models
"""

__version__ = "1.0.0"
__description__ = "Read-only HTTP API over the device monitor key-value namespaces"
