"""
Viewr Lambda Handlers Module.

This module contains the request handlers of the device monitor read API. Each
handler is a function of the namespace it reads (and an identifier, for
lookups) returning an HTTP response; ``api_handler`` binds them to routes.
"""

from viewr.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
