"""
edgesec - typed clients for edge security APIs.

Covers network lists, application security configurations and the
property manager lookups needed alongside them.
"""

from __future__ import annotations

from .client import AsyncEdgeClient, EdgeClient
from .clients.http import ClientConfig
from .exceptions import (
    APIError,
    EdgeError,
    ErrorKind,
    NotFoundError,
    TransportError,
    ValidationError,
)
from .models.types import Environment, NetworkListType

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AsyncEdgeClient",
    "ClientConfig",
    "EdgeClient",
    "EdgeError",
    "Environment",
    "ErrorKind",
    "NetworkListType",
    "NotFoundError",
    "TransportError",
    "ValidationError",
    "__version__",
]
