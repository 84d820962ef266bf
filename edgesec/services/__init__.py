"""Resource services, one per API family."""

from .appsec import AppSecService, AsyncAppSecService
from .network_lists import AsyncNetworkListService, NetworkListService
from .property_manager import AsyncPropertyService, PropertyService

__all__ = [
    "AppSecService",
    "AsyncAppSecService",
    "AsyncNetworkListService",
    "AsyncPropertyService",
    "NetworkListService",
    "PropertyService",
]
