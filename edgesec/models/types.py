"""
Enumerations and fixed API locations.

Enums are closed: constructing one from an unknown value raises ValueError,
e.g. `NetworkListType("MAC")`.
"""

from __future__ import annotations

from enum import Enum

NETWORK_LISTS_PATH = "/network-list/v2/network-lists"
APPSEC_CONFIGS_PATH = "/appsec/v1/configs"
PAPI_PATH = "/papi/v1"


class NetworkListType(str, Enum):
    """Kind of values a network list holds."""

    IP = "IP"
    GEO = "GEO"

    def __str__(self) -> str:
        return self.value


class Environment(str, Enum):
    """Activation target network."""

    STAGING = "STAGING"
    PRODUCTION = "PRODUCTION"

    def __str__(self) -> str:
        return self.value


def bool_param(value: bool) -> str:
    """Render a boolean the way the query string expects it."""
    return "true" if value else "false"
