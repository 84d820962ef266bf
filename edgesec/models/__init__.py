"""
edgesec data models.

All pydantic models and type definitions are available from this module.
"""

from __future__ import annotations

# Application security
from .appsec import (
    ConfigList,
    ConfigVersion,
    ConfigVersionList,
    EnvironmentStatus,
    GetConfigVersionsRequest,
    GetPoliciesRequest,
    GetRulesRequest,
    PolicyList,
    PolicySecurityControls,
    RuleAction,
    RuleActionList,
    SecurityConfig,
    SecurityPolicy,
)

# Base
from .base import EdgeModel, Link
from .errors import Problem

# Network lists
from .network_lists import (
    ActivateNetworkListRequest,
    ActivationResponse,
    ActivationStatusRequest,
    AddElementRequest,
    AppendListRequest,
    CreateNetworkListRequest,
    DeleteNetworkListRequest,
    GetNetworkListRequest,
    GetSnapshotRequest,
    ListNetworkListsRequest,
    NetworkListCollection,
    NetworkListLinks,
    NetworkListResponse,
    RemoveElementRequest,
    UpdateDetailsRequest,
    UpdateNetworkListRequest,
)

# Property manager
from .papi import (
    Contract,
    ContractList,
    GetProductsRequest,
    Group,
    GroupList,
    Product,
    ProductList,
)

# Type system
from .types import (
    APPSEC_CONFIGS_PATH,
    NETWORK_LISTS_PATH,
    PAPI_PATH,
    Environment,
    NetworkListType,
)

__all__ = [
    # Paths
    "APPSEC_CONFIGS_PATH",
    "NETWORK_LISTS_PATH",
    "PAPI_PATH",
    # Enums
    "Environment",
    "NetworkListType",
    # Base
    "EdgeModel",
    "Link",
    "Problem",
    # Network lists
    "ActivateNetworkListRequest",
    "ActivationResponse",
    "ActivationStatusRequest",
    "AddElementRequest",
    "AppendListRequest",
    "CreateNetworkListRequest",
    "DeleteNetworkListRequest",
    "GetNetworkListRequest",
    "GetSnapshotRequest",
    "ListNetworkListsRequest",
    "NetworkListCollection",
    "NetworkListLinks",
    "NetworkListResponse",
    "RemoveElementRequest",
    "UpdateDetailsRequest",
    "UpdateNetworkListRequest",
    # Application security
    "ConfigList",
    "ConfigVersion",
    "ConfigVersionList",
    "EnvironmentStatus",
    "GetConfigVersionsRequest",
    "GetPoliciesRequest",
    "GetRulesRequest",
    "PolicyList",
    "PolicySecurityControls",
    "RuleAction",
    "RuleActionList",
    "SecurityConfig",
    "SecurityPolicy",
    # Property manager
    "Contract",
    "ContractList",
    "GetProductsRequest",
    "Group",
    "GroupList",
    "Product",
    "ProductList",
]
