"""
Application security service.

Read access to the security configuration hierarchy: configurations, their
versions, the security policies of a version and the rule actions of a
policy.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..clients.http import parse_model
from ..models.appsec import (
    ConfigList,
    ConfigVersionList,
    GetConfigVersionsRequest,
    GetPoliciesRequest,
    GetRulesRequest,
    PolicyList,
    RuleActionList,
)
from ..models.types import APPSEC_CONFIGS_PATH
from ..validation import ensure_valid

if TYPE_CHECKING:
    from ..clients.http import AsyncHTTPClient, HTTPClient

logger = logging.getLogger(__name__)


def _versions_path(config_id: int) -> str:
    return f"{APPSEC_CONFIGS_PATH}/{config_id}/versions"


def _policies_path(config_id: int, version: int) -> str:
    return f"{_versions_path(config_id)}/{version}/security-policies"


class AppSecService:
    def __init__(self, client: HTTPClient):
        self._client = client

    def get_configs(self) -> ConfigList:
        """List security configurations."""
        logger.debug("get_configs")
        data = self._client.request("GET", APPSEC_CONFIGS_PATH, operation="get_configs")
        return parse_model(ConfigList, data, operation="get_configs")

    def get_config_versions(self, request: GetConfigVersionsRequest) -> ConfigVersionList:
        """
        List versions of a security configuration.

        Args:
            request: Configuration id plus optional `page`, `page_size` and
                `detail` (summary vs. detailed version info)
        """
        ensure_valid(request, operation="get_config_versions")
        logger.debug("get_config_versions %s", request.config_id)
        data = self._client.request(
            "GET",
            _versions_path(request.config_id),
            operation="get_config_versions",
            params=request.query_params(),
        )
        return parse_model(ConfigVersionList, data, operation="get_config_versions")

    def get_policies(self, request: GetPoliciesRequest) -> PolicyList:
        """List security policies of one configuration version."""
        ensure_valid(request, operation="get_policies")
        logger.debug("get_policies %s v%s", request.config_id, request.version)
        data = self._client.request(
            "GET",
            _policies_path(request.config_id, request.version),
            operation="get_policies",
        )
        return parse_model(PolicyList, data, operation="get_policies")

    def get_rules(self, request: GetRulesRequest) -> RuleActionList:
        """List rule actions of a security policy."""
        ensure_valid(request, operation="get_rules")
        logger.debug("get_rules %s v%s %s", request.config_id, request.version, request.policy_id)
        data = self._client.request(
            "GET",
            f"{_policies_path(request.config_id, request.version)}/{request.policy_id}/rules",
            operation="get_rules",
        )
        return parse_model(RuleActionList, data, operation="get_rules")


class AsyncAppSecService:
    """Async version of AppSecService."""

    def __init__(self, client: AsyncHTTPClient):
        self._client = client

    async def get_configs(self) -> ConfigList:
        logger.debug("get_configs")
        data = await self._client.request("GET", APPSEC_CONFIGS_PATH, operation="get_configs")
        return parse_model(ConfigList, data, operation="get_configs")

    async def get_config_versions(self, request: GetConfigVersionsRequest) -> ConfigVersionList:
        ensure_valid(request, operation="get_config_versions")
        logger.debug("get_config_versions %s", request.config_id)
        data = await self._client.request(
            "GET",
            _versions_path(request.config_id),
            operation="get_config_versions",
            params=request.query_params(),
        )
        return parse_model(ConfigVersionList, data, operation="get_config_versions")

    async def get_policies(self, request: GetPoliciesRequest) -> PolicyList:
        ensure_valid(request, operation="get_policies")
        logger.debug("get_policies %s v%s", request.config_id, request.version)
        data = await self._client.request(
            "GET",
            _policies_path(request.config_id, request.version),
            operation="get_policies",
        )
        return parse_model(PolicyList, data, operation="get_policies")

    async def get_rules(self, request: GetRulesRequest) -> RuleActionList:
        ensure_valid(request, operation="get_rules")
        logger.debug("get_rules %s v%s %s", request.config_id, request.version, request.policy_id)
        data = await self._client.request(
            "GET",
            f"{_policies_path(request.config_id, request.version)}/{request.policy_id}/rules",
            operation="get_rules",
        )
        return parse_model(RuleActionList, data, operation="get_rules")
