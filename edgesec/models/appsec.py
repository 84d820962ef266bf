"""Application security configuration models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ..validation import collect, required_id, required_text
from .base import EdgeModel
from .types import bool_param

# =============================================================================
# Configurations
# =============================================================================


class SecurityConfig(EdgeModel):
    id: int
    name: str = ""
    description: str | None = None
    latest_version: int = Field(0, alias="latestVersion")
    production_version: int | None = Field(None, alias="productionVersion")
    staging_version: int | None = Field(None, alias="stagingVersion")
    production_hostnames: list[str] = Field(default_factory=list, alias="productionHostnames")


class ConfigList(EdgeModel):
    configurations: list[SecurityConfig] = Field(default_factory=list)


# =============================================================================
# Versions
# =============================================================================


class EnvironmentStatus(EdgeModel):
    status: str = ""
    time: datetime | None = None


class ConfigVersion(EdgeModel):
    version: int
    version_notes: str = Field("", alias="versionNotes")
    create_date: datetime | None = Field(None, alias="createDate")
    created_by: str = Field("", alias="createdBy")
    based_on: int | None = Field(None, alias="basedOn")
    production: EnvironmentStatus = Field(default_factory=EnvironmentStatus)
    staging: EnvironmentStatus = Field(default_factory=EnvironmentStatus)


class ConfigVersionList(EdgeModel):
    total_size: int = Field(0, alias="totalSize")
    page_size: int = Field(0, alias="pageSize")
    page: int = 0
    config_id: int = Field(0, alias="configId")
    config_name: str = Field("", alias="configName")
    staging_expedite_request_id: int | None = Field(None, alias="stagingExpediteRequestId")
    production_expedite_request_id: int | None = Field(None, alias="productionExpediteRequestId")
    production_active_version: int | None = Field(None, alias="productionActiveVersion")
    staging_active_version: int | None = Field(None, alias="stagingActiveVersion")
    last_created_version: int | None = Field(None, alias="lastCreatedVersion")
    version_list: list[ConfigVersion] = Field(default_factory=list, alias="versionList")

    @property
    def latest(self) -> ConfigVersion | None:
        """Highest-numbered version on this page."""
        if not self.version_list:
            return None
        return max(self.version_list, key=lambda v: v.version)


class GetConfigVersionsRequest(EdgeModel):
    """
    Version listing for one configuration.

    `page`, `page_size` and `detail` are independent; each is sent only when
    set. A `page` of -1 asks the server to skip pagination.
    """

    config_id: int = 0
    page: int | None = None
    page_size: int | None = None
    detail: bool | None = None

    def validate_fields(self) -> dict[str, str]:
        return collect(configId=required_id(self.config_id))

    def query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.page is not None:
            params["page"] = str(self.page)
        if self.page_size is not None:
            params["pageSize"] = str(self.page_size)
        if self.detail is not None:
            params["detail"] = bool_param(self.detail)
        return params


# =============================================================================
# Policies
# =============================================================================


class PolicySecurityControls(EdgeModel):
    apply_application_layer_controls: bool = Field(False, alias="applyApplicationLayerControls")
    apply_network_layer_controls: bool = Field(False, alias="applyNetworkLayerControls")
    apply_rate_controls: bool = Field(False, alias="applyRateControls")
    apply_reputation_controls: bool = Field(False, alias="applyReputationControls")
    apply_botman_controls: bool = Field(False, alias="applyBotmanControls")
    apply_api_constraints: bool = Field(False, alias="applyApiConstraints")
    apply_slow_post_controls: bool = Field(False, alias="applySlowPostControls")


class SecurityPolicy(EdgeModel):
    policy_id: str = Field(..., alias="policyId")
    policy_name: str = Field("", alias="policyName")
    has_rate_policy_with_api_key: bool = Field(False, alias="hasRatePolicyWithApiKey")
    policy_security_controls: PolicySecurityControls = Field(
        default_factory=PolicySecurityControls, alias="policySecurityControls"
    )


class PolicyList(EdgeModel):
    config_id: int = Field(0, alias="configId")
    version: int = 0
    policies: list[SecurityPolicy] = Field(default_factory=list)


class GetPoliciesRequest(EdgeModel):
    config_id: int = 0
    version: int = 0

    def validate_fields(self) -> dict[str, str]:
        return collect(
            configId=required_id(self.config_id),
            version=required_id(self.version),
        )


# =============================================================================
# Rules
# =============================================================================


class RuleAction(EdgeModel):
    id: int
    action: str = ""


class RuleActionList(EdgeModel):
    rule_actions: list[RuleAction] = Field(default_factory=list, alias="ruleActions")


class GetRulesRequest(EdgeModel):
    config_id: int = 0
    version: int = 0
    policy_id: str = ""

    def validate_fields(self) -> dict[str, str]:
        return collect(
            configId=required_id(self.config_id),
            version=required_id(self.version),
            policyId=required_text(self.policy_id),
        )
