"""
Network list models.

Request models carry the identifiers that end up in the URL path, either
directly or through the request they wrap, and render their own query string
and JSON body.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from ..validation import (
    collect,
    required_enum,
    required_sync_point,
    required_text,
)
from .base import EdgeModel, Link
from .types import Environment, NetworkListType, bool_param

# =============================================================================
# Responses
# =============================================================================


class NetworkListLinks(EdgeModel):
    activate_in_production: Link | None = Field(None, alias="activateInProduction")
    activate_in_staging: Link | None = Field(None, alias="activateInStaging")
    append_items: Link | None = Field(None, alias="appendItems")
    retrieve: Link | None = None
    status_in_production: Link | None = Field(None, alias="statusInProduction")
    status_in_staging: Link | None = Field(None, alias="statusInStaging")
    update: Link | None = None


class NetworkListResponse(EdgeModel):
    """A network list as returned by most network list operations."""

    unique_id: str = Field("", alias="uniqueId")
    name: str = ""
    type: str = ""
    network_list_type: str | None = Field(None, alias="networkListType")
    description: str | None = None
    element_count: int = Field(0, alias="elementCount")
    elements: list[str] = Field(default_factory=list, alias="list")
    sync_point: int = Field(0, alias="syncPoint")
    read_only: bool = Field(False, alias="readOnly")
    shared: bool = False
    status: int | None = None
    create_date: datetime | None = Field(None, alias="createDate")
    created_by: str | None = Field(None, alias="createdBy")
    update_date: datetime | None = Field(None, alias="updateDate")
    updated_by: str | None = Field(None, alias="updatedBy")
    production_activation_status: str | None = Field(None, alias="productionActivationStatus")
    staging_activation_status: str | None = Field(None, alias="stagingActivationStatus")
    links: NetworkListLinks = Field(default_factory=NetworkListLinks)

    @property
    def list_type(self) -> NetworkListType | None:
        try:
            return NetworkListType(self.type)
        except ValueError:
            return None


class NetworkListCollectionLinks(EdgeModel):
    create: Link | None = None


class NetworkListCollection(EdgeModel):
    network_lists: list[NetworkListResponse] = Field(default_factory=list, alias="networkLists")
    links: NetworkListCollectionLinks = Field(default_factory=NetworkListCollectionLinks)


class ActivationResponse(EdgeModel):
    """Status of a network list activation."""

    activation_id: int | None = Field(None, alias="activationId")
    activation_status: str = Field("", alias="activationStatus")
    activation_comments: str | None = Field(None, alias="activationComments")
    environment: str | None = None
    sync_point: int | None = Field(None, alias="syncPoint")
    unique_id: str | None = Field(None, alias="uniqueId")
    fast: bool | None = None
    dispatch_count: int | None = Field(None, alias="dispatchCount")
    notification_recipients: list[str] = Field(default_factory=list, alias="notificationRecipients")
    links: dict[str, Link] = Field(default_factory=dict)

    @property
    def target_environment(self) -> Environment | None:
        try:
            return Environment(self.environment)
        except ValueError:
            return None


# =============================================================================
# Requests
# =============================================================================


class ListNetworkListsRequest(EdgeModel):
    extended: bool = False
    include_elements: bool = False
    search: str = ""
    list_type: NetworkListType | None = None

    def validate_fields(self) -> dict[str, str]:
        return {}

    def query_params(self) -> dict[str, str]:
        params = {
            "extended": bool_param(self.extended),
            "includeElements": bool_param(self.include_elements),
        }
        if self.search:
            params["search"] = self.search
        if self.list_type is not None:
            params["listType"] = self.list_type.value
        return params


class GetNetworkListRequest(EdgeModel):
    network_list_id: str = ""
    extended: bool = False
    include_elements: bool = False

    def validate_fields(self) -> dict[str, str]:
        return collect(networkListId=required_text(self.network_list_id))

    def query_params(self) -> dict[str, str]:
        return {
            "extended": bool_param(self.extended),
            "includeElements": bool_param(self.include_elements),
        }


class DeleteNetworkListRequest(EdgeModel):
    """Delete addresses the same list a get would; only the id is used."""

    target: GetNetworkListRequest = Field(default_factory=GetNetworkListRequest)

    @classmethod
    def for_list(cls, network_list_id: str) -> DeleteNetworkListRequest:
        return cls(target=GetNetworkListRequest(network_list_id=network_list_id))

    @property
    def network_list_id(self) -> str:
        return self.target.network_list_id

    def validate_fields(self) -> dict[str, str]:
        return self.target.validate_fields()


class CreateNetworkListRequest(EdgeModel):
    name: str = ""
    type: NetworkListType | None = None
    description: str = ""
    elements: list[str] = Field(default_factory=list)
    contract_id: str | None = None
    group_id: int | None = None

    def validate_fields(self) -> dict[str, str]:
        return collect(name=required_text(self.name), type=required_enum(self.type))

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "name": self.name,
            "type": self.type.value if self.type is not None else "",
            "description": self.description,
            "list": list(self.elements),
        }
        if self.contract_id:
            body["contractId"] = self.contract_id
        if self.group_id:
            body["groupId"] = self.group_id
        return body


class UpdateNetworkListRequest(EdgeModel):
    """
    Full replacement of a network list.

    `sync_point` must be the value last read from the server; it is sent
    unchanged and the server rejects the update if the list moved on.
    """

    network_list_id: str = ""
    name: str = ""
    type: NetworkListType | None = None
    description: str = ""
    elements: list[str] = Field(default_factory=list)
    sync_point: int | None = None
    contract_id: str | None = None
    group_id: int | None = None
    extended: bool = False
    include_elements: bool = False

    def validate_fields(self) -> dict[str, str]:
        return collect(
            networkListId=required_text(self.network_list_id),
            name=required_text(self.name),
            type=required_enum(self.type),
            syncPoint=required_sync_point(self.sync_point),
        )

    def query_params(self) -> dict[str, str]:
        return {
            "extended": bool_param(self.extended),
            "includeElements": bool_param(self.include_elements),
        }

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "name": self.name,
            "type": self.type.value if self.type is not None else "",
            "description": self.description,
            "list": list(self.elements),
            "syncPoint": self.sync_point,
        }
        if self.contract_id:
            body["contractId"] = self.contract_id
        if self.group_id:
            body["groupId"] = self.group_id
        return body


class AppendListRequest(EdgeModel):
    network_list_id: str = ""
    elements: list[str] = Field(default_factory=list)

    def validate_fields(self) -> dict[str, str]:
        return collect(networkListId=required_text(self.network_list_id))

    def to_body(self) -> dict[str, Any]:
        return {"list": list(self.elements)}


class AddElementRequest(EdgeModel):
    network_list_id: str = ""
    element: str = ""

    def validate_fields(self) -> dict[str, str]:
        return collect(
            networkListId=required_text(self.network_list_id),
            element=required_text(self.element),
        )

    def query_params(self) -> dict[str, str]:
        return {"element": self.element}


class RemoveElementRequest(EdgeModel):
    """Removal names the list and element exactly as an add does."""

    target: AddElementRequest = Field(default_factory=AddElementRequest)

    @classmethod
    def for_element(cls, network_list_id: str, element: str) -> RemoveElementRequest:
        return cls(target=AddElementRequest(network_list_id=network_list_id, element=element))

    @property
    def network_list_id(self) -> str:
        return self.target.network_list_id

    @property
    def element(self) -> str:
        return self.target.element

    def validate_fields(self) -> dict[str, str]:
        return self.target.validate_fields()

    def query_params(self) -> dict[str, str]:
        return self.target.query_params()


class ActivateNetworkListRequest(EdgeModel):
    network_list_id: str = ""
    environment: Environment | None = None
    comments: str = ""
    notification_recipients: list[str] = Field(default_factory=list)

    def validate_fields(self) -> dict[str, str]:
        return collect(
            networkListId=required_text(self.network_list_id),
            environment=required_enum(self.environment),
        )

    def to_body(self) -> dict[str, Any]:
        return {
            "comments": self.comments,
            "notificationRecipients": list(self.notification_recipients),
        }


class ActivationStatusRequest(EdgeModel):
    network_list_id: str = ""
    environment: Environment | None = None

    def validate_fields(self) -> dict[str, str]:
        return collect(
            networkListId=required_text(self.network_list_id),
            environment=required_enum(self.environment),
        )


class GetSnapshotRequest(EdgeModel):
    """Read a network list as it was at a given sync point."""

    network_list_id: str = ""
    sync_point: int | None = None
    extended: bool = False

    def validate_fields(self) -> dict[str, str]:
        return collect(
            networkListId=required_text(self.network_list_id),
            syncPoint=required_sync_point(self.sync_point),
        )

    def query_params(self) -> dict[str, str]:
        return {"extended": bool_param(self.extended)}


class UpdateDetailsRequest(EdgeModel):
    network_list_id: str = ""
    name: str = ""
    description: str = ""

    def validate_fields(self) -> dict[str, str]:
        return collect(
            networkListId=required_text(self.network_list_id),
            name=required_text(self.name),
        )

    def to_body(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description}
