"""Property Manager (read-only) models used to pick a contract and group."""

from __future__ import annotations

from pydantic import Field

from ..validation import collect, required_text
from .base import EdgeModel


class Contract(EdgeModel):
    contract_id: str = Field(..., alias="contractId")
    contract_type_name: str | None = Field(None, alias="contractTypeName")

    @property
    def bare_id(self) -> str:
        """Contract id without the `ctr_` prefix, as network list creation expects it."""
        return self.contract_id.removeprefix("ctr_")


class ContractItems(EdgeModel):
    items: list[Contract] = Field(default_factory=list)


class ContractList(EdgeModel):
    account_id: str | None = Field(None, alias="accountId")
    contracts: ContractItems = Field(default_factory=ContractItems)


class Group(EdgeModel):
    group_id: str = Field(..., alias="groupId")
    group_name: str = Field("", alias="groupName")
    parent_group_id: str | None = Field(None, alias="parentGroupId")
    contract_ids: list[str] = Field(default_factory=list, alias="contractIds")

    @property
    def bare_id(self) -> int | None:
        """Numeric group id without the `grp_` prefix."""
        value = self.group_id.removeprefix("grp_")
        return int(value) if value.isdigit() else None


class GroupItems(EdgeModel):
    items: list[Group] = Field(default_factory=list)


class GroupList(EdgeModel):
    account_id: str | None = Field(None, alias="accountId")
    account_name: str | None = Field(None, alias="accountName")
    groups: GroupItems = Field(default_factory=GroupItems)


class Product(EdgeModel):
    product_id: str = Field(..., alias="productId")
    product_name: str = Field("", alias="productName")


class ProductItems(EdgeModel):
    items: list[Product] = Field(default_factory=list)


class ProductList(EdgeModel):
    account_id: str | None = Field(None, alias="accountId")
    contract_id: str | None = Field(None, alias="contractId")
    products: ProductItems = Field(default_factory=ProductItems)


class GetProductsRequest(EdgeModel):
    contract_id: str = ""

    def validate_fields(self) -> dict[str, str]:
        return collect(contractId=required_text(self.contract_id))

    def query_params(self) -> dict[str, str]:
        return {"contractId": self.contract_id}
