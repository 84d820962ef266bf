"""Shared pydantic base model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EdgeModel(BaseModel):
    """
    Base for all request and response models.

    Attributes are snake_case; the vendor's camelCase names are declared as
    aliases and accepted on input as well as emitted with `by_alias=True`.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )


class Link(EdgeModel):
    """Hyperlink affordance returned alongside a resource."""

    href: str = ""
    method: str | None = None
