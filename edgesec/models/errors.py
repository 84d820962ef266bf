"""Problem document returned by the API on failure."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import EdgeModel


class Problem(EdgeModel):
    type: str | None = None
    title: str | None = None
    detail: str | None = None
    status: int | None = None
    instance: str | None = None
    request_id: str | None = Field(None, alias="requestId")
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)
