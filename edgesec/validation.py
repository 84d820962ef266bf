"""
Request validation helpers.

Checks are deliberately shallow: a field is either present or not. Request
models implement `validate_fields()` with these helpers and services call
`ensure_valid()` before touching the network.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from .exceptions import ValidationError

BLANK = "cannot be blank"


class SupportsFieldValidation(Protocol):
    def validate_fields(self) -> dict[str, str]: ...


def required_text(value: str | None) -> str | None:
    if not value:
        return BLANK
    return None


def required_enum(value: Enum | None) -> str | None:
    if value is None:
        return BLANK
    return None


def required_id(value: int | None) -> str | None:
    """Numeric identifiers embedded in a path must be positive."""
    if value is None or value <= 0:
        return BLANK
    return None


def required_sync_point(value: int | None) -> str | None:
    if value is None:
        return BLANK
    if value < 0:
        return "must be no less than 0"
    return None


def collect(**checks: str | None) -> dict[str, str]:
    """Keep only the failed checks, keyed by wire field name."""
    return {name: message for name, message in checks.items() if message}


def ensure_valid(request: SupportsFieldValidation, *, operation: str | None = None) -> None:
    errors = request.validate_fields()
    if errors:
        raise ValidationError(errors, operation=operation)
