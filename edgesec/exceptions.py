"""
Exception hierarchy for the edgesec SDK.

Every error carries an `ErrorKind` so callers can branch on the category of
failure without relying on module-level sentinel objects.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError as PydanticValidationError

if TYPE_CHECKING:
    from .models.errors import Problem


class ErrorKind(str, Enum):
    """Closed set of error categories."""

    STRUCT_VALIDATION = "struct_validation"
    TRANSPORT = "transport"
    API = "api"
    NOT_FOUND = "not_found"


class EdgeError(Exception):
    """Base class for all SDK errors."""

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for structured logging."""
        return {"kind": self.kind.value, "message": self.message}


class ValidationError(EdgeError):
    """A request failed local validation before any network call."""

    kind = ErrorKind.STRUCT_VALIDATION

    def __init__(self, fields: dict[str, str], *, operation: str | None = None):
        detail = "; ".join(f"{name}: {msg}" for name, msg in sorted(fields.items()))
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}struct validation: {detail}")
        self.fields = dict(fields)
        self.operation = operation

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["fields"] = self.fields
        return result


class TransportError(EdgeError):
    """Building, sending or decoding a request failed."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, *, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class APIError(EdgeError):
    """The API answered with a status other than the expected one."""

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        *,
        status: int,
        problem: Problem | None = None,
        response_text: str | None = None,
    ):
        super().__init__(message)
        self.status = status
        self.problem = problem
        self.response_text = response_text

    @property
    def errors(self) -> list[dict[str, Any]]:
        return list(self.problem.errors) if self.problem else []

    @property
    def warnings(self) -> list[dict[str, Any]]:
        return list(self.problem.warnings) if self.problem else []

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status"] = self.status
        if self.problem is not None:
            result["problem"] = self.problem.model_dump(by_alias=True, exclude_none=True)
        return result


class NotFoundError(APIError):
    """The requested resource does not exist (HTTP 404)."""

    kind = ErrorKind.NOT_FOUND


def error_from_response(response: httpx.Response) -> APIError:
    """
    Translate a non-success response into a structured error.

    The vendor reports failures as an RFC 7807-style problem document; when the
    body is not one, the raw text is kept on the error instead.
    """
    from .models.errors import Problem

    text = response.text
    problem: Problem | None = None
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        try:
            problem = Problem.model_validate(payload)
        except PydanticValidationError:
            problem = None

    message = f"API error: HTTP {response.status_code}"
    if problem is not None:
        summary = problem.detail or problem.title
        if summary:
            message = f"{message}: {summary}"

    error_cls = NotFoundError if response.status_code == 404 else APIError
    return error_cls(message, status=response.status_code, problem=problem, response_text=text)
