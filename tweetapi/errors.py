"""Error types raised by the API client and error objects found in responses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tweetapi.objects import Model

PARAMETER_ERROR_MESSAGE = "twitter input parameter error"


class ParameterError(ValueError):
    """An input parameter given to the client is invalid."""

    def __init__(self, message: str = PARAMETER_ERROR_MESSAGE) -> None:
        super().__init__(message)


class HTTPError(Exception):
    """A non-success response whose body could not be decoded as JSON."""

    def __init__(self, status: str, status_code: int, url: str) -> None:
        self.status = status
        self.status_code = status_code
        self.url = url
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"twitter [{self.url}] status: {self.status} code: {self.status_code}"


@dataclass
class ErrorObj(Model):
    """A partial error reported alongside response data."""

    title: str = ""
    detail: str = ""
    type: str = ""
    resource_type: str = ""
    parameter: str = ""
    value: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ErrorObj:
        """Build the partial error from a decoded JSON object."""
        return super().from_dict(data)


@dataclass
class ApiError(Model):
    """One entry of the error list in a failed response."""

    parameters: Any = None
    message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApiError:
        """Build the error entry from a decoded JSON object."""
        return super().from_dict(data)


class ErrorResponse(Exception):
    """The decoded body of a non-success response."""

    def __init__(
        self,
        status_code: int = 0,
        errors: list[ApiError] | None = None,
        title: str = "",
        detail: str = "",
        type: str = "",
    ) -> None:
        self.status_code = status_code
        self.errors = list(errors) if errors else []
        self.title = title
        self.detail = detail
        self.type = type
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"twitter callout status {self.status_code} {self.title}:{self.detail}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], status_code: int = 0) -> ErrorResponse:
        """Build the error from a decoded JSON body and the response status code."""
        if not isinstance(data, Mapping):
            raise TypeError(f"error response expects a JSON object, got {type(data).__name__}")
        return cls(
            status_code=status_code,
            errors=[ApiError.from_dict(item) for item in data.get("errors") or []],
            title=data.get("title") or "",
            detail=data.get("detail") or "",
            type=data.get("type") or "",
        )


__all__ = [
    "ApiError",
    "ErrorObj",
    "ErrorResponse",
    "HTTPError",
    "ParameterError",
    "PARAMETER_ERROR_MESSAGE",
]