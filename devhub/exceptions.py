"""Error types raised by the DevHub client layers."""

from __future__ import annotations

from typing import Sequence


class ResourceClientError(Exception):
    """A remote resource request did not succeed."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class TransportError(ResourceClientError):
    """The request could not complete (connection refused, timeout, ...)."""


class ServerError(ResourceClientError):
    """The server answered with a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Request failed with status code {status_code}")
        self.status_code = status_code


class FormValidationError(ValueError):
    """A draft failed the required-field checks that precede submission."""

    def __init__(self, fields: Sequence[str], message: str | None = None) -> None:
        self.fields = tuple(fields)
        super().__init__(message or f"Please fill in: {', '.join(self.fields)}")


__all__ = [
    "ResourceClientError",
    "TransportError",
    "ServerError",
    "FormValidationError",
]
