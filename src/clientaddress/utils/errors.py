"""Typed exceptions raised while looking up a client address.

Every error carries a message suitable for display in place of the formula
result.  Nothing is recovered internally; the first failure aborts the call.
"""

from __future__ import annotations


class ClientAddressError(Exception):
    """Base class for address lookup errors."""


class MissingParameterError(ClientAddressError, ValueError):
    """Raised when user, password or client id are missing."""

    def __init__(self, names: list[str]) -> None:
        self.names = tuple(names)
        super().__init__(f"Missing parameter: {', '.join(names)}")


class NetworkError(ClientAddressError):
    """Raised when the HTTP transport fails before a response arrives."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Network error: {detail}")


class ApiError(ClientAddressError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"API error: HTTP {status}")


class InvalidResponseError(ClientAddressError, ValueError):
    """Raised when the response body is not the expected structured data."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid response: {detail}")


class NotFoundError(ClientAddressError, LookupError):
    """Raised when the API returns no address for the client."""

    def __init__(self, client_id: object = None) -> None:
        self.client_id = client_id
        if client_id is None:
            super().__init__("No address found")
        else:
            super().__init__(f"No address found for client {client_id}")


class UnknownFieldError(ClientAddressError, LookupError):
    """Raised when a field exists in neither the target nor the default address."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unknown field: {field}")


__all__ = [
    "ClientAddressError",
    "MissingParameterError",
    "NetworkError",
    "ApiError",
    "InvalidResponseError",
    "NotFoundError",
    "UnknownFieldError",
]
