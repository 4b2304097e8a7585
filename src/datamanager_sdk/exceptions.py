"""Data Manager SDK exceptions."""

from __future__ import annotations


class DMError(Exception):
    """Base exception for all Data Manager SDK errors."""


class DMInvalidParameterError(DMError):
    """A required parameter is missing or malformed.

    Raised locally before any request is sent.
    """

    def __init__(self, message: str, parameter_name: str | None = None, method_name: str | None = None):
        super().__init__(message)
        self.parameter_name = parameter_name
        self.method_name = method_name


class DMAPIError(DMError):
    """API request failed."""

    def __init__(self, message: str, status_code: int | None = None, response_data: dict | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class DMNotAuthorizedError(DMAPIError):
    """Caller is not authorized (401/403)."""


class DMPropertyServerError(DMAPIError):
    """The metadata server reported a failure."""


class DMNotFoundError(DMPropertyServerError):
    """Element not found (404)."""


class DMConnectionError(DMPropertyServerError):
    """Failed to connect to the metadata server."""
