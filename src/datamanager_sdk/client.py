"""Data Manager client."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from datamanager_sdk.exceptions import (
    DMConnectionError,
    DMInvalidParameterError,
    DMNotAuthorizedError,
    DMNotFoundError,
    DMPropertyServerError,
)
from datamanager_sdk.resources.event_types import EventTypeResource
from datamanager_sdk.resources.topics import TopicResource
from datamanager_sdk.settings import DataManagerSettings

logger = logging.getLogger(__name__)


class DataManagerClient:
    """Data Manager access service client.

    Provides typed access to the topics and event types held by the
    metadata server.

    Example:
        >>> with DataManagerClient("mds1", "https://localhost:9443") as client:
        ...     topics = client.topics.find("erinoverview", ".*orders.*")

    Args:
        server_name: Name of the metadata server to call
        platform_url: Base URL of the platform hosting the server
        user_id: Optional user id for basic authentication
        password: Optional password for basic authentication
        timeout: Request timeout in seconds (default: 30)
        max_page_size: Largest page size a caller may request (default: 1000)
        verify_tls: Verify the server's TLS certificate
    """

    def __init__(
        self,
        server_name: str,
        platform_url: str,
        user_id: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
        max_page_size: int = 1000,
        verify_tls: bool = True,
    ):
        if not server_name:
            raise DMInvalidParameterError("No server name supplied", parameter_name="server_name")
        if not platform_url:
            raise DMInvalidParameterError("No platform URL supplied", parameter_name="platform_url")

        self.server_name = server_name
        self.platform_url = platform_url.rstrip("/")
        self.user_id = user_id
        self.timeout = timeout
        self.max_page_size = max_page_size

        # Configure HTTP client
        headers = {
            "User-Agent": "datamanager-sdk/0.1.0",
            "Accept": "application/json",
        }
        auth = httpx.BasicAuth(user_id, password or "") if user_id else None

        self._client = httpx.Client(
            base_url=self.platform_url,
            headers=headers,
            auth=auth,
            timeout=timeout,
            verify=verify_tls,
        )

        # Initialize resource managers
        self.topics = TopicResource(self)
        self.event_types = EventTypeResource(self)

        logger.info(f"Data Manager client initialized: server={server_name} platform={self.platform_url}")

    @classmethod
    def from_settings(cls, settings: DataManagerSettings | None = None) -> DataManagerClient:
        """Build a client from settings (environment variables by default)."""
        settings = settings or DataManagerSettings()
        return cls(
            settings.server_name,
            settings.platform_url,
            user_id=settings.user_id,
            password=settings.password,
            timeout=settings.timeout,
            max_page_size=settings.max_page_size,
            verify_tls=settings.verify_tls,
        )

    def __enter__(self) -> DataManagerClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def request(
        self,
        http_method: str,
        method_name: str,
        url_template: str,
        *,
        path_params: dict[str, Any],
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make a request to the Data Manager REST API.

        Args:
            http_method: HTTP method (GET, POST)
            method_name: Calling operation, used in logs and errors
            url_template: Path with ``{name}`` placeholders
            path_params: Values for the placeholders, encoded as whole path segments
            params: Query parameters
            json: JSON request body

        Returns:
            Response envelope

        Raises:
            DMNotAuthorizedError: If the caller is not authorized (401/403)
            DMNotFoundError: If the element is not found (404)
            DMPropertyServerError: For any other server-side failure
            DMConnectionError: If the connection fails
        """
        path = expand_path(url_template, path_params)
        logger.debug(f"{method_name}: {http_method} {path}")

        try:
            response = self._client.request(
                method=http_method,
                url=path,
                params=params,
                json=json,
            )
        except httpx.HTTPError as e:
            raise DMConnectionError(f"Failed to connect to metadata server on {method_name}: {e}") from e

        if response.status_code >= 400:
            self._handle_error_response(response, method_name)

        try:
            data = response.json() if response.content else {}
        except ValueError as e:
            raise DMPropertyServerError(
                f"Response to {method_name} is not valid JSON", response.status_code
            ) from e
        if not isinstance(data, dict):
            raise DMPropertyServerError(
                f"Response to {method_name} is not a JSON object", response.status_code, {"body": data}
            )

        related_code = data.get("relatedHTTPCode") or 200
        if related_code >= 400:
            raise_for_status(related_code, error_message(data, related_code), data, method_name)

        return data

    def _handle_error_response(self, response: httpx.Response, method_name: str) -> None:
        """Handle error responses from the API."""
        try:
            error_data = response.json()
            message = error_message(error_data, response.status_code)
        except ValueError:
            message = f"API request failed with status {response.status_code}"
            error_data = None

        raise_for_status(response.status_code, message, error_data, method_name)


def expand_path(url_template: str, path_params: dict[str, Any]) -> str:
    """Fill in a URL template, percent-encoding each value as one path segment."""
    return url_template.format_map({key: quote(str(value), safe="") for key, value in path_params.items()})


def error_message(error_data: Any, status_code: int) -> str:
    if isinstance(error_data, dict):
        message = error_data.get("exceptionErrorMessage") or error_data.get("detail")
        if message:
            return str(message)
    return f"API request failed with status {status_code}"


def raise_for_status(status_code: int, message: str, error_data: dict | None, method_name: str) -> None:
    """Raise the SDK exception matching a failed status code."""
    logger.warning(f"{method_name} failed with status {status_code}: {message}")

    if status_code in (401, 403):
        raise DMNotAuthorizedError(message, status_code, error_data)
    elif status_code == 404:
        raise DMNotFoundError(message, status_code, error_data)
    else:
        raise DMPropertyServerError(message, status_code, error_data)
