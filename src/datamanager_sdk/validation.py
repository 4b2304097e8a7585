"""Parameter validation applied before any request is sent."""

from __future__ import annotations

import re
from typing import Any

from datamanager_sdk.exceptions import DMInvalidParameterError


class InvalidParameterHandler:
    """Precondition checks shared by every resource operation.

    Each check raises DMInvalidParameterError naming the offending parameter
    and the calling operation.
    """

    def __init__(self, max_page_size: int = 1000):
        self.max_page_size = max_page_size

    def validate_user_id(self, user_id: str | None, method_name: str) -> None:
        if not user_id:
            raise DMInvalidParameterError(
                f"No user id supplied on {method_name}",
                parameter_name="user_id",
                method_name=method_name,
            )

    def validate_guid(self, guid: str | None, parameter_name: str, method_name: str) -> None:
        if not guid:
            raise DMInvalidParameterError(
                f"Null or empty unique identifier {parameter_name} supplied on {method_name}",
                parameter_name=parameter_name,
                method_name=method_name,
            )

    def validate_name(self, name: str | None, parameter_name: str, method_name: str) -> None:
        if not name:
            raise DMInvalidParameterError(
                f"Null or empty name {parameter_name} supplied on {method_name}",
                parameter_name=parameter_name,
                method_name=method_name,
            )

    def validate_search_string(self, search_string: str | None, parameter_name: str, method_name: str) -> None:
        """Check the search string is present and compiles as a regular expression."""
        if not search_string:
            raise DMInvalidParameterError(
                f"Null or empty search string {parameter_name} supplied on {method_name}",
                parameter_name=parameter_name,
                method_name=method_name,
            )
        try:
            re.compile(search_string)
        except re.error as e:
            raise DMInvalidParameterError(
                f"Search string {parameter_name} on {method_name} is not a valid regular expression: {e}",
                parameter_name=parameter_name,
                method_name=method_name,
            ) from e

    def validate_object(self, value: Any, parameter_name: str, method_name: str) -> None:
        if value is None:
            raise DMInvalidParameterError(
                f"Null object {parameter_name} supplied on {method_name}",
                parameter_name=parameter_name,
                method_name=method_name,
            )

    def validate_paging(self, start_from: int, page_size: int, method_name: str) -> int:
        """Validate paging bounds.

        Returns:
            The page size to send to the server
        """
        if start_from < 0:
            raise DMInvalidParameterError(
                f"Negative start from {start_from} supplied on {method_name}",
                parameter_name="start_from",
                method_name=method_name,
            )
        if page_size <= 0:
            raise DMInvalidParameterError(
                f"Page size must be positive, got {page_size} on {method_name}",
                parameter_name="page_size",
                method_name=method_name,
            )
        if self.max_page_size > 0 and page_size > self.max_page_size:
            raise DMInvalidParameterError(
                f"Page size {page_size} on {method_name} exceeds the maximum of {self.max_page_size}",
                parameter_name="page_size",
                method_name=method_name,
            )
        return page_size
