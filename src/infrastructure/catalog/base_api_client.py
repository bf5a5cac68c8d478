"""Base API client for catalog HTTP communication.

This module provides a base class for catalog API clients that handles:
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing with error handling
- Structured logging with service context

Subclasses only need to:
1. Know their route prefix
2. Call the base methods for HTTP operations

Architecture:
    - Infrastructure layer (adapter for the catalog REST contract)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for expected failures)
"""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

import httpx
import structlog

from src.core.constants import CATALOG_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import (
    CatalogAuthenticationError,
    CatalogInvalidResponseError,
    CatalogNotFoundError,
    CatalogRateLimitError,
    CatalogServiceError,
    CatalogUnavailableError,
)
from src.domain.protocols.catalog_api_protocol import CatalogResponse


class BaseCatalogAPIClient:
    """Base class for catalog API clients with shared HTTP handling.

    Provides common functionality for HTTP communication with the catalog:
    - Request execution with timeout/connection error handling
    - Response status code interpretation (401, 403, 404, 429, 5xx)
    - JSON object parsing with type validation
    - Structured logging with service context

    Every request opens its own httpx.AsyncClient, so instances hold no
    connection state and can be shared.

    Attributes:
        _base_url: Catalog base URL joined with the service prefix.
        _service_name: Service identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger with service context.

    Example:
        >>> class MailAPI(BaseCatalogAPIClient):
        ...     def __init__(self, *, base_url: str, timeout: float = 30.0):
        ...         super().__init__(
        ...             base_url=base_url,
        ...             service_name="mail",
        ...             timeout=timeout,
        ...         )
        ...
        ...     async def send_notification(self, notification):
        ...         return await self._execute_and_parse_object(
        ...             method="POST",
        ...             path="/notification",
        ...             json_data=notification,
        ...             operation="send_notification",
        ...         )
    """

    def __init__(
        self,
        *,
        base_url: str,
        service_name: str,
        timeout: float = CATALOG_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize base catalog API client.

        Args:
            base_url: Service base URL (e.g., "http://localhost:5000/api/metadata/v0").
            service_name: Service identifier (e.g., "metadata", "mail").
            timeout: HTTP request timeout in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._service_name = service_name
        self._timeout = timeout
        self._logger = structlog.get_logger(f"{service_name}_api")

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, CatalogServiceError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, PUT, DELETE, POST).
            path: URL path relative to base_url.
            params: Optional query parameters.
            json_data: Optional JSON body for PUT/DELETE/POST requests.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response on success.
            Failure(CatalogUnavailableError): On timeout or connection error.
        """
        url = f"{self._base_url}{path}"

        self._logger.debug(
            f"{self._service_name}_api_request_started",
            operation=operation,
            method=method,
            path=path,
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers={"Accept": "application/json"},
                    params=params,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._service_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=CatalogUnavailableError(
                    code=ErrorCode.CATALOG_UNAVAILABLE,
                    message=f"{self._service_name.title()} API request timed out",
                    service_name=self._service_name,
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._service_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=CatalogUnavailableError(
                    code=ErrorCode.CATALOG_UNAVAILABLE,
                    message=f"Failed to connect to {self._service_name.title()} API: {e}",
                    service_name=self._service_name,
                    is_transient=True,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[CatalogServiceError] | None:
        """Check HTTP response for errors and return appropriate error.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(CatalogServiceError) if error detected, None if response is OK.
        """
        status = response.status_code

        # Success - no error
        if 200 <= status < 300:
            return None

        body = response.text[:RESPONSE_BODY_MAX_LENGTH]
        error_data = self._error_body(response)

        # Rate limiting (429)
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = parse_retry_after(retry_after)
            self._logger.warning(
                f"{self._service_name}_api_rate_limited",
                operation=operation,
                retry_after=retry_seconds,
            )
            return Failure(
                error=CatalogRateLimitError(
                    code=ErrorCode.CATALOG_RATE_LIMITED,
                    message=f"{self._service_name.title()} API rate limit exceeded",
                    service_name=self._service_name,
                    status_code=status,
                    response_body=body,
                    response_data=error_data,
                    retry_after=retry_seconds,
                )
            )

        # Authentication errors (401/403)
        if status in (401, 403):
            self._logger.warning(
                f"{self._service_name}_api_auth_failed",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=CatalogAuthenticationError(
                    code=ErrorCode.CATALOG_AUTHENTICATION_FAILED,
                    message=f"Access denied by {self._service_name.title()} API",
                    service_name=self._service_name,
                    status_code=status,
                    response_body=body,
                    response_data=error_data,
                )
            )

        # Not found (404)
        if status == 404:
            self._logger.warning(
                f"{self._service_name}_api_not_found",
                operation=operation,
            )
            return Failure(
                error=CatalogNotFoundError(
                    code=ErrorCode.CATALOG_RESOURCE_NOT_FOUND,
                    message=f"{self._service_name.title()} resource not found",
                    service_name=self._service_name,
                    status_code=status,
                    response_body=body,
                    response_data=error_data,
                )
            )

        # Server errors (5xx)
        if status >= 500:
            self._logger.warning(
                f"{self._service_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=CatalogUnavailableError(
                    code=ErrorCode.CATALOG_UNAVAILABLE,
                    message=f"{self._service_name.title()} API server error: {status}",
                    service_name=self._service_name,
                    status_code=status,
                    response_body=body,
                    response_data=error_data,
                    is_transient=True,
                )
            )

        # Unexpected status
        self._logger.warning(
            f"{self._service_name}_api_unexpected_status",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=CatalogInvalidResponseError(
                code=ErrorCode.CATALOG_INVALID_RESPONSE,
                message=f"Unexpected response from {self._service_name.title()} API: {status}",
                service_name=self._service_name,
                status_code=status,
                response_body=body,
                response_data=error_data,
            )
        )

    def _error_body(self, response: httpx.Response) -> dict[str, Any] | None:
        """Parse an error response body, if it is a JSON object."""
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    def _parse_json_object(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Parse response as JSON object with error handling.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(CatalogResponse): Parsed JSON object and status code.
            Failure(CatalogServiceError): On HTTP error or invalid JSON.
        """
        # Check for HTTP errors first
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        # Parse JSON
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"{self._service_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=CatalogInvalidResponseError(
                    code=ErrorCode.CATALOG_INVALID_RESPONSE,
                    message=f"Invalid JSON response from {self._service_name.title()} API",
                    service_name=self._service_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        # Validate type
        if not isinstance(data, dict):
            self._logger.warning(
                f"{self._service_name}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=CatalogInvalidResponseError(
                    code=ErrorCode.CATALOG_INVALID_RESPONSE,
                    message=f"Expected object response from {self._service_name.title()} API",
                    service_name=self._service_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.debug(
            f"{self._service_name}_api_succeeded",
            operation=operation,
            status_code=response.status_code,
        )
        return Success(value=CatalogResponse(data=data, status_code=response.status_code))

    async def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Execute request and parse response as JSON object.

        Combines _execute_request and _parse_json_object for convenience.

        Args:
            method: HTTP method (GET, PUT, DELETE, POST).
            path: URL path relative to base_url.
            params: Optional query parameters.
            json_data: Optional JSON body.
            operation: Operation name for logging.

        Returns:
            Success(CatalogResponse): Parsed JSON object.
            Failure(CatalogServiceError): On any error.
        """
        result = await self._execute_request(
            method=method,
            path=path,
            params=params,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, operation)


def parse_retry_after(value: str | None) -> int | None:
    """Convert a Retry-After header to seconds.

    The header is either delay-seconds or an HTTP-date. Dates in the past
    give 0; anything unparseable gives None.

    Args:
        value: Raw header value, if present.

    Returns:
        Seconds to wait, or None when unknown.
    """
    if not value:
        return None

    value = value.strip()
    if value.isdigit():
        return int(value)

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=UTC)

    return max(0, int((retry_at - datetime.now(UTC)).total_seconds()))
