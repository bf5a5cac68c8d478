"""Catalog service error types.

Returned (inside Failure) by the catalog HTTP clients when a request to the
metadata, mail or preview API does not produce a usable response. Each error
keeps the transport facts (service, HTTP status, truncated body) so callers
can surface or log the original failure.

Usage:
    from src.domain.errors import CatalogServiceError, CatalogNotFoundError

    match await api.get_table(key):
        case Failure(error=CatalogNotFoundError()):
            show_missing_table()
        case Failure(error=error):
            show_error(error.message)
"""

from dataclasses import dataclass
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogServiceError(DomainError):
    """Base catalog API error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        service_name: Which API failed ("metadata", "mail", "preview").
        status_code: HTTP status code, None when no response was received.
        response_body: Truncated raw response body for debugging.
        response_data: Parsed JSON body of an error response, when it had one.
    """

    service_name: str
    status_code: int | None = None
    response_body: str | None = None
    response_data: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogUnavailableError(CatalogServiceError):
    """Catalog API is unreachable or failing.

    Raised when:
    - Connection timeout occurs
    - Connection is refused or DNS resolution fails
    - API returns 5xx errors

    Attributes:
        is_transient: Whether the failure is likely transient.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogAuthenticationError(CatalogServiceError):
    """Catalog rejected the caller (401/403)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogNotFoundError(CatalogServiceError):
    """Requested table, column or user does not exist (404)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogRateLimitError(CatalogServiceError):
    """Catalog returned 429 Too Many Requests.

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header).
    """

    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogInvalidResponseError(CatalogServiceError):
    """Catalog returned an unexpected status or a malformed payload.

    Raised when:
    - Response JSON is malformed
    - Required fields are missing
    - Status code is not one the client knows how to interpret
    """

    pass


def malformed_payload_error(
    *,
    service_name: str,
    operation: str,
    status_code: int | None = None,
) -> CatalogInvalidResponseError:
    """Build the error for a 2xx response whose body cannot be mapped.

    Args:
        service_name: Service that produced the payload.
        operation: Operation whose payload was rejected.
        status_code: HTTP status of the response.
    """
    return CatalogInvalidResponseError(
        code=ErrorCode.CATALOG_INVALID_RESPONSE,
        message=f"Malformed {operation} payload from {service_name.title()} API",
        service_name=service_name,
        status_code=status_code,
        details={"operation": operation},
    )
