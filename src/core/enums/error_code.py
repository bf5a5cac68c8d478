"""Error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError subclasses returned in Failure results.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    COLUMN_NOT_FOUND = "column_not_found"

    # Catalog service errors
    CATALOG_UNAVAILABLE = "catalog_unavailable"
    CATALOG_AUTHENTICATION_FAILED = "catalog_authentication_failed"
    CATALOG_RATE_LIMITED = "catalog_rate_limited"
    CATALOG_RESOURCE_NOT_FOUND = "catalog_resource_not_found"
    CATALOG_INVALID_RESPONSE = "catalog_invalid_response"

    # Preview errors
    PREVIEW_FAILED = "preview_failed"
