"""Domain errors package.

Usage:
    from src.domain.errors import CatalogServiceError, PreviewDataError
"""

from src.domain.errors.catalog_error import (
    CatalogAuthenticationError,
    CatalogInvalidResponseError,
    CatalogNotFoundError,
    CatalogRateLimitError,
    CatalogServiceError,
    CatalogUnavailableError,
    malformed_payload_error,
)
from src.domain.errors.preview_error import PreviewDataError

__all__ = [
    "CatalogAuthenticationError",
    "CatalogInvalidResponseError",
    "CatalogNotFoundError",
    "CatalogRateLimitError",
    "CatalogServiceError",
    "CatalogUnavailableError",
    "PreviewDataError",
    "malformed_payload_error",
]
