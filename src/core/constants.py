"""Centralized constants for internal implementation details.

These are NOT environment-specific configuration. For settings that vary per
deployment (base URL, timeouts, log level) use `src/core/config.py`.

Categories:
- Timeouts: Default timeouts for catalog HTTP calls
- Response limits: Truncation of raw bodies kept on errors
- Catalog contract: Fixed values the catalog REST contract expects
"""

# =============================================================================
# Timeouts
# =============================================================================

CATALOG_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for catalog API calls in seconds."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum number of characters of a raw response body kept on an error."""


# =============================================================================
# Catalog Contract
# =============================================================================

USER_DESCRIPTION_SOURCE: str = "user"
"""Description source reported when a description is edited from the UI."""

TABLE_DETAIL_PATH_PREFIX: str = "/table_detail"
"""Application route for a table page, used in owner notification links."""
