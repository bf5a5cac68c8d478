"""Catalog user mapper.

Converts user JSON (owners in ``tableData.owners`` and the ``user`` envelope
of the user endpoint) to CatalogUser.

User JSON Structure:
    {
        "user_id": "jdoe",
        "display_name": "Jane Doe",
        "email": "jdoe@example.com",
        "is_active": true,
        "profile_url": "https://people.example.com/jdoe",
        "first_name": "Jane",
        "last_name": "Doe",
        "team_name": "Data Platform"
    }
"""

from typing import Any

import structlog

from src.domain.entities.catalog_user import CatalogUser

logger = structlog.get_logger(__name__)


class UserMapper:
    """Mapper for converting catalog user JSON to CatalogUser.

    Owners embedded in table metadata often carry only ``display_name``,
    ``email`` and ``profile_url``; the user id then falls back to the e-mail.

    Thread-safe: No mutable state, can be shared across requests.
    """

    def map_user(self, data: dict[str, Any]) -> CatalogUser | None:
        """Map user JSON to CatalogUser.

        Args:
            data: User object from a catalog response.

        Returns:
            CatalogUser if mapping succeeds, None if data is invalid or
            carries no identifier at all.
        """
        try:
            return self._map_user_internal(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(
                "catalog_user_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_user_internal(self, data: dict[str, Any]) -> CatalogUser | None:
        """Internal mapping logic.

        Raises exceptions on invalid data (caught by map_user).
        """
        user_id = data.get("user_id") or data.get("email") or data.get("display_name")
        if not user_id:
            logger.debug("catalog_user_missing_identifier")
            return None

        return CatalogUser(
            user_id=str(user_id),
            display_name=data.get("display_name") or "",
            email=data.get("email") or "",
            is_active=bool(data.get("is_active", True)),
            profile_url=data.get("profile_url") or "",
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            team_name=data.get("team_name") or "",
        )
