"""Owner change notifications.

When an owner is added to or removed from a table, the affected user gets an
e-mail from the catalog mail service. This module builds the notification body
the mail API expects.

Notification Structure:
    {
        "notificationType": "owner_added",
        "options": {
            "resource_name": "core.rides",
            "resource_path": "/table_detail/gold/hive/core/rides"
        },
        "recipients": ["jdoe"]
    }
"""

from typing import Any

from src.core.constants import TABLE_DETAIL_PATH_PREFIX
from src.domain.entities.table_metadata import TableMetadata
from src.domain.enums.notification_type import NotificationType
from src.domain.value_objects.update_owner_payload import UpdateOwnerPayload


def create_owner_notification_data(
    update: UpdateOwnerPayload,
    table: TableMetadata,
) -> dict[str, Any]:
    """Build the mail API body for one owner change.

    Args:
        update: Owner that was added (PUT) or removed (DELETE).
        table: Table whose ownership changed.

    Returns:
        ``{notificationType, options, recipients}`` body.
    """
    return {
        "notificationType": NotificationType.for_owner_update(update.method).value,
        "options": {
            "resource_name": f"{table.schema}.{table.name}",
            "resource_path": (
                f"{TABLE_DETAIL_PATH_PREFIX}/{table.cluster}/{table.database}"
                f"/{table.schema}/{table.name}"
            ),
        },
        "recipients": [update.id],
    }
