"""Notification types understood by the catalog mail API."""

from enum import Enum

from src.domain.enums.update_method import UpdateMethod


class NotificationType(str, Enum):
    """Kind of notification e-mail the mail service should send."""

    OWNER_ADDED = "owner_added"
    OWNER_REMOVED = "owner_removed"

    @classmethod
    def for_owner_update(cls, method: UpdateMethod) -> "NotificationType":
        """Pick the notification that matches an owner update.

        Args:
            method: Owner update method.

        Returns:
            OWNER_ADDED for PUT, OWNER_REMOVED otherwise.
        """
        if method == UpdateMethod.PUT:
            return cls.OWNER_ADDED
        return cls.OWNER_REMOVED
