"""Domain enums.

Available Enums:
    - UpdateMethod: Add (PUT) or remove (DELETE) a table owner
    - NotificationType: Owner notification kinds sent through the mail API
"""

from src.domain.enums.notification_type import NotificationType
from src.domain.enums.update_method import UpdateMethod

__all__ = [
    "NotificationType",
    "UpdateMethod",
]
