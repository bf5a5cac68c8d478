"""Owner update method.

The catalog's update_table_owner endpoint adds an owner on PUT and removes one
on DELETE, so the HTTP method itself carries the intent.

Usage:
    from src.domain.enums import UpdateMethod

    update = UpdateOwnerPayload(id="jdoe", method=UpdateMethod.DELETE)
"""

from enum import Enum


class UpdateMethod(str, Enum):
    """HTTP method used for an owner change.

    Inherits from str so the value can be passed straight to httpx.
    """

    PUT = "PUT"
    DELETE = "DELETE"
