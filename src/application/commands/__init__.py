"""Commands - Write operations that change catalog metadata."""

from src.application.commands.table_commands import (
    UpdateColumnDescription,
    UpdateTableDescription,
    UpdateTableOwners,
)

__all__ = [
    "UpdateColumnDescription",
    "UpdateTableDescription",
    "UpdateTableOwners",
]
