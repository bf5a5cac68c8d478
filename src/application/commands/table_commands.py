"""Table commands (CQRS write operations).

Commands represent a user's intent to change catalog metadata. They are
immutable value objects; handlers send them to the metadata service.
"""

from dataclasses import dataclass

from src.domain.entities.table_metadata import TableMetadata
from src.domain.value_objects.update_owner_payload import UpdateOwnerPayload


@dataclass(frozen=True, kw_only=True)
class UpdateTableDescription:
    """Store a new table description.

    Attributes:
        description: New description text.
        table: Table being edited.
    """

    description: str
    table: TableMetadata


@dataclass(frozen=True, kw_only=True)
class UpdateColumnDescription:
    """Store a new column description.

    Attributes:
        description: New description text.
        column_index: Index into ``table.columns``.
        table: Table being edited.
    """

    description: str
    column_index: int
    table: TableMetadata


@dataclass(frozen=True, kw_only=True)
class UpdateTableOwners:
    """Add and/or remove table owners, notifying each affected user.

    Attributes:
        updates: Owner changes, applied independently of each other.
        table: Table whose owners change.
    """

    updates: tuple[UpdateOwnerPayload, ...]
    table: TableMetadata
