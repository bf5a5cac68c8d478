"""Catalog DTOs (Data Transfer Objects).

Result dataclasses returned by catalog query and command handlers and merged
into UI state by the caller.

DTOs:
    - TableDataResult: Result from GetTableData query
    - OwnerUpdateResult: Outcome of one owner update chain
    - PreviewDataResult: Result from GetPreviewData query
"""

from dataclasses import dataclass, field

from src.domain.entities.catalog_user import CatalogUser
from src.domain.entities.preview_data import PreviewData
from src.domain.entities.table_metadata import TableMetadata
from src.domain.entities.table_tag import TableTag
from src.domain.enums.update_method import UpdateMethod


@dataclass
class TableDataResult:
    """Table page data.

    Attributes:
        data: Table view-model with related dashboards attached.
        owners: Table owners keyed by user id.
        tags: Table tags.
        status_code: HTTP status of the table metadata response.
    """

    data: TableMetadata
    owners: dict[str, CatalogUser] = field(default_factory=dict)
    tags: list[TableTag] = field(default_factory=list)
    status_code: int = 200


@dataclass
class OwnerUpdateResult:
    """Outcome of one owner update chain.

    Attributes:
        owner_id: Owner that was added or removed.
        method: PUT (added) or DELETE (removed).
        notified: Whether a notification e-mail was requested.
    """

    owner_id: str
    method: UpdateMethod
    notified: bool


@dataclass
class PreviewDataResult:
    """Preview grid and the HTTP status it came with.

    Attributes:
        data: Preview grid.
        status: HTTP status code of the preview response.
    """

    data: PreviewData
    status: int
