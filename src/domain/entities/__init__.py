"""Domain entities (client-side view-models).

These are transient: built from one HTTP response and handed to the UI state
layer. None of them has a lifecycle beyond a single request.
"""

from src.domain.entities.catalog_user import CatalogUser
from src.domain.entities.dashboard_summary import DashboardSummary
from src.domain.entities.preview_data import PreviewColumn, PreviewData
from src.domain.entities.table_metadata import TableColumn, TableMetadata
from src.domain.entities.table_tag import TableTag

__all__ = [
    "CatalogUser",
    "DashboardSummary",
    "PreviewColumn",
    "PreviewData",
    "TableColumn",
    "TableMetadata",
    "TableTag",
]
