"""Queries - Read operations that fetch catalog data.

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.table_queries import (
    GetColumnDescription,
    GetLastIndexed,
    GetPreviewData,
    GetTableData,
    GetTableDescription,
    GetTableOwners,
)

__all__ = [
    "GetColumnDescription",
    "GetLastIndexed",
    "GetPreviewData",
    "GetTableData",
    "GetTableDescription",
    "GetTableOwners",
]
