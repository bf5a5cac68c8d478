"""Table queries (CQRS read operations).

Queries represent requests for catalog data. They are immutable dataclasses
with question-like names. Queries NEVER change state.
"""

from dataclasses import dataclass

from src.domain.entities.table_metadata import TableMetadata
from src.domain.value_objects.preview_query_params import PreviewQueryParams


@dataclass(frozen=True, kw_only=True)
class GetTableData:
    """Get everything a table page shows.

    Attributes:
        table_key: Table key.
        index: Search result index the user clicked, if any.
        source: Page the user navigated from, if any.

    Example:
        >>> query = GetTableData(table_key="hive://gold.core/rides", source="search")
        >>> result = await handler.handle(query)
    """

    table_key: str
    index: str | None = None
    source: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetTableDescription:
    """Refresh the description of a loaded table.

    Attributes:
        table: Table view-model to refresh.
    """

    table: TableMetadata


@dataclass(frozen=True, kw_only=True)
class GetTableOwners:
    """Get the current owners of a table.

    Attributes:
        table_key: Table key.
    """

    table_key: str


@dataclass(frozen=True, kw_only=True)
class GetColumnDescription:
    """Refresh the description of one column of a loaded table.

    Attributes:
        column_index: Index into ``table.columns``.
        table: Table view-model to refresh.
    """

    column_index: int
    table: TableMetadata


@dataclass(frozen=True, kw_only=True)
class GetLastIndexed:
    """Get when the search index was last rebuilt."""


@dataclass(frozen=True, kw_only=True)
class GetPreviewData:
    """Get sample rows of a table.

    Attributes:
        query_params: Table to preview.
    """

    query_params: PreviewQueryParams
