"""Table metadata view-models.

TableMetadata is the client-side shape of a catalog table page: identity
(key, cluster, database, schema, name), descriptions, columns and the related
dashboards fetched alongside it. Owners and tags travel separately (see
TableDataResult) so the UI can update them independently.

Table keys follow the catalog convention ``database://cluster.schema/table``,
e.g. ``hive://gold.core/fact_rides``.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from src.domain.entities.dashboard_summary import DashboardSummary


@dataclass(frozen=True, kw_only=True)
class TableColumn:
    """Single table column.

    Attributes:
        name: Column name.
        description: Column description (may be empty).
        col_type: Column type as reported by the source (e.g. "bigint").
        sort_order: Position of the column in the table.
        is_editable: Whether the description may be edited from the UI.
        stats: Column statistics entries as returned by the service.
    """

    name: str
    description: str = ""
    col_type: str = ""
    sort_order: int = 0
    is_editable: bool = True
    stats: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class TableMetadata:
    """Table metadata view-model.

    Attributes:
        key: Table key (``database://cluster.schema/table``).
        cluster: Cluster name.
        database: Database (source type) name.
        schema: Schema name.
        name: Table name.
        description: Table description.
        columns: Columns in sort order as returned by the service.
        is_editable: Whether descriptions may be edited from the UI.
        is_view: Whether the table is a view.
        last_updated_timestamp: Epoch seconds of the last data update.
        badges: Badge entries.
        table_readers: Frequent reader entries.
        table_writer: Application that writes the table.
        source: Source-code location of the table definition.
        watermarks: Partition watermark entries.
        programmatic_descriptions: Descriptions produced by tooling.
        dashboards: Dashboards that use this table.
        extra: Any other fields returned by the service, kept verbatim.
    """

    key: str
    cluster: str = ""
    database: str = ""
    schema: str = ""
    name: str = ""
    description: str = ""
    columns: list[TableColumn] = field(default_factory=list)
    is_editable: bool = True
    is_view: bool = False
    last_updated_timestamp: int | None = None
    badges: list[dict[str, Any]] = field(default_factory=list)
    table_readers: list[dict[str, Any]] = field(default_factory=list)
    table_writer: dict[str, Any] | None = None
    source: dict[str, Any] | None = None
    watermarks: list[dict[str, Any]] = field(default_factory=list)
    programmatic_descriptions: Any = None
    dashboards: list[DashboardSummary] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def has_column(self, column_index: int) -> bool:
        """Check whether a column index addresses an existing column."""
        return 0 <= column_index < len(self.columns)

    def with_description(self, description: str) -> "TableMetadata":
        """Return a copy with the table description replaced."""
        return replace(self, description=description)

    def with_column_description(
        self, column_index: int, description: str
    ) -> "TableMetadata":
        """Return a copy with one column's description replaced.

        Args:
            column_index: Index into ``columns``.
            description: New description for that column.

        Raises:
            IndexError: If column_index is out of range.
        """
        columns = list(self.columns)
        columns[column_index] = replace(columns[column_index], description=description)
        return replace(self, columns=columns)
