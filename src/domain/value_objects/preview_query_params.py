"""Preview query parameters value object.

Identifies the table whose sample rows should be fetched from the preview
backend. The preview API expects camelCase ``tableName`` on the wire.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class PreviewQueryParams:
    """Which table to preview.

    Attributes:
        database: Database (source type) name, e.g. "hive".
        schema: Schema name.
        table_name: Table name.
        cluster: Cluster name (optional, sent only when set).

    Raises:
        ValueError: If database, schema or table_name is empty.

    Example:
        >>> params = PreviewQueryParams(database="hive", schema="core", table_name="rides")
        >>> params.to_payload()
        {'database': 'hive', 'schema': 'core', 'tableName': 'rides'}
    """

    database: str
    schema: str
    table_name: str
    cluster: str | None = None

    def __post_init__(self) -> None:
        """Validate that the table is fully identified."""
        for field_name in ("database", "schema", "table_name"):
            if not getattr(self, field_name):
                raise ValueError(f"Preview query requires {field_name}")

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for the preview API."""
        payload: dict[str, Any] = {
            "database": self.database,
            "schema": self.schema,
            "tableName": self.table_name,
        }
        if self.cluster is not None:
            payload["cluster"] = self.cluster
        return payload
