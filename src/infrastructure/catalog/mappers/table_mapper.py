"""Table metadata mapper.

Converts the ``{tableData}`` envelope of the table endpoint into the
TableMetadata view-model, the owner dictionary and the tag list. Contains the
knowledge of how the metadata service shapes table JSON.

Table Response Structure:
    {
        "tableData": {
            "key": "hive://gold.core/rides",
            "cluster": "gold",
            "database": "hive",
            "schema": "core",
            "name": "rides",
            "description": "One row per ride",
            "columns": [
                {"name": "ride_id", "description": "", "col_type": "bigint",
                 "sort_order": 0, "is_editable": true, "stats": []}
            ],
            "is_editable": true,
            "is_view": false,
            "owners": [{"user_id": "jdoe", "display_name": "Jane Doe", ...}],
            "tags": [{"tag_name": "core", "tag_count": 12}],
            ...
        },
        "msg": "Success"
    }
"""

from typing import Any

import structlog

from src.domain.entities.catalog_user import CatalogUser
from src.domain.entities.table_metadata import TableColumn, TableMetadata
from src.domain.entities.table_tag import TableTag
from src.infrastructure.catalog.mappers.dashboard_mapper import DashboardMapper
from src.infrastructure.catalog.mappers.user_mapper import UserMapper

logger = structlog.get_logger(__name__)

# Fields returned separately from the table view-model.
_SEPARATED_FIELDS = frozenset({"owners", "tags"})

# Fields mapped onto TableMetadata attributes; everything else goes to extra.
_TABLE_FIELDS = frozenset(
    {
        "key",
        "cluster",
        "database",
        "schema",
        "name",
        "description",
        "columns",
        "is_editable",
        "is_view",
        "last_updated_timestamp",
        "badges",
        "table_readers",
        "table_writer",
        "source",
        "watermarks",
        "programmatic_descriptions",
        "dashboards",
    }
)


class TableMapper:
    """Mapper for converting table metadata JSON to view-models.

    This mapper handles:
    - Stripping owners and tags from the table payload
    - Attaching related dashboards to the table
    - Keeping unknown fields verbatim in ``extra``
    - Building the owner dictionary keyed by user id

    Thread-safe: No mutable state, can be shared across requests.

    Example:
        >>> mapper = TableMapper()
        >>> table = mapper.map_table(table_response, dashboards_response)
        >>> owners = mapper.map_owners(table_response)
    """

    def __init__(
        self,
        *,
        user_mapper: UserMapper | None = None,
        dashboard_mapper: DashboardMapper | None = None,
    ) -> None:
        """Initialize mapper.

        Args:
            user_mapper: Mapper for owner entries.
            dashboard_mapper: Mapper for related dashboards.
        """
        self._user_mapper = user_mapper or UserMapper()
        self._dashboard_mapper = dashboard_mapper or DashboardMapper()

    def map_table(
        self,
        response_data: dict[str, Any],
        dashboards_data: dict[str, Any] | None = None,
    ) -> TableMetadata | None:
        """Map table and related-dashboard responses to TableMetadata.

        Args:
            response_data: ``{tableData}`` envelope.
            dashboards_data: ``{dashboards}`` envelope, if fetched.

        Returns:
            TableMetadata if mapping succeeds, None if the payload is invalid
            or has no table key.
        """
        try:
            return self._map_table_internal(response_data, dashboards_data or {})
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(
                "table_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_table_internal(
        self,
        response_data: dict[str, Any],
        dashboards_data: dict[str, Any],
    ) -> TableMetadata | None:
        """Internal mapping logic.

        Raises exceptions on invalid data (caught by map_table).
        """
        table_data = response_data["tableData"]
        key = table_data.get("key", "")
        if not key:
            logger.debug("table_missing_key")
            return None

        columns = [self.map_column(column) for column in table_data.get("columns") or []]
        extra = {
            name: value
            for name, value in table_data.items()
            if name not in _TABLE_FIELDS and name not in _SEPARATED_FIELDS
        }
        last_updated = table_data.get("last_updated_timestamp")

        return TableMetadata(
            key=key,
            cluster=table_data.get("cluster") or "",
            database=table_data.get("database") or "",
            schema=table_data.get("schema") or "",
            name=table_data.get("name") or "",
            description=table_data.get("description") or "",
            columns=columns,
            is_editable=bool(table_data.get("is_editable", True)),
            is_view=bool(table_data.get("is_view", False)),
            last_updated_timestamp=int(last_updated) if last_updated else None,
            badges=list(table_data.get("badges") or []),
            table_readers=list(table_data.get("table_readers") or []),
            table_writer=table_data.get("table_writer"),
            source=table_data.get("source"),
            watermarks=list(table_data.get("watermarks") or []),
            programmatic_descriptions=table_data.get("programmatic_descriptions"),
            dashboards=self._dashboard_mapper.map_dashboards(dashboards_data),
            extra=extra,
        )

    def map_column(self, data: dict[str, Any]) -> TableColumn:
        """Map one column JSON object.

        Raises:
            KeyError: If the column has no name.
        """
        return TableColumn(
            name=data["name"],
            description=data.get("description") or "",
            col_type=data.get("col_type") or "",
            sort_order=int(data.get("sort_order") or 0),
            is_editable=bool(data.get("is_editable", True)),
            stats=list(data.get("stats") or []),
        )

    def map_owners(self, response_data: dict[str, Any]) -> dict[str, CatalogUser]:
        """Build the owner dictionary from a ``{tableData}`` envelope.

        Owners are keyed by user id, which is what owner updates address.

        Args:
            response_data: ``{tableData}`` envelope.

        Returns:
            Owners keyed by user id, in response order.
        """
        owners: dict[str, CatalogUser] = {}
        table_data = response_data.get("tableData") or {}
        for entry in table_data.get("owners") or []:
            owner = self._user_mapper.map_user(entry)
            if owner is not None:
                owners[owner.user_id] = owner
        return owners

    def map_tags(self, response_data: dict[str, Any]) -> list[TableTag]:
        """Extract tags from a ``{tableData}`` envelope.

        Tags without a name or with a non-numeric count are skipped.
        """
        table_data = response_data.get("tableData") or {}
        tags: list[TableTag] = []
        for tag in table_data.get("tags") or []:
            if not isinstance(tag, dict) or not tag.get("tag_name"):
                continue
            try:
                tags.append(
                    TableTag(
                        tag_name=tag["tag_name"],
                        tag_count=int(tag.get("tag_count") or 0),
                    )
                )
            except (TypeError, ValueError) as e:
                logger.warning(
                    "tag_mapping_failed",
                    tag_name=tag.get("tag_name"),
                    error=str(e),
                )
        return tags
