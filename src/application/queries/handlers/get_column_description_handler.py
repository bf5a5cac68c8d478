"""GetColumnDescription query handler.

Re-reads the description of one column of a loaded table and returns the
table with that column's description replaced.
"""

from src.application.queries.table_queries import GetColumnDescription
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.table_metadata import TableMetadata
from src.domain.protocols.catalog_api_protocol import MetadataAPIProtocol


class GetColumnDescriptionHandler:
    """Handler for GetColumnDescription query."""

    def __init__(self, metadata_api: MetadataAPIProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            metadata_api: Metadata API client.
        """
        self._metadata_api = metadata_api

    async def handle(
        self, query: GetColumnDescription
    ) -> Result[TableMetadata, DomainError]:
        """Handle GetColumnDescription query.

        Returns:
            Success(TableMetadata): Copy of ``query.table`` with the column's
                current description.
            Failure(ValidationError): Column index is out of range (no request
                is made).
            Failure(CatalogServiceError): Request failed.
        """
        table = query.table
        if not table.has_column(query.column_index):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.COLUMN_NOT_FOUND,
                    message=f"Table {table.key} has no column at index {query.column_index}",
                    field="column_index",
                )
            )

        column_name = table.columns[query.column_index].name
        result = await self._metadata_api.get_column_description(table.key, column_name)
        if isinstance(result, Failure):
            return result

        description = result.value.data.get("description") or ""
        return Success(
            value=table.with_column_description(query.column_index, description)
        )
