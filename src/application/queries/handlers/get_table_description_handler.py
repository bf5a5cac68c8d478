"""GetTableDescription query handler.

Re-reads the description of a loaded table, e.g. after another user edited
it, and returns the table with the fresh description.
"""

from src.application.queries.table_queries import GetTableDescription
from src.core.result import Failure, Result, Success
from src.domain.entities.table_metadata import TableMetadata
from src.domain.errors import CatalogServiceError
from src.domain.protocols.catalog_api_protocol import MetadataAPIProtocol


class GetTableDescriptionHandler:
    """Handler for GetTableDescription query."""

    def __init__(self, metadata_api: MetadataAPIProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            metadata_api: Metadata API client.
        """
        self._metadata_api = metadata_api

    async def handle(
        self, query: GetTableDescription
    ) -> Result[TableMetadata, CatalogServiceError]:
        """Handle GetTableDescription query.

        Returns:
            Success(TableMetadata): Copy of ``query.table`` with the current
                description.
            Failure(CatalogServiceError): Request failed.
        """
        result = await self._metadata_api.get_table_description(query.table.key)
        if isinstance(result, Failure):
            return result

        description = result.value.data.get("description") or ""
        return Success(value=query.table.with_description(description))
