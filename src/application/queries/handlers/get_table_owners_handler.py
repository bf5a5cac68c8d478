"""GetTableOwners query handler.

Re-reads a table's owners, typically after owner updates completed. The
owners come from the table metadata endpoint; nothing else in the payload
is used.
"""

from src.application.queries.table_queries import GetTableOwners
from src.core.result import Failure, Result, Success
from src.domain.entities.catalog_user import CatalogUser
from src.domain.errors import CatalogServiceError
from src.domain.protocols.catalog_api_protocol import MetadataAPIProtocol
from src.infrastructure.catalog.mappers.table_mapper import TableMapper


class GetTableOwnersHandler:
    """Handler for GetTableOwners query."""

    def __init__(
        self,
        metadata_api: MetadataAPIProtocol,
        table_mapper: TableMapper,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            metadata_api: Metadata API client.
            table_mapper: Mapper for table payloads.
        """
        self._metadata_api = metadata_api
        self._mapper = table_mapper

    async def handle(
        self, query: GetTableOwners
    ) -> Result[dict[str, CatalogUser], CatalogServiceError]:
        """Handle GetTableOwners query.

        Returns:
            Success(dict): Owners keyed by user id.
            Failure(CatalogServiceError): Request failed.
        """
        result = await self._metadata_api.get_table(query.table_key)
        if isinstance(result, Failure):
            return result

        return Success(value=self._mapper.map_owners(result.value.data))
