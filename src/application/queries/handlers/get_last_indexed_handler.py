"""GetLastIndexed query handler."""

from src.application.queries.table_queries import GetLastIndexed
from src.core.result import Failure, Result, Success
from src.domain.errors import CatalogServiceError, malformed_payload_error
from src.domain.protocols.catalog_api_protocol import MetadataAPIProtocol


class GetLastIndexedHandler:
    """Handler for GetLastIndexed query.

    Returns the ``timestamp`` the metadata service reports for the last
    search index rebuild, unchanged (epoch seconds).
    """

    def __init__(self, metadata_api: MetadataAPIProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            metadata_api: Metadata API client.
        """
        self._metadata_api = metadata_api

    async def handle(
        self, query: GetLastIndexed
    ) -> Result[int | str, CatalogServiceError]:
        """Handle GetLastIndexed query.

        Returns:
            Success(timestamp): Last index time as reported by the service.
            Failure(CatalogServiceError): Request failed or had no timestamp.
        """
        result = await self._metadata_api.get_last_indexed()
        if isinstance(result, Failure):
            return result

        timestamp = result.value.data.get("timestamp")
        if timestamp is None:
            return Failure(
                error=malformed_payload_error(
                    service_name="metadata",
                    operation="get_last_indexed",
                    status_code=result.value.status_code,
                )
            )
        return Success(value=timestamp)
