"""UpdateTableDescription command handler."""

from src.application.commands.table_commands import UpdateTableDescription
from src.core.result import Failure, Result, Success
from src.domain.errors import CatalogServiceError
from src.domain.protocols.catalog_api_protocol import MetadataAPIProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class UpdateTableDescriptionHandler:
    """Handler for UpdateTableDescription command.

    Sends the description with ``source="user"`` so the metadata service
    records it as a UI edit.
    """

    def __init__(
        self,
        metadata_api: MetadataAPIProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            metadata_api: Metadata API client.
            logger: Logger protocol implementation from container.
        """
        self._metadata_api = metadata_api
        self._logger = logger

    async def handle(
        self, command: UpdateTableDescription
    ) -> Result[None, CatalogServiceError]:
        """Handle UpdateTableDescription command.

        Returns:
            Success(None): Description stored.
            Failure(CatalogServiceError): Request failed.
        """
        result = await self._metadata_api.put_table_description(
            command.table.key, command.description
        )
        if isinstance(result, Failure):
            return result

        self._logger.info("table_description_updated", table_key=command.table.key)
        return Success(value=None)
