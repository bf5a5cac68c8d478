"""UpdateColumnDescription command handler."""

from src.application.commands.table_commands import UpdateColumnDescription
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols.catalog_api_protocol import MetadataAPIProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class UpdateColumnDescriptionHandler:
    """Handler for UpdateColumnDescription command.

    Resolves the column name from the loaded table, then sends the
    description with ``source="user"``.
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
        self, command: UpdateColumnDescription
    ) -> Result[None, DomainError]:
        """Handle UpdateColumnDescription command.

        Returns:
            Success(None): Description stored.
            Failure(ValidationError): Column index is out of range.
            Failure(CatalogServiceError): Request failed.
        """
        table = command.table
        if not table.has_column(command.column_index):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.COLUMN_NOT_FOUND,
                    message=f"Table {table.key} has no column at index {command.column_index}",
                    field="column_index",
                )
            )

        column_name = table.columns[command.column_index].name
        result = await self._metadata_api.put_column_description(
            table.key, column_name, command.description
        )
        if isinstance(result, Failure):
            return result

        self._logger.info(
            "column_description_updated",
            table_key=table.key,
            column_name=column_name,
        )
        return Success(value=None)
