"""GetPreviewData query handler.

Fetches sample rows for a table. Unlike the other catalog reads, a failed
preview is not a bare error: the preview backend usually explains the failure
in a ``previewData.error_text`` field of the error response. The handler
extracts that partial preview so the UI can display it, and falls back to an
empty preview and a None status when no response arrived at all.
"""

from src.application.dtos.catalog_dtos import PreviewDataResult
from src.application.queries.table_queries import GetPreviewData
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.preview_data import PreviewData
from src.domain.errors import CatalogServiceError, PreviewDataError
from src.domain.protocols.catalog_api_protocol import PreviewAPIProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.catalog.mappers.preview_mapper import PreviewMapper


class GetPreviewDataHandler:
    """Handler for GetPreviewData query.

    Dependencies (injected via constructor):
        - PreviewAPIProtocol: Preview API client
        - PreviewMapper: previewData JSON to view-model mapper
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        preview_api: PreviewAPIProtocol,
        preview_mapper: PreviewMapper,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            preview_api: Preview API client.
            preview_mapper: Mapper for preview payloads.
            logger: Logger protocol implementation from container.
        """
        self._preview_api = preview_api
        self._mapper = preview_mapper
        self._logger = logger

    async def handle(
        self, query: GetPreviewData
    ) -> Result[PreviewDataResult, PreviewDataError]:
        """Handle GetPreviewData query.

        Returns:
            Success(PreviewDataResult): Preview grid and HTTP status.
            Failure(PreviewDataError): Partial preview (or empty) and HTTP
                status (or None when the request never got a response).
        """
        result = await self._preview_api.get_preview_data(query.query_params)

        if isinstance(result, Failure):
            return Failure(error=self._to_preview_error(result.error))

        response = result.value
        return Success(
            value=PreviewDataResult(
                data=self._mapper.map_preview_data(response.data.get("previewData")),
                status=response.status_code,
            )
        )

    def _to_preview_error(self, error: CatalogServiceError) -> PreviewDataError:
        """Extract the partial preview carried by a failed response."""
        data = PreviewData()
        if error.response_data and error.response_data.get("previewData"):
            data = self._mapper.map_preview_data(error.response_data["previewData"])

        self._logger.warning(
            "preview_data_fetch_failed",
            status_code=error.status_code,
            error_code=error.code.value,
            error_text=data.error_text,
        )
        return PreviewDataError(
            code=ErrorCode.PREVIEW_FAILED,
            message=data.error_text or error.message,
            data=data,
            status=error.status_code,
        )
