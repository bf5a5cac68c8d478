"""Preview API client.

HTTP client for the table preview endpoint. The preview backend runs a small
sampling query against the source database, which can fail for reasons like
missing permissions. In that case it still answers with a ``previewData``
body; the base client keeps that body on the error as ``response_data``.

Endpoints:
    POST / - Fetch sample rows ({previewData})
"""

from src.core.constants import CATALOG_TIMEOUT_DEFAULT
from src.core.result import Result
from src.domain.errors import CatalogServiceError
from src.domain.protocols.catalog_api_protocol import CatalogResponse
from src.domain.value_objects.preview_query_params import PreviewQueryParams
from src.infrastructure.catalog.base_api_client import BaseCatalogAPIClient


class PreviewAPI(BaseCatalogAPIClient):
    """HTTP client for the table preview API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = CATALOG_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize Preview API client.

        Args:
            base_url: Preview API base URL including its route prefix.
            timeout: HTTP request timeout in seconds.
        """
        super().__init__(
            base_url=base_url,
            service_name="preview",
            timeout=timeout,
        )

    async def get_preview_data(
        self, query_params: PreviewQueryParams
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Request sample rows for a table.

        Args:
            query_params: Table to preview.

        Returns:
            Success(CatalogResponse): ``{previewData, msg}`` envelope.
            Failure(CatalogServiceError): With ``response_data`` set when the
                error response had a JSON body.
        """
        # Route is registered with a trailing slash.
        return await self._execute_and_parse_object(
            method="POST",
            path="/",
            json_data=query_params.to_payload(),
            operation="get_preview_data",
        )
