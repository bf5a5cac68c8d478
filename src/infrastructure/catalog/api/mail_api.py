"""Mail API client.

HTTP client for the catalog mail endpoint that e-mails users about changes
to resources they are involved with.

Endpoints:
    POST /notification - Send a notification ({msg})
"""

from typing import Any

from src.core.constants import CATALOG_TIMEOUT_DEFAULT
from src.core.result import Result
from src.domain.errors import CatalogServiceError
from src.domain.protocols.catalog_api_protocol import CatalogResponse
from src.infrastructure.catalog.base_api_client import BaseCatalogAPIClient


class MailAPI(BaseCatalogAPIClient):
    """HTTP client for the catalog mail API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = CATALOG_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize Mail API client.

        Args:
            base_url: Mail API base URL including its route prefix.
            timeout: HTTP request timeout in seconds.
        """
        super().__init__(
            base_url=base_url,
            service_name="mail",
            timeout=timeout,
        )

    async def send_notification(
        self, notification: dict[str, Any]
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Send a notification e-mail.

        Args:
            notification: ``{notificationType, options, recipients}`` body.

        Returns:
            Success(CatalogResponse): ``{msg}`` envelope.
            Failure(CatalogServiceError): If the mail service rejected it.
        """
        return await self._execute_and_parse_object(
            method="POST",
            path="/notification",
            json_data=notification,
            operation="send_notification",
        )
