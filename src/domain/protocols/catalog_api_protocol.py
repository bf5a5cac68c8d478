"""Catalog API protocols (ports) for the metadata, mail and preview services.

Infrastructure HTTP clients implement these protocols. They return the raw
JSON envelope of each endpoint wrapped in CatalogResponse; mapping to
view-models is done by mappers in the application flow.

This is a Protocol (not ABC) for structural typing. Implementations don't need
to inherit from it, and tests can substitute AsyncMock objects.

Reference:
    - src/infrastructure/catalog/api/
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from src.core.result import Result
    from src.domain.enums.update_method import UpdateMethod
    from src.domain.errors import CatalogServiceError
    from src.domain.value_objects.preview_query_params import PreviewQueryParams


@dataclass(frozen=True, kw_only=True)
class CatalogResponse:
    """Raw catalog response (before mapping to view-models).

    Attributes:
        data: Parsed JSON object body.
        status_code: HTTP status code of the response.
    """

    data: dict[str, Any]
    status_code: int


class MetadataAPIProtocol(Protocol):
    """Protocol for the catalog metadata API (tables, columns, owners, users)."""

    async def get_table(
        self,
        table_key: str,
        *,
        index: str | None = None,
        source: str | None = None,
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Fetch the ``{tableData}`` envelope for a table.

        Args:
            table_key: Table key.
            index: Search result index the user clicked (analytics only).
            source: Page the user came from (analytics only).
        """
        ...

    async def get_related_dashboards(
        self, table_key: str
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Fetch the ``{dashboards}`` envelope for dashboards using a table."""
        ...

    async def get_table_description(
        self, table_key: str
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Fetch the ``{description}`` envelope for a table."""
        ...

    async def put_table_description(
        self, table_key: str, description: str
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Store a user-edited table description."""
        ...

    async def get_column_description(
        self, table_key: str, column_name: str
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Fetch the ``{description}`` envelope for a column."""
        ...

    async def put_column_description(
        self, table_key: str, column_name: str, description: str
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Store a user-edited column description."""
        ...

    async def update_table_owner(
        self, table_key: str, owner_id: str, method: "UpdateMethod"
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Add (PUT) or remove (DELETE) a table owner."""
        ...

    async def get_user(
        self, user_id: str
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Fetch the ``{user}`` envelope for a catalog user."""
        ...

    async def get_last_indexed(
        self,
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Fetch the ``{timestamp}`` envelope of the last search index run."""
        ...


class MailAPIProtocol(Protocol):
    """Protocol for the catalog mail (notification) API."""

    async def send_notification(
        self, notification: dict[str, Any]
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Ask the mail service to send a notification e-mail.

        Args:
            notification: ``{notificationType, options, recipients}`` body.
        """
        ...


class PreviewAPIProtocol(Protocol):
    """Protocol for the table preview API."""

    async def get_preview_data(
        self, query_params: "PreviewQueryParams"
    ) -> "Result[CatalogResponse, CatalogServiceError]":
        """Request a data preview.

        On failure the returned CatalogServiceError carries the parsed error
        body in ``response_data`` so a partial ``previewData`` can be used.
        """
        ...
