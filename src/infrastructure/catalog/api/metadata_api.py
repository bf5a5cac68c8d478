"""Metadata API client.

HTTP client for the catalog metadata endpoints.
Handles HTTP concerns only - returns raw JSON envelopes.

Endpoints:
    GET    /table                        - Table metadata ({tableData})
    GET    /table/{slug}/dashboards      - Related dashboards ({dashboards})
    GET    /get_table_description        - Table description ({description})
    PUT    /put_table_description        - Store table description
    GET    /get_column_description       - Column description ({description})
    PUT    /put_column_description       - Store column description
    PUT    /update_table_owner           - Add table owner
    DELETE /update_table_owner           - Remove table owner
    GET    /user                         - User record ({user})
    GET    /get_last_indexed             - Last search index run ({timestamp})
"""

from src.core.constants import CATALOG_TIMEOUT_DEFAULT, USER_DESCRIPTION_SOURCE
from src.core.result import Result
from src.domain.enums.update_method import UpdateMethod
from src.domain.errors import CatalogServiceError
from src.domain.protocols.catalog_api_protocol import CatalogResponse
from src.infrastructure.catalog.base_api_client import BaseCatalogAPIClient
from src.infrastructure.catalog.query_params import (
    build_table_query_params,
    get_related_dashboard_slug,
)


class MetadataAPI(BaseCatalogAPIClient):
    """HTTP client for the catalog metadata API.

    Returns raw JSON responses - mapping to view-models is done by mappers.

    Example:
        >>> api = MetadataAPI(base_url="http://localhost:5000/api/metadata/v0")
        >>> result = await api.get_table("hive://gold.core/rides")
        >>> match result:
        ...     case Success(value=response):
        ...         print(response.data["tableData"]["name"])
        ...     case Failure(error=error):
        ...         print(f"Error: {error.message}")
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = CATALOG_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize Metadata API client.

        Args:
            base_url: Metadata API base URL including its route prefix.
            timeout: HTTP request timeout in seconds.
        """
        super().__init__(
            base_url=base_url,
            service_name="metadata",
            timeout=timeout,
        )

    async def get_table(
        self,
        table_key: str,
        *,
        index: str | None = None,
        source: str | None = None,
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Fetch table metadata.

        Args:
            table_key: Table key.
            index: Search result index the user clicked.
            source: Page the user navigated from.

        Returns:
            Success(CatalogResponse): ``{tableData, msg}`` envelope.
            Failure(CatalogNotFoundError): If the table does not exist.
            Failure(CatalogUnavailableError): If the API is unreachable.
        """
        return await self._execute_and_parse_object(
            method="GET",
            path="/table",
            params=build_table_query_params(table_key, index, source),
            operation="get_table",
        )

    async def get_related_dashboards(
        self, table_key: str
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Fetch dashboards that use a table.

        Returns:
            Success(CatalogResponse): ``{dashboards, msg}`` envelope.
        """
        slug = get_related_dashboard_slug(table_key)
        return await self._execute_and_parse_object(
            method="GET",
            path=f"/table/{slug}/dashboards",
            operation="get_related_dashboards",
        )

    async def get_table_description(
        self, table_key: str
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Fetch the current table description.

        Returns:
            Success(CatalogResponse): ``{description, msg}`` envelope.
        """
        return await self._execute_and_parse_object(
            method="GET",
            path="/get_table_description",
            params=build_table_query_params(table_key),
            operation="get_table_description",
        )

    async def put_table_description(
        self, table_key: str, description: str
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Store a table description edited by the user."""
        return await self._execute_and_parse_object(
            method="PUT",
            path="/put_table_description",
            json_data={
                "description": description,
                "key": table_key,
                "source": USER_DESCRIPTION_SOURCE,
            },
            operation="put_table_description",
        )

    async def get_column_description(
        self, table_key: str, column_name: str
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Fetch the current description of one column.

        Returns:
            Success(CatalogResponse): ``{description, msg}`` envelope.
        """
        params = build_table_query_params(table_key)
        params["column_name"] = column_name
        return await self._execute_and_parse_object(
            method="GET",
            path="/get_column_description",
            params=params,
            operation="get_column_description",
        )

    async def put_column_description(
        self, table_key: str, column_name: str, description: str
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Store a column description edited by the user."""
        return await self._execute_and_parse_object(
            method="PUT",
            path="/put_column_description",
            json_data={
                "description": description,
                "column_name": column_name,
                "key": table_key,
                "source": USER_DESCRIPTION_SOURCE,
            },
            operation="put_column_description",
        )

    async def update_table_owner(
        self, table_key: str, owner_id: str, method: UpdateMethod
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Add or remove a table owner.

        Args:
            table_key: Table key.
            owner_id: Catalog user_id of the owner.
            method: PUT to add the owner, DELETE to remove them.
        """
        return await self._execute_and_parse_object(
            method=method.value,
            path="/update_table_owner",
            json_data={"key": table_key, "owner": owner_id},
            operation="update_table_owner",
        )

    async def get_user(
        self, user_id: str
    ) -> Result[CatalogResponse, CatalogServiceError]:
        """Fetch a catalog user.

        Returns:
            Success(CatalogResponse): ``{user, msg}`` envelope.
        """
        return await self._execute_and_parse_object(
            method="GET",
            path="/user",
            params={"user_id": user_id},
            operation="get_user",
        )

    async def get_last_indexed(self) -> Result[CatalogResponse, CatalogServiceError]:
        """Fetch when the search index was last rebuilt.

        Returns:
            Success(CatalogResponse): ``{timestamp, msg}`` envelope.
        """
        return await self._execute_and_parse_object(
            method="GET",
            path="/get_last_indexed",
            operation="get_last_indexed",
        )
