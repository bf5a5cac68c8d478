"""GetTableData query handler.

Loads everything a table page needs in one step: the table metadata and the
dashboards that use the table. Both requests are issued concurrently and
joined before mapping; if either fails, the first failure (table before
dashboards) is returned.

Architecture:
- Application layer handler (orchestrates requests and mapping)
- Returns Result[TableDataResult, CatalogServiceError]
- NO state changes
"""

import asyncio

from src.application.dtos.catalog_dtos import TableDataResult
from src.application.queries.table_queries import GetTableData
from src.core.result import Failure, Result, Success
from src.domain.errors import CatalogServiceError, malformed_payload_error
from src.domain.protocols.catalog_api_protocol import MetadataAPIProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.catalog.mappers.table_mapper import TableMapper


class GetTableDataHandler:
    """Handler for GetTableData query.

    Flow:
        1. GET table metadata and GET related dashboards (concurrently)
        2. Map table payload (owners/tags stripped, dashboards attached)
        3. Map owners and tags from the same table payload

    Dependencies (injected via constructor):
        - MetadataAPIProtocol: Metadata API client
        - TableMapper: Table JSON to view-model mapper
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        metadata_api: MetadataAPIProtocol,
        table_mapper: TableMapper,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            metadata_api: Metadata API client.
            table_mapper: Mapper for table payloads.
            logger: Logger protocol implementation from container.
        """
        self._metadata_api = metadata_api
        self._mapper = table_mapper
        self._logger = logger

    async def handle(
        self, query: GetTableData
    ) -> Result[TableDataResult, CatalogServiceError]:
        """Handle GetTableData query.

        Args:
            query: Table key plus optional search index and source.

        Returns:
            Success(TableDataResult): Table, owners, tags and status code.
            Failure(CatalogServiceError): Either request failed or the table
                payload could not be mapped.
        """
        table_result, dashboards_result = await asyncio.gather(
            self._metadata_api.get_table(
                query.table_key,
                index=query.index,
                source=query.source,
            ),
            self._metadata_api.get_related_dashboards(query.table_key),
        )

        for result in (table_result, dashboards_result):
            if isinstance(result, Failure):
                self._logger.warning(
                    "table_data_fetch_failed",
                    table_key=query.table_key,
                    error_code=result.error.code.value,
                    status_code=result.error.status_code,
                )
                return result

        table_response = table_result.value
        table = self._mapper.map_table(
            table_response.data,
            dashboards_result.value.data,
        )
        if table is None:
            return Failure(
                error=malformed_payload_error(
                    service_name="metadata",
                    operation="get_table",
                    status_code=table_response.status_code,
                )
            )

        owners = self._mapper.map_owners(table_response.data)
        tags = self._mapper.map_tags(table_response.data)

        self._logger.info(
            "table_data_loaded",
            table_key=query.table_key,
            owner_count=len(owners),
            tag_count=len(tags),
            dashboard_count=len(table.dashboards),
        )
        return Success(
            value=TableDataResult(
                data=table,
                owners=owners,
                tags=tags,
                status_code=table_response.status_code,
            )
        )
