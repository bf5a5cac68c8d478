"""Unit tests for GetTableOwnersHandler and GetLastIndexedHandler."""

from unittest.mock import AsyncMock

import pytest

from src.application.queries.handlers.get_last_indexed_handler import (
    GetLastIndexedHandler,
)
from src.application.queries.handlers.get_table_owners_handler import (
    GetTableOwnersHandler,
)
from src.application.queries.table_queries import GetLastIndexed, GetTableOwners
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import CatalogInvalidResponseError, CatalogNotFoundError
from src.domain.protocols.catalog_api_protocol import CatalogResponse
from src.infrastructure.catalog.mappers.table_mapper import TableMapper
from tests.conftest import TABLE_KEY, build_owner_payload, build_table_response


@pytest.mark.unit
class TestGetTableOwners:
    """Test GetTableOwnersHandler."""

    @pytest.mark.asyncio
    async def test_returns_owner_dict(self) -> None:
        api = AsyncMock()
        api.get_table.return_value = Success(
            value=CatalogResponse(
                data=build_table_response(
                    owners=[build_owner_payload("jdoe"), build_owner_payload("asmith")]
                ),
                status_code=200,
            )
        )
        handler = GetTableOwnersHandler(metadata_api=api, table_mapper=TableMapper())

        result = await handler.handle(GetTableOwners(table_key=TABLE_KEY))

        assert isinstance(result, Success)
        assert sorted(result.value) == ["asmith", "jdoe"]
        api.get_table.assert_awaited_once_with(TABLE_KEY)

    @pytest.mark.asyncio
    async def test_failure_propagates(self) -> None:
        api = AsyncMock()
        api.get_table.return_value = Failure(
            error=CatalogNotFoundError(
                code=ErrorCode.CATALOG_RESOURCE_NOT_FOUND,
                message="Metadata resource not found",
                service_name="metadata",
                status_code=404,
            )
        )
        handler = GetTableOwnersHandler(metadata_api=api, table_mapper=TableMapper())

        result = await handler.handle(GetTableOwners(table_key=TABLE_KEY))

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogNotFoundError)


@pytest.mark.unit
class TestGetLastIndexed:
    """Test GetLastIndexedHandler."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("timestamp", [1588808952, "1588808952"])
    async def test_returns_timestamp_unchanged(self, timestamp) -> None:
        api = AsyncMock()
        api.get_last_indexed.return_value = Success(
            value=CatalogResponse(
                data={"timestamp": timestamp, "msg": "Success"}, status_code=200
            )
        )

        result = await GetLastIndexedHandler(metadata_api=api).handle(GetLastIndexed())

        assert isinstance(result, Success)
        assert result.value == timestamp

    @pytest.mark.asyncio
    async def test_missing_timestamp(self) -> None:
        api = AsyncMock()
        api.get_last_indexed.return_value = Success(
            value=CatalogResponse(data={"msg": "Success"}, status_code=200)
        )

        result = await GetLastIndexedHandler(metadata_api=api).handle(GetLastIndexed())

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogInvalidResponseError)
        assert result.error.details == {"operation": "get_last_indexed"}
