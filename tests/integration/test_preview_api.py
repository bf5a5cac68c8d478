"""Integration tests for PreviewAPI and GetPreviewDataHandler.

Architecture:
- Uses pytest-httpx for HTTP mocking
- Error responses keep their JSON body so the handler can extract the
  partial preview
"""

import json
from unittest.mock import MagicMock

import pytest
from pytest_httpx import HTTPXMock

from src.application.queries.handlers.get_preview_data_handler import (
    GetPreviewDataHandler,
)
from src.application.queries.table_queries import GetPreviewData
from src.core.result import Failure, Success
from src.domain.value_objects import PreviewQueryParams
from src.infrastructure.catalog.api import PreviewAPI
from src.infrastructure.catalog.mappers import PreviewMapper

BASE_URL = "http://catalog.test/api/preview/v0"

PARAMS = PreviewQueryParams(
    database="hive", schema="core", table_name="rides", cluster="gold"
)


@pytest.fixture
def api() -> PreviewAPI:
    return PreviewAPI(base_url=BASE_URL, timeout=5.0)


class TestGetPreviewData:
    """Test get_preview_data."""

    @pytest.mark.asyncio
    async def test_posts_query(self, api: PreviewAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/",
            json={"previewData": {"columns": [], "data": []}, "msg": "Success"},
        )

        result = await api.get_preview_data(PARAMS)

        assert isinstance(result, Success)
        assert json.loads(httpx_mock.get_request().content) == {
            "database": "hive",
            "schema": "core",
            "tableName": "rides",
            "cluster": "gold",
        }

    @pytest.mark.asyncio
    async def test_error_body_kept(self, api: PreviewAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/",
            json={"previewData": {"error_text": "Permission denied"}, "msg": "Failed"},
            status_code=400,
        )

        result = await api.get_preview_data(PARAMS)

        assert isinstance(result, Failure)
        assert result.error.response_data["previewData"]["error_text"] == (
            "Permission denied"
        )


class TestPreviewHandlerEndToEnd:
    """GetPreviewDataHandler against a real PreviewAPI."""

    @pytest.mark.asyncio
    async def test_partial_preview_from_error_response(
        self, api: PreviewAPI, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/",
            json={"previewData": {"error_text": "Permission denied"}, "msg": "Failed"},
            status_code=400,
        )
        handler = GetPreviewDataHandler(
            preview_api=api, preview_mapper=PreviewMapper(), logger=MagicMock()
        )

        result = await handler.handle(GetPreviewData(query_params=PARAMS))

        assert isinstance(result, Failure)
        assert result.error.status == 400
        assert result.error.data.error_text == "Permission denied"

    @pytest.mark.asyncio
    async def test_success(self, api: PreviewAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/",
            json={
                "previewData": {
                    "columns": [{"column_name": "ride_id", "column_type": "bigint"}],
                    "data": [{"ride_id": 1}, {"ride_id": 2}],
                    "error_text": "",
                },
                "msg": "Success",
            },
        )
        handler = GetPreviewDataHandler(
            preview_api=api, preview_mapper=PreviewMapper(), logger=MagicMock()
        )

        result = await handler.handle(GetPreviewData(query_params=PARAMS))

        assert isinstance(result, Success)
        assert result.value.status == 200
        assert len(result.value.data.data) == 2

    @pytest.mark.asyncio
    async def test_rate_limited_with_http_date_retry_after(
        self, api: PreviewAPI, httpx_mock: HTTPXMock
    ):
        """A 429 with an HTTP-date Retry-After is still a PreviewDataError."""
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/",
            json={"previewData": {"error_text": "Too many previews"}, "msg": "Failed"},
            status_code=429,
            headers={"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"},
        )
        handler = GetPreviewDataHandler(
            preview_api=api, preview_mapper=PreviewMapper(), logger=MagicMock()
        )

        result = await handler.handle(GetPreviewData(query_params=PARAMS))

        assert isinstance(result, Failure)
        assert result.error.status == 429
        assert result.error.data.error_text == "Too many previews"
