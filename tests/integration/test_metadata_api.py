"""Integration tests for MetadataAPI.

Tests cover:
- HTTP request construction (method, path, query params, JSON body)
- Response handling (success envelopes, status codes)
- Error translation to CatalogServiceError types
- Timeout and connection error handling

Architecture:
- Uses pytest-httpx for HTTP mocking
- Tests API client in isolation (no mapper)
- Verifies raw JSON response handling
"""

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import UpdateMethod
from src.domain.errors import (
    CatalogAuthenticationError,
    CatalogInvalidResponseError,
    CatalogNotFoundError,
    CatalogRateLimitError,
    CatalogUnavailableError,
)
from src.infrastructure.catalog.api import MetadataAPI
from src.infrastructure.catalog.query_params import get_related_dashboard_slug
from tests.conftest import (
    TABLE_KEY,
    build_dashboards_response,
    build_owner_payload,
    build_table_response,
)

BASE_URL = "http://catalog.test/api/metadata/v0"


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def api() -> MetadataAPI:
    """Create MetadataAPI instance with test base URL."""
    return MetadataAPI(base_url=BASE_URL, timeout=5.0)


def _url(path: str, **params: str) -> httpx.URL:
    return httpx.URL(f"{BASE_URL}{path}", params=params)


# =============================================================================
# Test: table reads
# =============================================================================


class TestGetTable:
    """Test get_table."""

    @pytest.mark.asyncio
    async def test_returns_table_envelope(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=_url("/table", key=TABLE_KEY),
            json=build_table_response(),
            status_code=200,
        )

        result = await api.get_table(TABLE_KEY)

        assert isinstance(result, Success)
        assert result.value.status_code == 200
        assert result.value.data["tableData"]["key"] == TABLE_KEY

    @pytest.mark.asyncio
    async def test_sends_index_and_source(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=_url("/table", key=TABLE_KEY, index="4", source="search"),
            json=build_table_response(),
        )

        result = await api.get_table(TABLE_KEY, index="4", source="search")

        assert isinstance(result, Success)
        request = httpx_mock.get_request()
        assert request.url.params["index"] == "4"
        assert request.url.params["source"] == "search"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_not_found(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=_url("/table", key=TABLE_KEY),
            json={"msg": "Table not found"},
            status_code=404,
        )

        result = await api.get_table(TABLE_KEY)

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogNotFoundError)
        assert result.error.status_code == 404
        assert result.error.response_data == {"msg": "Table not found"}

    @pytest.mark.asyncio
    async def test_get_related_dashboards_uses_encoded_key(
        self, api: MetadataAPI, httpx_mock: HTTPXMock
    ):
        slug = get_related_dashboard_slug(TABLE_KEY)
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/table/{slug}/dashboards",
            json=build_dashboards_response(2),
        )

        result = await api.get_related_dashboards(TABLE_KEY)

        assert isinstance(result, Success)
        assert len(result.value.data["dashboards"]) == 2
        request = httpx_mock.get_request()
        assert b"hive%3A%2F%2Fgold.core%2Frides" in request.url.raw_path


# =============================================================================
# Test: descriptions
# =============================================================================


class TestDescriptions:
    """Test description reads and writes."""

    @pytest.mark.asyncio
    async def test_get_table_description(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=_url("/get_table_description", key=TABLE_KEY),
            json={"description": "One row per ride", "msg": "Success"},
        )

        result = await api.get_table_description(TABLE_KEY)

        assert isinstance(result, Success)
        assert result.value.data["description"] == "One row per ride"

    @pytest.mark.asyncio
    async def test_put_table_description(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE_URL}/put_table_description",
            json={"msg": "Success"},
        )

        result = await api.put_table_description(TABLE_KEY, "New text")

        assert isinstance(result, Success)
        body = json.loads(httpx_mock.get_request().content)
        assert body == {"description": "New text", "key": TABLE_KEY, "source": "user"}

    @pytest.mark.asyncio
    async def test_get_column_description(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=_url("/get_column_description", key=TABLE_KEY, column_name="fare"),
            json={"description": "Fare in USD", "msg": "Success"},
        )

        result = await api.get_column_description(TABLE_KEY, "fare")

        assert isinstance(result, Success)
        assert result.value.data["description"] == "Fare in USD"

    @pytest.mark.asyncio
    async def test_put_column_description(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE_URL}/put_column_description",
            json={"msg": "Success"},
        )

        result = await api.put_column_description(TABLE_KEY, "fare", "Fare in USD")

        assert isinstance(result, Success)
        body = json.loads(httpx_mock.get_request().content)
        assert body == {
            "description": "Fare in USD",
            "column_name": "fare",
            "key": TABLE_KEY,
            "source": "user",
        }

    @pytest.mark.asyncio
    async def test_put_description_forbidden(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE_URL}/put_table_description",
            json={"msg": "Not editable"},
            status_code=403,
        )

        result = await api.put_table_description(TABLE_KEY, "New text")

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogAuthenticationError)
        assert result.error.code == ErrorCode.CATALOG_AUTHENTICATION_FAILED


# =============================================================================
# Test: owners and users
# =============================================================================


class TestOwners:
    """Test owner updates and user lookups."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", [UpdateMethod.PUT, UpdateMethod.DELETE])
    async def test_update_table_owner_uses_method(
        self, api: MetadataAPI, httpx_mock: HTTPXMock, method: UpdateMethod
    ):
        httpx_mock.add_response(
            method=method.value,
            url=f"{BASE_URL}/update_table_owner",
            json={"msg": "Success"},
        )

        result = await api.update_table_owner(TABLE_KEY, "jdoe", method)

        assert isinstance(result, Success)
        request = httpx_mock.get_request()
        assert request.method == method.value
        assert json.loads(request.content) == {"key": TABLE_KEY, "owner": "jdoe"}

    @pytest.mark.asyncio
    async def test_get_user(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=_url("/user", user_id="jdoe"),
            json={"user": build_owner_payload("jdoe"), "msg": "Success"},
        )

        result = await api.get_user("jdoe")

        assert isinstance(result, Success)
        assert result.value.data["user"]["display_name"] == "Jane Doe"

    @pytest.mark.asyncio
    async def test_get_last_indexed(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/get_last_indexed",
            json={"timestamp": 1588808952, "msg": "Success"},
        )

        result = await api.get_last_indexed()

        assert isinstance(result, Success)
        assert result.value.data["timestamp"] == 1588808952


# =============================================================================
# Test: transport and status errors
# =============================================================================


class TestErrors:
    """Test error translation."""

    @pytest.mark.asyncio
    async def test_timeout(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.TimeoutException("Connection timed out"))

        result = await api.get_last_indexed()

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogUnavailableError)
        assert result.error.status_code is None
        assert result.error.is_transient is True

    @pytest.mark.asyncio
    async def test_connection_error(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ConnectError("Failed to connect"))

        result = await api.get_last_indexed()

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogUnavailableError)
        assert "Failed to connect" in result.error.message

    @pytest.mark.asyncio
    async def test_server_error(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/get_last_indexed",
            text="Internal Server Error",
            status_code=500,
        )

        result = await api.get_last_indexed()

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogUnavailableError)
        assert result.error.status_code == 500
        assert result.error.response_body == "Internal Server Error"
        assert result.error.response_data is None

    @pytest.mark.asyncio
    async def test_rate_limited(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/get_last_indexed",
            status_code=429,
            headers={"Retry-After": "30"},
        )

        result = await api.get_last_indexed()

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogRateLimitError)
        assert result.error.retry_after == 30

    @pytest.mark.asyncio
    async def test_invalid_json(self, api: MetadataAPI, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/get_last_indexed",
            text="<html>not json</html>",
            status_code=200,
        )

        result = await api.get_last_indexed()

        assert isinstance(result, Failure)
        assert isinstance(result.error, CatalogInvalidResponseError)
