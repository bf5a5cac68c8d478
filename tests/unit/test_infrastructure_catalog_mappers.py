"""Unit tests for catalog response mappers.

Tests cover:
- TableMapper: owners/tags stripped, dashboards attached, unknown fields kept
- Owner dictionary and tag list extraction
- UserMapper identifier fallbacks
- DashboardMapper skipping malformed entries
- PreviewMapper empty and partial payloads

Reference:
    - src/infrastructure/catalog/mappers/
"""

import pytest

from src.domain.entities.catalog_user import CatalogUser
from src.domain.entities.preview_data import PreviewColumn, PreviewData
from src.domain.entities.table_tag import TableTag
from src.infrastructure.catalog.mappers import (
    DashboardMapper,
    PreviewMapper,
    TableMapper,
    UserMapper,
)
from tests.conftest import (
    TABLE_KEY,
    build_dashboards_response,
    build_owner_payload,
    build_table_response,
)


# ============================================================================
# TableMapper
# ============================================================================


@pytest.mark.unit
class TestTableMapperMapTable:
    """Test TableMapper.map_table."""

    @pytest.fixture
    def mapper(self) -> TableMapper:
        return TableMapper()

    def test_maps_identity_and_columns(self, mapper: TableMapper):
        """Identity fields and columns are mapped."""
        table = mapper.map_table(build_table_response())

        assert table is not None
        assert table.key == TABLE_KEY
        assert (table.cluster, table.database, table.schema, table.name) == (
            "gold",
            "hive",
            "core",
            "rides",
        )
        assert [column.name for column in table.columns] == ["ride_id", "fare"]
        assert table.columns[1].col_type == "double"
        assert table.columns[1].stats == [{"stat_type": "avg", "stat_val": "12.5"}]
        assert table.last_updated_timestamp == 1588808952

    def test_owners_and_tags_not_in_table(self, mapper: TableMapper):
        """Owners and tags travel separately from the table view-model."""
        table = mapper.map_table(build_table_response())

        assert table is not None
        assert "owners" not in table.extra
        assert "tags" not in table.extra
        assert not hasattr(table, "owners")

    def test_unknown_fields_kept_in_extra(self, mapper: TableMapper):
        """Fields the view-model does not model are kept verbatim."""
        table = mapper.map_table(build_table_response(resource_reports=[{"name": "r"}]))

        assert table is not None
        assert table.extra == {"resource_reports": [{"name": "r"}]}

    def test_attaches_dashboards(self, mapper: TableMapper):
        """Related dashboards are attached to the table."""
        table = mapper.map_table(build_table_response(), build_dashboards_response(2))

        assert table is not None
        assert [d.uri for d in table.dashboards] == [
            "mode_dashboard://gold.ops/dash0",
            "mode_dashboard://gold.ops/dash1",
        ]

    def test_no_dashboards(self, mapper: TableMapper):
        """Tables without dashboards get an empty list."""
        table = mapper.map_table(build_table_response(), {"dashboards": []})

        assert table is not None
        assert table.dashboards == []

    def test_missing_table_data_returns_none(self, mapper: TableMapper):
        """A response without tableData cannot be mapped."""
        assert mapper.map_table({"msg": "Success"}) is None

    def test_missing_key_returns_none(self, mapper: TableMapper):
        """A table without a key cannot be mapped."""
        assert mapper.map_table(build_table_response(key="")) is None

    def test_malformed_column_returns_none(self, mapper: TableMapper):
        """A column without a name makes the payload invalid."""
        response = build_table_response(columns=[{"description": "no name"}])
        assert mapper.map_table(response) is None


@pytest.mark.unit
class TestTableMapperOwnersAndTags:
    """Test TableMapper.map_owners / map_tags."""

    def test_owners_keyed_by_user_id(self):
        """Owners are keyed by user id in response order."""
        response = build_table_response(
            owners=[build_owner_payload("jdoe"), build_owner_payload("asmith")]
        )

        owners = TableMapper().map_owners(response)

        assert list(owners) == ["jdoe", "asmith"]
        assert isinstance(owners["jdoe"], CatalogUser)
        assert owners["asmith"].email == "asmith@example.com"

    def test_no_owners(self):
        assert TableMapper().map_owners(build_table_response(owners=[])) == {}

    def test_missing_table_data(self):
        assert TableMapper().map_owners({}) == {}
        assert TableMapper().map_tags({}) == []

    def test_tags(self):
        """Tags without a name are skipped."""
        response = build_table_response(
            tags=[
                {"tag_name": "core", "tag_count": 12},
                {"tag_name": "pii"},
                {"tag_count": 3},
            ]
        )

        assert TableMapper().map_tags(response) == [
            TableTag(tag_name="core", tag_count=12),
            TableTag(tag_name="pii", tag_count=0),
        ]

    def test_tags_with_non_numeric_count_skipped(self):
        """A tag with an unparseable count is dropped, the rest are kept."""
        response = build_table_response(
            tags=[
                {"tag_name": "core", "tag_count": "many"},
                {"tag_name": "pii", "tag_count": "4"},
                {"tag_name": "ops", "tag_count": [1]},
            ]
        )

        assert TableMapper().map_tags(response) == [TableTag(tag_name="pii", tag_count=4)]


# ============================================================================
# UserMapper
# ============================================================================


@pytest.mark.unit
class TestUserMapper:
    """Test UserMapper.map_user."""

    def test_full_user(self):
        user = UserMapper().map_user(build_owner_payload("jdoe", is_active=False))

        assert user == CatalogUser(
            user_id="jdoe",
            display_name="Jane Doe",
            email="jdoe@example.com",
            is_active=False,
            profile_url="https://people.example.com/jdoe",
            first_name="Jane",
            last_name="Doe",
            team_name="Data Platform",
        )

    def test_id_falls_back_to_email(self):
        """Embedded owners may only carry an e-mail."""
        user = UserMapper().map_user({"email": "team@example.com"})

        assert user is not None
        assert user.user_id == "team@example.com"
        assert user.is_active is True

    def test_id_falls_back_to_display_name(self):
        user = UserMapper().map_user({"display_name": "Data Team"})

        assert user is not None
        assert user.user_id == "Data Team"

    def test_no_identifier_returns_none(self):
        assert UserMapper().map_user({"is_active": True}) is None

    def test_non_dict_returns_none(self):
        assert UserMapper().map_user(None) is None  # type: ignore[arg-type]


# ============================================================================
# DashboardMapper
# ============================================================================


@pytest.mark.unit
class TestDashboardMapper:
    """Test DashboardMapper."""

    def test_maps_dashboards(self):
        dashboards = DashboardMapper().map_dashboards(build_dashboards_response(1))

        assert len(dashboards) == 1
        assert dashboards[0].name == "Ride Volume 0"
        assert dashboards[0].product == "mode"
        assert dashboards[0].last_successful_run_timestamp == 1588808952

    def test_skips_malformed_entries(self):
        """Entries that are not objects or have no uri are skipped."""
        data = {
            "dashboards": [
                "not-a-dict",
                {"name": "no uri"},
                {"uri": "mode_dashboard://gold.ops/ok"},
                {"uri": "mode_dashboard://gold.ops/bad", "last_successful_run_timestamp": "x"},
            ]
        }

        dashboards = DashboardMapper().map_dashboards(data)

        assert [d.uri for d in dashboards] == ["mode_dashboard://gold.ops/ok"]

    def test_missing_dashboards_key(self):
        assert DashboardMapper().map_dashboards({}) == []


# ============================================================================
# PreviewMapper
# ============================================================================


@pytest.mark.unit
class TestPreviewMapper:
    """Test PreviewMapper.map_preview_data."""

    def test_maps_grid(self):
        preview = PreviewMapper().map_preview_data(
            {
                "columns": [{"column_name": "ride_id", "column_type": "bigint"}],
                "data": [{"ride_id": 1}, {"ride_id": 2}],
                "error_text": "",
            }
        )

        assert preview.columns == [PreviewColumn(column_name="ride_id", column_type="bigint")]
        assert preview.data == [{"ride_id": 1}, {"ride_id": 2}]
        assert preview.is_empty is False

    def test_partial_payload(self):
        """A failed preview may only carry error_text."""
        preview = PreviewMapper().map_preview_data({"error_text": "Permission denied"})

        assert preview == PreviewData(error_text="Permission denied")
        assert preview.is_empty is False

    @pytest.mark.parametrize("data", [None, [], "error", 42])
    def test_non_object_is_empty(self, data):
        preview = PreviewMapper().map_preview_data(data)

        assert preview == PreviewData()
        assert preview.is_empty is True
