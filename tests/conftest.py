"""Shared pytest fixtures and payload builders.

Builders return catalog JSON exactly as the metadata service sends it, so
mapper, handler and API client tests exercise the same shapes.
"""

from typing import Any

import pytest

from src.domain.entities.table_metadata import TableColumn, TableMetadata

TABLE_KEY = "hive://gold.core/rides"


def build_owner_payload(
    user_id: str = "jdoe",
    *,
    display_name: str = "Jane Doe",
    is_active: bool = True,
) -> dict[str, Any]:
    """Build a user JSON object as embedded in owners or the user endpoint."""
    return {
        "user_id": user_id,
        "display_name": display_name,
        "email": f"{user_id}@example.com",
        "is_active": is_active,
        "profile_url": f"https://people.example.com/{user_id}",
        "first_name": "Jane",
        "last_name": "Doe",
        "team_name": "Data Platform",
    }


def build_table_response(
    *,
    key: str = TABLE_KEY,
    owners: list[dict[str, Any]] | None = None,
    tags: list[dict[str, Any]] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Build a ``{tableData, msg}`` envelope of the table endpoint."""
    table_data: dict[str, Any] = {
        "key": key,
        "cluster": "gold",
        "database": "hive",
        "schema": "core",
        "name": "rides",
        "description": "One row per ride",
        "columns": [
            {
                "name": "ride_id",
                "description": "Ride identifier",
                "col_type": "bigint",
                "sort_order": 0,
                "is_editable": True,
                "stats": [],
            },
            {
                "name": "fare",
                "description": "",
                "col_type": "double",
                "sort_order": 1,
                "is_editable": True,
                "stats": [{"stat_type": "avg", "stat_val": "12.5"}],
            },
        ],
        "is_editable": True,
        "is_view": False,
        "last_updated_timestamp": 1588808952,
        "owners": owners if owners is not None else [build_owner_payload()],
        "tags": tags if tags is not None else [{"tag_name": "core", "tag_count": 12}],
    }
    table_data.update(overrides)
    return {"tableData": table_data, "msg": "Success"}


def build_dashboards_response(count: int = 1) -> dict[str, Any]:
    """Build a ``{dashboards, msg}`` envelope of the related-dashboards endpoint."""
    return {
        "dashboards": [
            {
                "uri": f"mode_dashboard://gold.ops/dash{i}",
                "url": f"https://app.mode.com/company/reports/dash{i}",
                "name": f"Ride Volume {i}",
                "group_name": "Ops",
                "group_url": "https://app.mode.com/company/spaces/ops",
                "product": "mode",
                "cluster": "gold",
                "description": "Daily ride volume",
                "last_successful_run_timestamp": 1588808952,
            }
            for i in range(count)
        ],
        "msg": "Success",
    }


@pytest.fixture
def table() -> TableMetadata:
    """Loaded table view-model with two columns."""
    return TableMetadata(
        key=TABLE_KEY,
        cluster="gold",
        database="hive",
        schema="core",
        name="rides",
        description="One row per ride",
        columns=[
            TableColumn(name="ride_id", description="Ride identifier"),
            TableColumn(name="fare"),
        ],
    )
