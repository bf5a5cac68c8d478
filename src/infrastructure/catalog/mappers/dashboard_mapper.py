"""Related dashboard mapper.

Converts the ``{dashboards}`` envelope of the related-dashboards endpoint to
DashboardSummary view-models.

Dashboard JSON Structure:
    {
        "uri": "mode_dashboard://gold.ops/abc123",
        "url": "https://app.mode.com/company/reports/abc123",
        "name": "Ride Volume",
        "group_name": "Ops",
        "group_url": "https://app.mode.com/company/spaces/ops",
        "product": "mode",
        "cluster": "gold",
        "description": "Daily ride volume",
        "last_successful_run_timestamp": 1588808952
    }
"""

from typing import Any

import structlog

from src.domain.entities.dashboard_summary import DashboardSummary

logger = structlog.get_logger(__name__)


class DashboardMapper:
    """Mapper for converting dashboard JSON to DashboardSummary."""

    def map_dashboards(self, data: dict[str, Any]) -> list[DashboardSummary]:
        """Map a ``{dashboards}`` envelope to view-models.

        Entries without a ``uri`` or with malformed fields are skipped.

        Args:
            data: Related-dashboards response body.

        Returns:
            Dashboards in response order (empty when none are present).
        """
        entries = data.get("dashboards") or []
        dashboards: list[DashboardSummary] = []
        for entry in entries:
            dashboard = self.map_dashboard(entry)
            if dashboard is not None:
                dashboards.append(dashboard)
        return dashboards

    def map_dashboard(self, data: Any) -> DashboardSummary | None:
        """Map one dashboard JSON object.

        Returns:
            DashboardSummary, or None if the entry cannot be mapped.
        """
        if not isinstance(data, dict) or not data.get("uri"):
            logger.warning(
                "dashboard_mapping_skipped",
                data_type=type(data).__name__,
            )
            return None

        try:
            last_run = data.get("last_successful_run_timestamp")
            return DashboardSummary(
                uri=data["uri"],
                url=data.get("url") or "",
                name=data.get("name") or "",
                group_name=data.get("group_name") or "",
                group_url=data.get("group_url") or "",
                product=data.get("product") or "",
                cluster=data.get("cluster") or "",
                description=data.get("description") or "",
                last_successful_run_timestamp=int(last_run) if last_run else None,
            )
        except (TypeError, ValueError) as e:
            logger.warning(
                "dashboard_mapping_failed",
                uri=data.get("uri"),
                error=str(e),
            )
            return None
