"""Dashboard summary view-model (dashboards related to a table)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class DashboardSummary:
    """Dashboard that reads from a table.

    Attributes:
        uri: Dashboard key in the catalog.
        url: Link to the dashboard in its BI product.
        name: Dashboard name.
        group_name: Dashboard group (folder) name.
        group_url: Link to the dashboard group.
        product: BI product (e.g. "mode", "tableau").
        cluster: Cluster the dashboard belongs to.
        description: Dashboard description.
        last_successful_run_timestamp: Epoch seconds of the last good run.
    """

    uri: str
    url: str = ""
    name: str = ""
    group_name: str = ""
    group_url: str = ""
    product: str = ""
    cluster: str = ""
    description: str = ""
    last_successful_run_timestamp: int | None = None
