"""Query-string and URL helpers for the catalog REST contract.

Table endpoints identify a table by its key in the query string, optionally
with the search ``index`` and navigation ``source`` used for click analytics.
Absent values are dropped rather than sent empty.

The related-dashboards endpoint takes the table key as a path segment instead,
so the key must be encoded as a single URI component.
"""

from urllib.parse import quote

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_table_query_params(
    table_key: str,
    index: str | None = None,
    source: str | None = None,
) -> dict[str, str]:
    """Build query parameters that identify a table.

    Args:
        table_key: Table key (``database://cluster.schema/table``).
        index: Search result position the user clicked, if any.
        source: Page the user navigated from, if any.

    Returns:
        Ordered ``key``/``index``/``source`` parameters, without None values.

    Example:
        >>> build_table_query_params("hive://gold.core/rides", source="search")
        {'key': 'hive://gold.core/rides', 'source': 'search'}
    """
    params = {"key": table_key, "index": index, "source": source}
    return {name: value for name, value in params.items() if value is not None}


def get_related_dashboard_slug(table_key: str) -> str:
    """Encode a table key as one path segment.

    Example:
        >>> get_related_dashboard_slug("hive://gold.core/rides")
        'hive%3A%2F%2Fgold.core%2Frides'
    """
    return quote(table_key, safe=_URI_COMPONENT_SAFE)
