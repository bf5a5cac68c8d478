"""Catalog response mappers.

Mappers translate raw catalog JSON into domain view-models. They know the
service's payload shapes; API clients and handlers do not.
"""

from src.infrastructure.catalog.mappers.dashboard_mapper import DashboardMapper
from src.infrastructure.catalog.mappers.preview_mapper import PreviewMapper
from src.infrastructure.catalog.mappers.table_mapper import TableMapper
from src.infrastructure.catalog.mappers.user_mapper import UserMapper

__all__ = [
    "DashboardMapper",
    "PreviewMapper",
    "TableMapper",
    "UserMapper",
]
