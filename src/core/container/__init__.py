"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_table_data_handler

The container is organized into modules:
- infrastructure: Logger and catalog API clients
- catalog_handlers: Query and command handler factories
"""

from src.core.container.catalog_handlers import (
    get_column_description_handler,
    get_last_indexed_handler,
    get_preview_data_handler,
    get_table_data_handler,
    get_table_description_handler,
    get_table_owners_handler,
    get_update_column_description_handler,
    get_update_table_description_handler,
    get_update_table_owners_handler,
)
from src.core.container.infrastructure import (
    get_logger,
    get_mail_api,
    get_metadata_api,
    get_preview_api,
)

__all__ = [
    # Infrastructure
    "get_logger",
    "get_mail_api",
    "get_metadata_api",
    "get_preview_api",
    # Query handlers
    "get_column_description_handler",
    "get_last_indexed_handler",
    "get_preview_data_handler",
    "get_table_data_handler",
    "get_table_description_handler",
    "get_table_owners_handler",
    # Command handlers
    "get_update_column_description_handler",
    "get_update_table_description_handler",
    "get_update_table_owners_handler",
]
