"""Catalog handler factories.

One factory per query/command handler. Handlers are stateless, so each
factory returns an application-scoped singleton wired to the shared API
clients, mappers and logger.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.container.infrastructure import (
    get_logger,
    get_mail_api,
    get_metadata_api,
    get_preview_api,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.update_column_description_handler import (
        UpdateColumnDescriptionHandler,
    )
    from src.application.commands.handlers.update_table_description_handler import (
        UpdateTableDescriptionHandler,
    )
    from src.application.commands.handlers.update_table_owners_handler import (
        UpdateTableOwnersHandler,
    )
    from src.application.queries.handlers.get_column_description_handler import (
        GetColumnDescriptionHandler,
    )
    from src.application.queries.handlers.get_last_indexed_handler import (
        GetLastIndexedHandler,
    )
    from src.application.queries.handlers.get_preview_data_handler import (
        GetPreviewDataHandler,
    )
    from src.application.queries.handlers.get_table_data_handler import (
        GetTableDataHandler,
    )
    from src.application.queries.handlers.get_table_description_handler import (
        GetTableDescriptionHandler,
    )
    from src.application.queries.handlers.get_table_owners_handler import (
        GetTableOwnersHandler,
    )


# ============================================================================
# Query Handlers
# ============================================================================


@lru_cache()
def get_table_data_handler() -> "GetTableDataHandler":
    """Get GetTableData query handler."""
    from src.application.queries.handlers.get_table_data_handler import (
        GetTableDataHandler,
    )
    from src.infrastructure.catalog.mappers import TableMapper

    return GetTableDataHandler(
        metadata_api=get_metadata_api(),
        table_mapper=TableMapper(),
        logger=get_logger(),
    )


@lru_cache()
def get_table_description_handler() -> "GetTableDescriptionHandler":
    """Get GetTableDescription query handler."""
    from src.application.queries.handlers.get_table_description_handler import (
        GetTableDescriptionHandler,
    )

    return GetTableDescriptionHandler(metadata_api=get_metadata_api())


@lru_cache()
def get_table_owners_handler() -> "GetTableOwnersHandler":
    """Get GetTableOwners query handler."""
    from src.application.queries.handlers.get_table_owners_handler import (
        GetTableOwnersHandler,
    )
    from src.infrastructure.catalog.mappers import TableMapper

    return GetTableOwnersHandler(
        metadata_api=get_metadata_api(),
        table_mapper=TableMapper(),
    )


@lru_cache()
def get_column_description_handler() -> "GetColumnDescriptionHandler":
    """Get GetColumnDescription query handler."""
    from src.application.queries.handlers.get_column_description_handler import (
        GetColumnDescriptionHandler,
    )

    return GetColumnDescriptionHandler(metadata_api=get_metadata_api())


@lru_cache()
def get_last_indexed_handler() -> "GetLastIndexedHandler":
    """Get GetLastIndexed query handler."""
    from src.application.queries.handlers.get_last_indexed_handler import (
        GetLastIndexedHandler,
    )

    return GetLastIndexedHandler(metadata_api=get_metadata_api())


@lru_cache()
def get_preview_data_handler() -> "GetPreviewDataHandler":
    """Get GetPreviewData query handler."""
    from src.application.queries.handlers.get_preview_data_handler import (
        GetPreviewDataHandler,
    )
    from src.infrastructure.catalog.mappers import PreviewMapper

    return GetPreviewDataHandler(
        preview_api=get_preview_api(),
        preview_mapper=PreviewMapper(),
        logger=get_logger(),
    )


# ============================================================================
# Command Handlers
# ============================================================================


@lru_cache()
def get_update_table_description_handler() -> "UpdateTableDescriptionHandler":
    """Get UpdateTableDescription command handler."""
    from src.application.commands.handlers.update_table_description_handler import (
        UpdateTableDescriptionHandler,
    )

    return UpdateTableDescriptionHandler(
        metadata_api=get_metadata_api(),
        logger=get_logger(),
    )


@lru_cache()
def get_update_column_description_handler() -> "UpdateColumnDescriptionHandler":
    """Get UpdateColumnDescription command handler."""
    from src.application.commands.handlers.update_column_description_handler import (
        UpdateColumnDescriptionHandler,
    )

    return UpdateColumnDescriptionHandler(
        metadata_api=get_metadata_api(),
        logger=get_logger(),
    )


@lru_cache()
def get_update_table_owners_handler() -> "UpdateTableOwnersHandler":
    """Get UpdateTableOwners command handler."""
    from src.application.commands.handlers.update_table_owners_handler import (
        UpdateTableOwnersHandler,
    )
    from src.infrastructure.catalog.mappers import UserMapper

    return UpdateTableOwnersHandler(
        metadata_api=get_metadata_api(),
        mail_api=get_mail_api(),
        user_mapper=UserMapper(),
        logger=get_logger(),
    )
