"""UpdateTableOwners command handler.

Applies owner additions/removals to a table. Every owner change is its own
request chain:

    update_table_owner (PUT/DELETE) → get_user → send_notification

The notification is only sent when the user is active and has a display name
(teams and former employees are skipped). A failed step ends its own chain;
chains for other owners still run to completion.
"""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeAlias

from src.application.commands.table_commands import UpdateTableOwners
from src.application.dtos.catalog_dtos import OwnerUpdateResult
from src.application.services.owner_notifications import (
    create_owner_notification_data,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.table_metadata import TableMetadata
from src.domain.errors import CatalogServiceError, malformed_payload_error
from src.domain.protocols.catalog_api_protocol import (
    MailAPIProtocol,
    MetadataAPIProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.update_owner_payload import UpdateOwnerPayload
from src.infrastructure.catalog.mappers.user_mapper import UserMapper

OwnerUpdateRequest: TypeAlias = Coroutine[
    Any, Any, Result[OwnerUpdateResult, CatalogServiceError]
]


class UpdateTableOwnersHandler:
    """Handler for UpdateTableOwners command.

    Dependencies (injected via constructor):
        - MetadataAPIProtocol: Owner updates and user lookups
        - MailAPIProtocol: Notification e-mails
        - UserMapper: User JSON to view-model mapper
        - LoggerProtocol: Structured logging

    Example:
        >>> command = UpdateTableOwners(
        ...     updates=(
        ...         UpdateOwnerPayload(id="jdoe", method=UpdateMethod.PUT),
        ...         UpdateOwnerPayload(id="asmith", method=UpdateMethod.DELETE),
        ...     ),
        ...     table=table,
        ... )
        >>> result = await handler.handle(command)
    """

    def __init__(
        self,
        metadata_api: MetadataAPIProtocol,
        mail_api: MailAPIProtocol,
        user_mapper: UserMapper,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            metadata_api: Metadata API client.
            mail_api: Mail API client.
            user_mapper: Mapper for user payloads.
            logger: Logger protocol implementation from container.
        """
        self._metadata_api = metadata_api
        self._mail_api = mail_api
        self._user_mapper = user_mapper
        self._logger = logger

    def generate_owner_update_requests(
        self, command: UpdateTableOwners
    ) -> list[OwnerUpdateRequest]:
        """Create one request chain per owner change, without starting them.

        The returned coroutines send nothing until awaited. The caller must
        await every one of them (``handle`` gathers them); a coroutine that is
        dropped never runs and Python warns that it was never awaited.

        Args:
            command: Owner changes and the table they apply to.

        Returns:
            Awaitables in the same order as ``command.updates``.
        """
        return [
            self._update_owner(update, command.table) for update in command.updates
        ]

    async def handle(
        self, command: UpdateTableOwners
    ) -> Result[list[OwnerUpdateResult], CatalogServiceError]:
        """Handle UpdateTableOwners command.

        Runs all chains concurrently and waits for every one of them.

        Returns:
            Success(list[OwnerUpdateResult]): Every chain succeeded.
            Failure(CatalogServiceError): First failure in ``updates`` order.
        """
        results = await asyncio.gather(*self.generate_owner_update_requests(command))

        outcomes: list[OwnerUpdateResult] = []
        for result in results:
            if isinstance(result, Failure):
                return result
            outcomes.append(result.value)

        self._logger.info(
            "table_owners_updated",
            table_key=command.table.key,
            update_count=len(outcomes),
            notified_count=sum(1 for outcome in outcomes if outcome.notified),
        )
        return Success(value=outcomes)

    async def _update_owner(
        self,
        update: UpdateOwnerPayload,
        table: TableMetadata,
    ) -> Result[OwnerUpdateResult, CatalogServiceError]:
        """Run one owner change chain."""
        log = self._logger.bind(
            table_key=table.key,
            owner_id=update.id,
            method=update.method.value,
        )

        update_result = await self._metadata_api.update_table_owner(
            table.key, update.id, update.method
        )
        if isinstance(update_result, Failure):
            log.warning("owner_update_failed", error_code=update_result.error.code.value)
            return update_result

        user_result = await self._metadata_api.get_user(update.id)
        if isinstance(user_result, Failure):
            log.warning("owner_lookup_failed", error_code=user_result.error.code.value)
            return user_result

        user = self._user_mapper.map_user(user_result.value.data.get("user") or {})
        if user is None:
            return Failure(
                error=malformed_payload_error(
                    service_name="metadata",
                    operation="get_user",
                    status_code=user_result.value.status_code,
                )
            )

        if not user.should_receive_notifications():
            log.debug("owner_notification_skipped", is_active=user.is_active)
            return Success(
                value=OwnerUpdateResult(
                    owner_id=update.id, method=update.method, notified=False
                )
            )

        notify_result = await self._mail_api.send_notification(
            create_owner_notification_data(update, table)
        )
        if isinstance(notify_result, Failure):
            log.warning(
                "owner_notification_failed",
                error_code=notify_result.error.code.value,
            )
            return notify_result

        return Success(
            value=OwnerUpdateResult(
                owner_id=update.id, method=update.method, notified=True
            )
        )
