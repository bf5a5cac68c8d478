"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, human-readable or JSON)
- Catalog API clients (metadata, mail, preview)

Clients open an httpx.AsyncClient per request and keep no connection state,
so sharing one instance per process is safe.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.catalog.api import MailAPI, MetadataAPI, PreviewAPI


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=not settings.is_development, level=level)


@lru_cache()
def get_metadata_api() -> "MetadataAPI":
    """Get metadata API client singleton (app-scoped).

    Returns:
        MetadataAPI bound to ``catalog_base_url + metadata_api_prefix``.
    """
    from src.infrastructure.catalog.api import MetadataAPI

    return MetadataAPI(
        base_url=f"{settings.catalog_base_url}{settings.metadata_api_prefix}",
        timeout=settings.request_timeout,
    )


@lru_cache()
def get_mail_api() -> "MailAPI":
    """Get mail API client singleton (app-scoped).

    Returns:
        MailAPI bound to ``catalog_base_url + mail_api_prefix``.
    """
    from src.infrastructure.catalog.api import MailAPI

    return MailAPI(
        base_url=f"{settings.catalog_base_url}{settings.mail_api_prefix}",
        timeout=settings.request_timeout,
    )


@lru_cache()
def get_preview_api() -> "PreviewAPI":
    """Get preview API client singleton (app-scoped).

    Returns:
        PreviewAPI bound to ``catalog_base_url + preview_api_prefix``.
    """
    from src.infrastructure.catalog.api import PreviewAPI

    return PreviewAPI(
        base_url=f"{settings.catalog_base_url}{settings.preview_api_prefix}",
        timeout=settings.request_timeout,
    )
