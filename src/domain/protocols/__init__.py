"""Domain protocols (ports).

Usage:
    from src.domain.protocols import LoggerProtocol, MetadataAPIProtocol
"""

from src.domain.protocols.catalog_api_protocol import (
    CatalogResponse,
    MailAPIProtocol,
    MetadataAPIProtocol,
    PreviewAPIProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "CatalogResponse",
    "LoggerProtocol",
    "MailAPIProtocol",
    "MetadataAPIProtocol",
    "PreviewAPIProtocol",
]
