"""Catalog API clients package.

HTTP clients for the catalog metadata, mail and preview endpoints.
"""

from src.infrastructure.catalog.api.mail_api import MailAPI
from src.infrastructure.catalog.api.metadata_api import MetadataAPI
from src.infrastructure.catalog.api.preview_api import PreviewAPI

__all__ = [
    "MailAPI",
    "MetadataAPI",
    "PreviewAPI",
]
