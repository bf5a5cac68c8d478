"""Data Transfer Objects (DTOs) for the application layer.

DTOs are result dataclasses returned by command and query handlers.

Usage:
    from src.application.dtos import TableDataResult, PreviewDataResult
"""

from src.application.dtos.catalog_dtos import (
    OwnerUpdateResult,
    PreviewDataResult,
    TableDataResult,
)

__all__ = [
    "OwnerUpdateResult",
    "PreviewDataResult",
    "TableDataResult",
]
