"""Preview fetch error.

The preview backend often answers a failed query with an error status AND a
``previewData`` body carrying ``error_text``. PreviewDataError keeps whatever
partial preview came back so the UI can still render the message.
"""

from dataclasses import dataclass, field

from src.core.errors import DomainError
from src.domain.entities.preview_data import PreviewData


@dataclass(frozen=True, slots=True, kw_only=True)
class PreviewDataError(DomainError):
    """Preview request failed.

    Attributes:
        code: Domain ErrorCode (PREVIEW_FAILED).
        message: Human-readable message.
        data: Partial preview from the error response, else empty PreviewData.
        status: HTTP status code, None when no response was received.
    """

    data: PreviewData = field(default_factory=PreviewData)
    status: int | None = None
