"""Table preview view-models.

A preview is a small sample of rows produced by the preview backend. When the
preview fails the service may still return a partial payload (typically just
``error_text``), which the UI shows instead of the grid.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, kw_only=True)
class PreviewColumn:
    """Preview column header.

    Attributes:
        column_name: Column name.
        column_type: Column type as reported by the preview backend.
    """

    column_name: str
    column_type: str = ""


@dataclass(frozen=True, kw_only=True)
class PreviewData:
    """Preview grid.

    ``PreviewData()`` is the empty result used when nothing usable came back.

    Attributes:
        columns: Column headers.
        data: Rows keyed by column name.
        error_text: Error reported by the preview backend, if any.
    """

    columns: list[PreviewColumn] = field(default_factory=list)
    data: list[dict[str, Any]] = field(default_factory=list)
    error_text: str = ""

    @property
    def is_empty(self) -> bool:
        """True when there are no columns, no rows and no error text."""
        return not self.columns and not self.data and not self.error_text
