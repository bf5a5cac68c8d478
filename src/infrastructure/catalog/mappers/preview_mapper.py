"""Preview data mapper.

Preview JSON Structure:
    {
        "columns": [{"column_name": "ride_id", "column_type": "bigint"}],
        "data": [{"ride_id": 1}, {"ride_id": 2}],
        "error_text": ""
    }
"""

from typing import Any

import structlog

from src.domain.entities.preview_data import PreviewColumn, PreviewData

logger = structlog.get_logger(__name__)


class PreviewMapper:
    """Mapper for converting ``previewData`` JSON to PreviewData."""

    def map_preview_data(self, data: Any) -> PreviewData:
        """Map a ``previewData`` object.

        Anything that is not a JSON object maps to the empty PreviewData.

        Args:
            data: ``previewData`` value from a preview response.

        Returns:
            PreviewData (possibly empty).
        """
        if not isinstance(data, dict):
            return PreviewData()

        columns = [
            PreviewColumn(
                column_name=str(column["column_name"]),
                column_type=column.get("column_type") or "",
            )
            for column in data.get("columns") or []
            if isinstance(column, dict) and column.get("column_name")
        ]
        rows = [row for row in data.get("data") or [] if isinstance(row, dict)]

        return PreviewData(
            columns=columns,
            data=rows,
            error_text=data.get("error_text") or "",
        )
