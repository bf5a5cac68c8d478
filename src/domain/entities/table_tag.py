"""Table tag view-model."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TableTag:
    """Tag attached to a table.

    Attributes:
        tag_name: Tag text.
        tag_count: Number of resources carrying the tag (0 when unknown).
    """

    tag_name: str
    tag_count: int = 0
