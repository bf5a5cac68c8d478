"""Domain value objects (immutable, validated on construction)."""

from src.domain.value_objects.preview_query_params import PreviewQueryParams
from src.domain.value_objects.update_owner_payload import UpdateOwnerPayload

__all__ = [
    "PreviewQueryParams",
    "UpdateOwnerPayload",
]
