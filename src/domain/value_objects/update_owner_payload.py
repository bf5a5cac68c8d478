"""Owner update value object."""

from dataclasses import dataclass

from src.domain.enums.update_method import UpdateMethod


@dataclass(frozen=True, kw_only=True)
class UpdateOwnerPayload:
    """One owner to add to or remove from a table.

    Attributes:
        id: Catalog user_id of the owner.
        method: PUT to add the owner, DELETE to remove them.

    Raises:
        ValueError: If id is empty.
    """

    id: str
    method: UpdateMethod

    def __post_init__(self) -> None:
        """Validate owner id."""
        if not self.id:
            raise ValueError("Owner update requires a user id")
