"""Catalog user view-model.

Users show up as table owners and as notification recipients. The catalog
identifies users by ``user_id`` (usually the e-mail local part or e-mail).
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CatalogUser:
    """User record as known to the metadata service.

    Attributes:
        user_id: Catalog user identifier.
        display_name: Name shown in the UI. Empty for teams and aliases.
        email: E-mail address.
        is_active: False for former employees.
        profile_url: Link to the user's profile page.
        first_name: Given name.
        last_name: Family name.
        team_name: Team the user belongs to.
    """

    user_id: str
    display_name: str = ""
    email: str = ""
    is_active: bool = True
    profile_url: str = ""
    first_name: str = ""
    last_name: str = ""
    team_name: str = ""

    def should_receive_notifications(self) -> bool:
        """Check whether owner-change e-mails should go to this user.

        Former employees and teams (no display name) are skipped.
        """
        return self.is_active and bool(self.display_name)
