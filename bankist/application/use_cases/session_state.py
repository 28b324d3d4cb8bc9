"""Mutable state of one dashboard session."""

from dataclasses import dataclass

from bankist.application.ports.account_directory import AccountDirectoryPort
from bankist.domain.models import Account


@dataclass
class SessionState:
    """State threaded through every session use case.

    Attributes:
        directory: Directory owning every account of the session.
        current_account: Logged-in account, or None when logged out.
        sort_active: Whether movements are displayed sorted by value.
    """

    directory: AccountDirectoryPort
    current_account: Account | None = None
    sort_active: bool = False

    @property
    def is_logged_in(self) -> bool:
        return self.current_account is not None


__all__ = ["SessionState"]
