"""Port for the account directory."""

from typing import Protocol

from bankist.domain.models import Account, LedgerTransaction


class AccountDirectoryPort(Protocol):
    """Port exposing lookup, removal and ledger updates over accounts."""

    def list_accounts(self) -> list[Account]:
        """Return the accounts in directory order."""

    def find_by_user_name(self, user_name: str) -> Account | None:
        """Return the first account holding the exact user name."""

    def remove_by_user_name(self, user_name: str) -> Account:
        """Remove and return the first account holding the user name.

        Raises:
            AccountNotFoundError: If no account holds the user name.
        """

    def apply_transaction(self, transaction: LedgerTransaction) -> None:
        """Append every entry of the transaction as a single unit.

        Raises:
            AccountNotFoundError: If an entry targets an unknown account.
        """

    def __len__(self) -> int:
        """Return the number of accounts."""


__all__ = ["AccountDirectoryPort"]
