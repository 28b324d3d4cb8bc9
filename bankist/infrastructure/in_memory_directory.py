"""In-memory account directory."""

from collections.abc import Iterable
import threading

from bankist.application.ports.account_directory import AccountDirectoryPort
from bankist.domain.errors import AccountNotFoundError
from bankist.domain.models import Account, LedgerTransaction
from bankist.domain.services.user_names import assign_user_names
from bankist.infrastructure.logging.logger import get_app_logger


class InMemoryAccountDirectory(AccountDirectoryPort):
    """Directory keeping accounts in an ordered Python list."""

    def __init__(self, accounts: Iterable[Account], logger=None) -> None:
        """Initialize the directory and assign user names.

        Args:
            accounts: Accounts owned by the directory from now on.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()
        self._lock = threading.RLock()
        self._accounts = assign_user_names(accounts, logger=self._logger)
        self._logger.info(
            f"Loaded {len(self._accounts)} accounts into memory directory"
        )

    def list_accounts(self) -> list[Account]:
        with self._lock:
            return list(self._accounts)

    def find_by_user_name(self, user_name: str) -> Account | None:
        with self._lock:
            return next(
                (
                    account
                    for account in self._accounts
                    if account.user_name == user_name
                ),
                None,
            )

    def remove_by_user_name(self, user_name: str) -> Account:
        with self._lock:
            for index, account in enumerate(self._accounts):
                if account.user_name == user_name:
                    del self._accounts[index]
                    self._logger.info(f"Removed account '{user_name}'")
                    return account
        raise AccountNotFoundError(user_name)

    def apply_transaction(self, transaction: LedgerTransaction) -> None:
        with self._lock:
            for entry in transaction.entries:
                if not self._contains(entry.account):
                    raise AccountNotFoundError(entry.account.user_name)
            for entry in transaction.entries:
                entry.account.movements.append(entry.amount)

    def _contains(self, account: Account) -> bool:
        return any(candidate is account for candidate in self._accounts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)


__all__ = ["InMemoryAccountDirectory"]
