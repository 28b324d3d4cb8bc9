"""SQLAlchemy-backed account directory.

Accounts and movements are stored in two tables. The database is the
source of truth; ``Account`` objects handed out by the directory are kept
in an identity map so the session always holds the same instance for a
given row, and they are refreshed from the database on every load.
"""

from collections.abc import Iterable
import threading

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from bankist.application.ports.account_directory import AccountDirectoryPort
from bankist.domain.errors import AccountNotFoundError
from bankist.domain.models import Account, LedgerTransaction
from bankist.domain.services.user_names import assign_user_names
from bankist.infrastructure.db import create_directory_engine
from bankist.infrastructure.logging.logger import get_app_logger


CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner TEXT NOT NULL,
    user_name TEXT NOT NULL,
    interest_rate REAL NOT NULL,
    pin INTEGER NOT NULL
)
"""

CREATE_MOVEMENTS_SQL = """
CREATE TABLE IF NOT EXISTS movements (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount REAL NOT NULL
)
"""

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (owner, user_name, interest_rate, pin)
    VALUES (:owner, :user_name, :interest_rate, :pin)
    """
)

INSERT_MOVEMENT_SQL = text(
    """
    INSERT INTO movements (account_id, amount)
    VALUES (:account_id, :amount)
    """
)

SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, owner, user_name, interest_rate, pin
    FROM accounts
    ORDER BY id
    """
)

SELECT_ACCOUNT_BY_USER_NAME_SQL = text(
    """
    SELECT id, owner, user_name, interest_rate, pin
    FROM accounts
    WHERE user_name = :user_name
    ORDER BY id
    LIMIT 1
    """
)

SELECT_MOVEMENTS_SQL = text(
    """
    SELECT account_id, amount
    FROM movements
    ORDER BY id
    """
)

SELECT_ACCOUNT_MOVEMENTS_SQL = text(
    """
    SELECT amount
    FROM movements
    WHERE account_id = :account_id
    ORDER BY id
    """
)

COUNT_ACCOUNTS_SQL = text("SELECT COUNT(*) FROM accounts")

DELETE_MOVEMENTS_SQL = text("DELETE FROM movements WHERE account_id = :id")

DELETE_ACCOUNT_SQL = text("DELETE FROM accounts WHERE id = :id")


class SqlAlchemyAccountDirectory(AccountDirectoryPort):
    """Directory persisting accounts through a SQLAlchemy engine."""

    def __init__(
        self,
        accounts: Iterable[Account],
        engine: Engine | None = None,
        logger=None,
    ) -> None:
        """Initialize the schema and load the accounts.

        Args:
            accounts: Accounts owned by the directory from now on.
            engine: Optional engine; defaults to an in-memory SQLite one.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._engine = engine or create_directory_engine()
        self._logger = logger or get_app_logger()
        self._lock = threading.RLock()
        self._identity: dict[int, Account] = {}
        self._ensure_schema()
        self._load_initial_accounts(
            assign_user_names(accounts, logger=self._logger)
        )

    def list_accounts(self) -> list[Account]:
        with self._lock:
            with self._engine.connect() as conn:
                rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
                movement_rows = conn.execute(SELECT_MOVEMENTS_SQL).all()
            movements: dict[int, list[float]] = {}
            for movement in movement_rows:
                movements.setdefault(movement.account_id, []).append(
                    movement.amount
                )
            return [
                self._materialize(row, movements.get(row.id, []))
                for row in rows
            ]

    def find_by_user_name(self, user_name: str) -> Account | None:
        with self._lock:
            with self._engine.connect() as conn:
                row = conn.execute(
                    SELECT_ACCOUNT_BY_USER_NAME_SQL,
                    {"user_name": user_name},
                ).first()
                if row is None:
                    return None
                amounts = conn.execute(
                    SELECT_ACCOUNT_MOVEMENTS_SQL,
                    {"account_id": row.id},
                ).scalars().all()
            return self._materialize(row, list(amounts))

    def remove_by_user_name(self, user_name: str) -> Account:
        with self._lock:
            account = self.find_by_user_name(user_name)
            if account is None:
                raise AccountNotFoundError(user_name)
            account_id = self._row_id(account)
            with self._engine.begin() as conn:
                conn.execute(DELETE_MOVEMENTS_SQL, {"id": account_id})
                conn.execute(DELETE_ACCOUNT_SQL, {"id": account_id})
            del self._identity[account_id]
        self._logger.info(f"Removed account '{user_name}'")
        return account

    def apply_transaction(self, transaction: LedgerTransaction) -> None:
        with self._lock:
            params = []
            for entry in transaction.entries:
                account_id = self._row_id(entry.account)
                if account_id is None:
                    raise AccountNotFoundError(entry.account.user_name)
                params.append({"account_id": account_id, "amount": entry.amount})
            with self._engine.begin() as conn:
                conn.execute(INSERT_MOVEMENT_SQL, params)
            for entry in transaction.entries:
                entry.account.movements.append(entry.amount)

    def __len__(self) -> int:
        with self._lock, self._engine.connect() as conn:
            return conn.execute(COUNT_ACCOUNTS_SQL).scalar_one()

    def _ensure_schema(self) -> None:
        with self._engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ACCOUNTS_SQL)
            conn.exec_driver_sql(CREATE_MOVEMENTS_SQL)

    def _load_initial_accounts(self, accounts: list[Account]) -> None:
        with self._engine.begin() as conn:
            for account in accounts:
                account_id = self._insert_account(conn, account)
                self._identity[account_id] = account
        self._logger.info(
            f"Loaded {len(accounts)} accounts into SQL directory"
        )

    @staticmethod
    def _insert_account(conn: Connection, account: Account) -> int:
        result = conn.execute(
            INSERT_ACCOUNT_SQL,
            {
                "owner": account.owner,
                "user_name": account.user_name,
                "interest_rate": account.interest_rate,
                "pin": account.pin,
            },
        )
        account_id = result.lastrowid
        if account.movements:
            conn.execute(
                INSERT_MOVEMENT_SQL,
                [
                    {"account_id": account_id, "amount": amount}
                    for amount in account.movements
                ],
            )
        return account_id

    def _materialize(self, row, movements: list[float]) -> Account:
        account = self._identity.get(row.id)
        if account is None:
            account = Account(owner=row.owner)
            self._identity[row.id] = account
        account.owner = row.owner
        account.user_name = row.user_name
        account.interest_rate = row.interest_rate
        account.pin = row.pin
        account.movements[:] = movements
        return account

    def _row_id(self, account: Account) -> int | None:
        for account_id, candidate in self._identity.items():
            if candidate is account:
                return account_id
        return None


__all__ = ["SqlAlchemyAccountDirectory"]
