"""Factory helpers to select the account directory backend."""

from collections.abc import Iterable

from sqlalchemy.engine import Engine

from bankist.application.ports.account_directory import AccountDirectoryPort
from bankist.domain.models import Account
from bankist.infrastructure.in_memory_directory import (
    InMemoryAccountDirectory,
)
from bankist.infrastructure.logging.logger import get_app_logger
from bankist.infrastructure.settings import BankistSettings
from bankist.infrastructure.sqlalchemy_directory import (
    SqlAlchemyAccountDirectory,
)


def create_account_directory(
    accounts: Iterable[Account],
    logger=None,
    settings: BankistSettings | None = None,
    engine: Engine | None = None,
) -> AccountDirectoryPort:
    """Return an account directory implementation based on configuration.

    Args:
        accounts: Accounts loaded into the new directory.
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.
        engine: Optional engine for the sqlalchemy backend.

    Returns:
        AccountDirectoryPort: Concrete directory implementation.

    Raises:
        ValueError: If the configured backend is unknown.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or BankistSettings.from_env()
    backend = resolved_settings.directory_backend

    if backend == "memory":
        return InMemoryAccountDirectory(accounts, logger=resolved_logger)

    if backend == "sqlalchemy":
        return SqlAlchemyAccountDirectory(
            accounts,
            engine=engine,
            logger=resolved_logger,
        )

    raise ValueError(
        "Unsupported directory backend: "
        f"{backend}. Expected memory or sqlalchemy."
    )


__all__ = ["create_account_directory"]
