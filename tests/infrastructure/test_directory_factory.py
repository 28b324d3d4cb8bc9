"""Tests for account directory backend selection."""

from unittest.mock import MagicMock

import pytest

from bankist.infrastructure import directory_factory as factory
from bankist.infrastructure.demo_accounts import build_demo_accounts
from bankist.infrastructure.in_memory_directory import (
    InMemoryAccountDirectory,
)
from bankist.infrastructure.settings import BankistSettings
from bankist.infrastructure.sqlalchemy_directory import (
    SqlAlchemyAccountDirectory,
)


def test_factory_defaults_to_memory() -> None:
    """Default settings select the in-memory directory."""
    directory = factory.create_account_directory(
        build_demo_accounts(),
        logger=MagicMock(),
        settings=BankistSettings(),
    )

    assert isinstance(directory, InMemoryAccountDirectory)


def test_factory_uses_sqlalchemy_backend() -> None:
    """The sqlalchemy backend is honored."""
    directory = factory.create_account_directory(
        build_demo_accounts(),
        logger=MagicMock(),
        settings=BankistSettings(directory_backend="sqlalchemy"),
    )

    assert isinstance(directory, SqlAlchemyAccountDirectory)
    assert len(directory) == 4


def test_factory_passes_engine_to_sql_backend(monkeypatch) -> None:
    """An explicit engine is forwarded to the SQL directory."""
    captured = {}

    def _fake_directory(accounts, engine=None, logger=None):
        captured["engine"] = engine
        return "sql-directory"

    monkeypatch.setattr(factory, "SqlAlchemyAccountDirectory", _fake_directory)

    directory = factory.create_account_directory(
        [],
        logger=MagicMock(),
        settings=BankistSettings(directory_backend="sqlalchemy"),
        engine="engine",
    )

    assert directory == "sql-directory"
    assert captured["engine"] == "engine"


def test_factory_rejects_unknown_backend() -> None:
    """Unknown backends raise a ValueError."""
    with pytest.raises(ValueError):
        factory.create_account_directory(
            [],
            logger=MagicMock(),
            settings=BankistSettings(directory_backend="redis"),
        )
