"""Tests for the in-memory account directory."""

from unittest.mock import MagicMock

import pytest

from bankist.domain.errors import AccountNotFoundError
from bankist.domain.models import Account, LedgerTransaction
from bankist.infrastructure.demo_accounts import build_demo_accounts
from bankist.infrastructure.in_memory_directory import (
    InMemoryAccountDirectory,
)


def _build_directory() -> InMemoryAccountDirectory:
    return InMemoryAccountDirectory(build_demo_accounts(), logger=MagicMock())


def test_directory_assigns_user_names_in_order() -> None:
    """Accounts keep their order and receive initials-based names."""
    directory = _build_directory()

    assert [a.user_name for a in directory.list_accounts()] == [
        "js",
        "jd",
        "stw",
        "ss",
    ]
    assert len(directory) == 4


def test_find_by_user_name_is_exact() -> None:
    """Lookups match the stored lowercase name only."""
    directory = _build_directory()

    assert directory.find_by_user_name("stw").owner == "Steven Thomas Williams"
    assert directory.find_by_user_name("STW") is None
    assert directory.find_by_user_name("") is None


def test_remove_by_user_name_removes_first_match() -> None:
    """Removal returns the account and shrinks the directory by one."""
    directory = _build_directory()

    removed = directory.remove_by_user_name("jd")

    assert removed.owner == "Jessica Davis"
    assert len(directory) == 3
    assert directory.find_by_user_name("jd") is None


def test_remove_unknown_user_name_raises() -> None:
    """Removing a missing user name is an explicit error."""
    directory = _build_directory()

    with pytest.raises(AccountNotFoundError):
        directory.remove_by_user_name("zz")
    assert len(directory) == 4


def test_apply_transaction_appends_all_entries() -> None:
    """Both sides of a transfer are recorded."""
    directory = _build_directory()
    sender = directory.find_by_user_name("js")
    receiver = directory.find_by_user_name("ss")

    directory.apply_transaction(
        LedgerTransaction.transfer(sender, receiver, 50.0)
    )

    assert sender.movements[-1] == -50.0
    assert receiver.movements[-1] == 50.0


def test_apply_transaction_with_foreign_account_mutates_nothing() -> None:
    """A transaction touching an unknown account is rejected whole."""
    directory = _build_directory()
    sender = directory.find_by_user_name("js")
    outsider = Account(owner="Outside Person", user_name="op")
    before = list(sender.movements)

    with pytest.raises(AccountNotFoundError):
        directory.apply_transaction(
            LedgerTransaction.transfer(sender, outsider, 50.0)
        )

    assert sender.movements == before
    assert outsider.movements == []


def test_list_accounts_returns_a_copy() -> None:
    """Mutating the returned list does not touch the directory."""
    directory = _build_directory()

    directory.list_accounts().clear()

    assert len(directory) == 4
