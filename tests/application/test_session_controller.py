"""End-to-end tests for the SessionController over the demo directory."""

from unittest.mock import MagicMock

from bankist.application.use_cases.session_controller import (
    SessionController,
)
from bankist.domain.services.ledger import compute_ledger_summary
from bankist.infrastructure.demo_accounts import build_demo_accounts
from bankist.infrastructure.in_memory_directory import (
    InMemoryAccountDirectory,
)
from bankist.infrastructure.sqlalchemy_directory import (
    SqlAlchemyAccountDirectory,
)


def _build_controller(directory) -> tuple[SessionController, MagicMock]:
    presenter = MagicMock()
    controller = SessionController(
        directory,
        presenter,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )
    return controller, presenter


def _assert_balance_invariant(directory) -> None:
    for account in directory.list_accounts():
        summary = compute_ledger_summary(account)
        assert summary.balance == sum(account.movements)
        assert summary.balance == summary.income + summary.outgoing


def _run_session(directory) -> None:
    controller, presenter = _build_controller(directory)

    assert controller.login("js", "1111") is True
    assert controller.transfer("100", "jd") is True
    assert controller.request_loan("25000") is True
    assert controller.request_loan("1000000") is False
    assert controller.toggle_sort() is True
    assert controller.sort_active is True
    _assert_balance_invariant(directory)

    jonas = directory.find_by_user_name("js")
    jessica = directory.find_by_user_name("jd")
    assert jonas.movements[-2:] == [-100, 25000]
    assert sum(jonas.movements) == 3840 - 100 + 25000
    assert sum(jessica.movements) == 11720 + 100

    assert controller.close_account("js", "1111") is True
    assert controller.current_account is None
    assert len(directory) == 3
    assert controller.transfer("100", "jd") is False
    presenter.set_ui_visibility.assert_called_with(False)


def test_full_session_with_memory_directory() -> None:
    """Login, transfer, loan, sort and close on the memory backend."""
    _run_session(
        InMemoryAccountDirectory(build_demo_accounts(), logger=MagicMock())
    )


def test_full_session_with_sqlalchemy_directory() -> None:
    """The same session behaves identically on the SQL backend."""
    _run_session(
        SqlAlchemyAccountDirectory(build_demo_accounts(), logger=MagicMock())
    )


def test_login_resets_sort_mode() -> None:
    """Logging in again starts with insertion order."""
    controller, _ = _build_controller(
        InMemoryAccountDirectory(build_demo_accounts(), logger=MagicMock())
    )
    controller.login("js", "1111")
    controller.toggle_sort()

    controller.login("jd", "2222")

    assert controller.sort_active is False
    assert controller.current_account.owner == "Jessica Davis"
    assert controller.state.is_logged_in is True


def test_non_ascii_digits_are_not_accepted_as_numbers() -> None:
    """PINs and amounts typed with non-ASCII digits are rejected."""
    directory = InMemoryAccountDirectory(
        build_demo_accounts(), logger=MagicMock()
    )
    controller, presenter = _build_controller(directory)

    assert controller.login("js", "١١١١") is False
    assert controller.current_account is None

    assert controller.login("js", "1111") is True
    assert controller.transfer("١٠٠", "jd") is False
    assert sum(directory.find_by_user_name("jd").movements) == 11720
    presenter.notify_failure.assert_called_once()


def test_hex_amounts_are_read_as_integers() -> None:
    """A hex amount transfers its integer value."""
    directory = InMemoryAccountDirectory(
        build_demo_accounts(), logger=MagicMock()
    )
    controller, _ = _build_controller(directory)
    controller.login("js", "1111")

    assert controller.transfer("0x64", "jd") is True
    assert directory.find_by_user_name("jd").movements[-1] == 100
