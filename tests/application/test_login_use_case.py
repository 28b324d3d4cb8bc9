"""Tests for the LoginUseCase."""

from unittest.mock import MagicMock

from bankist.application.use_cases.login import LoginUseCase
from bankist.application.use_cases.session_state import SessionState
from bankist.infrastructure.demo_accounts import build_demo_accounts
from bankist.infrastructure.in_memory_directory import (
    InMemoryAccountDirectory,
)


def _build_state() -> SessionState:
    directory = InMemoryAccountDirectory(
        build_demo_accounts(),
        logger=MagicMock(),
    )
    return SessionState(directory=directory)


def _build_use_case(presenter: MagicMock) -> LoginUseCase:
    return LoginUseCase(
        presenter,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )


def test_login_shows_dashboard_with_snapshot() -> None:
    """A matching PIN logs the user in and pushes the full snapshot."""
    presenter = MagicMock()
    state = _build_state()
    state.sort_active = True

    result = _build_use_case(presenter).execute(state, "js", "1111")

    assert result is True
    assert state.current_account.owner == "Jonas Schmedtmann"
    assert state.sort_active is False
    presenter.present_welcome.assert_called_once_with("Jonas")
    presenter.set_ui_visibility.assert_called_once_with(True)
    presenter.present_balance.assert_called_once_with(3840)
    rows, sorted_view = presenter.present_movements.call_args.args
    assert [row.value for row in rows][:2] == [200, 450]
    assert sorted_view is False
    income, outgoing_abs, interest = presenter.present_summary.call_args.args
    assert (income, outgoing_abs) == (5020, 1180)
    assert round(interest, 2) == 59.4


def test_login_with_wrong_pin_changes_nothing() -> None:
    """A wrong PIN leaves the session untouched and shows nothing."""
    presenter = MagicMock()
    usage_logger = MagicMock()
    state = _build_state()
    use_case = LoginUseCase(
        presenter,
        logger=MagicMock(),
        usage_logger=usage_logger,
    )

    result = use_case.execute(state, "js", "2222")

    assert result is False
    assert state.current_account is None
    assert presenter.method_calls == []
    usage_logger.warning.assert_called_once()


def test_login_with_unknown_or_uppercase_user_is_rejected() -> None:
    """Lookups are exact and case-sensitive."""
    presenter = MagicMock()
    state = _build_state()
    use_case = _build_use_case(presenter)

    assert use_case.execute(state, "zz", "1111") is False
    assert use_case.execute(state, "JS", "1111") is False
    assert use_case.execute(state, "js", "abc") is False
    assert state.current_account is None


def test_failed_login_keeps_previous_account() -> None:
    """A failed attempt does not replace the logged-in account."""
    presenter = MagicMock()
    state = _build_state()
    use_case = _build_use_case(presenter)
    use_case.execute(state, "js", "1111")

    use_case.execute(state, "jd", "0000")

    assert state.current_account.user_name == "js"
