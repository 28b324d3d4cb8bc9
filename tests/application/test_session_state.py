"""Tests for the SessionState login flag."""

from unittest.mock import MagicMock

import pytest

from bankist.application.use_cases.close_account import CloseAccountUseCase
from bankist.application.use_cases.request_loan import RequestLoanUseCase
from bankist.application.use_cases.session_state import SessionState
from bankist.application.use_cases.toggle_sort import ToggleSortUseCase
from bankist.application.use_cases.transfer_funds import TransferFundsUseCase
from bankist.domain.models import Account


def test_is_logged_in_follows_current_account() -> None:
    """The flag mirrors whether an account is attached to the session."""
    state = SessionState(directory=MagicMock())
    assert state.is_logged_in is False

    state.current_account = Account(owner="Sarah Smith", user_name="ss")
    assert state.is_logged_in is True

    state.current_account = None
    assert state.is_logged_in is False


@pytest.mark.parametrize(
    "run",
    [
        lambda presenter, state: TransferFundsUseCase(
            presenter, logger=MagicMock(), usage_logger=MagicMock()
        ).execute(state, "100", "jd"),
        lambda presenter, state: RequestLoanUseCase(
            presenter, logger=MagicMock(), usage_logger=MagicMock()
        ).execute(state, "100"),
        lambda presenter, state: CloseAccountUseCase(
            presenter, logger=MagicMock(), usage_logger=MagicMock()
        ).execute(state, "ss", "4444"),
        lambda presenter, state: ToggleSortUseCase(
            presenter, logger=MagicMock()
        ).execute(state),
    ],
)
def test_use_cases_stop_when_session_is_logged_out(run) -> None:
    """Session events are ignored while nobody is logged in."""
    presenter = MagicMock()
    directory = MagicMock()
    state = SessionState(directory=directory)

    assert run(presenter, state) is False
    assert presenter.mock_calls == []
    directory.apply_transaction.assert_not_called()
    directory.remove_by_user_name.assert_not_called()
