"""Session controller routing dashboard events to use cases.

The controller owns one ``SessionState`` and hands it to the use case
matching each incoming event. Events are handled one at a time, each to
completion, before the next one is accepted.
"""

from bankist.application.ports.account_directory import AccountDirectoryPort
from bankist.application.ports.presentation import PresentationPort
from bankist.application.use_cases.close_account import CloseAccountUseCase
from bankist.application.use_cases.login import LoginUseCase
from bankist.application.use_cases.request_loan import RequestLoanUseCase
from bankist.application.use_cases.session_state import SessionState
from bankist.application.use_cases.toggle_sort import ToggleSortUseCase
from bankist.application.use_cases.transfer_funds import (
    TransferFundsUseCase,
)
from bankist.domain.models import Account
from bankist.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class SessionController:
    """Entry point for login, transfer, loan, close and sort events."""

    def __init__(
        self,
        directory: AccountDirectoryPort,
        presenter: PresentationPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the controller.

        Args:
            directory: Directory holding the session's accounts.
            presenter: Port rendering the dashboard.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for session activity.
        """
        resolved_logger = logger or get_app_logger()
        resolved_usage = usage_logger or get_usage_logger()
        self._state = SessionState(directory=directory)
        self._login = LoginUseCase(
            presenter,
            logger=resolved_logger,
            usage_logger=resolved_usage,
        )
        self._transfer = TransferFundsUseCase(
            presenter,
            logger=resolved_logger,
            usage_logger=resolved_usage,
        )
        self._loan = RequestLoanUseCase(
            presenter,
            logger=resolved_logger,
            usage_logger=resolved_usage,
        )
        self._close = CloseAccountUseCase(
            presenter,
            logger=resolved_logger,
            usage_logger=resolved_usage,
        )
        self._sort = ToggleSortUseCase(presenter, logger=resolved_logger)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_account(self) -> Account | None:
        return self._state.current_account

    @property
    def sort_active(self) -> bool:
        return self._state.sort_active

    def login(self, user_name_text: str, pin_text: str) -> bool:
        return self._login.execute(self._state, user_name_text, pin_text)

    def transfer(self, amount_text: str, recipient_text: str) -> bool:
        return self._transfer.execute(self._state, amount_text, recipient_text)

    def request_loan(self, amount_text: str) -> bool:
        return self._loan.execute(self._state, amount_text)

    def close_account(self, user_name_text: str, pin_text: str) -> bool:
        return self._close.execute(self._state, user_name_text, pin_text)

    def toggle_sort(self) -> bool:
        return self._sort.execute(self._state)


__all__ = ["SessionController"]
