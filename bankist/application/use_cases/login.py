"""Use case authenticating a user into the dashboard."""

from bankist.application.ports.presentation import PresentationPort
from bankist.application.use_cases.ledger_snapshot import (
    publish_ledger_snapshot,
)
from bankist.application.use_cases.session_state import SessionState
from bankist.domain.services.parsing import parse_number
from bankist.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class LoginUseCase:
    """Log a user in with a user name and PIN."""

    def __init__(
        self,
        presenter: PresentationPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            presenter: Port rendering the dashboard.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for session activity.
        """
        self._presenter = presenter
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        state: SessionState,
        user_name_text: str,
        pin_text: str,
    ) -> bool:
        """Authenticate and show the account dashboard.

        A failed attempt leaves the session untouched and shows nothing to
        the user; it is only recorded in the usage log.

        Args:
            state: Session state to update.
            user_name_text: Raw user name input.
            pin_text: Raw PIN input.

        Returns:
            bool: True when the user is logged in.
        """
        account = state.directory.find_by_user_name(user_name_text)
        pin = parse_number(pin_text)
        if account is None or account.pin != pin:
            self._usage_logger.warning(
                f"Rejected login attempt for user name '{user_name_text}'"
            )
            return False

        state.current_account = account
        state.sort_active = False
        self._presenter.present_welcome(account.first_name)
        self._presenter.set_ui_visibility(True)
        summary = publish_ledger_snapshot(account, self._presenter)
        self._usage_logger.info(f"User '{account.user_name}' logged in")
        self._logger.debug(
            f"Balance for '{account.user_name}' at login: {summary.balance}"
        )
        return True


__all__ = ["LoginUseCase"]
