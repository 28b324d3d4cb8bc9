"""Use case closing the logged-in account."""

from bankist.application.ports.presentation import PresentationPort
from bankist.application.use_cases.session_state import SessionState
from bankist.domain.services.parsing import parse_number
from bankist.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class CloseAccountUseCase:
    """Remove the logged-in account after confirming its credentials."""

    def __init__(
        self,
        presenter: PresentationPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        self._presenter = presenter
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        state: SessionState,
        user_name_text: str,
        pin_text: str,
    ) -> bool:
        """Close the account when user name and PIN both match.

        Args:
            state: Session state holding the account to close.
            user_name_text: Raw user name confirmation.
            pin_text: Raw PIN confirmation.

        Returns:
            bool: True when the account was removed and the user logged out.
        """
        if not state.is_logged_in:
            self._logger.warning("Closure requested without a logged-in user")
            return False

        account = state.current_account
        pin = parse_number(pin_text)
        if user_name_text != account.user_name or pin != account.pin:
            self._usage_logger.warning(
                f"Rejected closure confirmation for '{account.user_name}'"
            )
            return False

        state.directory.remove_by_user_name(account.user_name)
        state.current_account = None
        self._presenter.set_ui_visibility(False)
        self._usage_logger.info(f"Account '{account.user_name}' closed")
        self._logger.info(
            f"Directory now holds {len(state.directory)} accounts"
        )
        return True


__all__ = ["CloseAccountUseCase"]
