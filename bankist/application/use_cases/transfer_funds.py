"""Use case moving money between two accounts."""

from bankist.application.ports.presentation import PresentationPort
from bankist.application.use_cases.ledger_snapshot import (
    publish_ledger_snapshot,
)
from bankist.application.use_cases.session_state import SessionState
from bankist.domain.models import LedgerTransaction
from bankist.domain.services.parsing import parse_number
from bankist.domain.services.validation import validate_transfer
from bankist.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


TRANSFER_FAILED_MESSAGE = (
    "Transfer unsuccessful, please check the username/amount and try again"
)


class TransferFundsUseCase:
    """Transfer an amount from the logged-in account to a recipient."""

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
        amount_text: str,
        recipient_text: str,
    ) -> bool:
        """Validate and apply a transfer.

        Args:
            state: Session state holding the sender account.
            amount_text: Raw amount input.
            recipient_text: Raw recipient user name input.

        Returns:
            bool: True when both movements were recorded.
        """
        if not state.is_logged_in:
            self._logger.warning("Transfer requested without a logged-in user")
            return False

        sender = state.current_account
        amount = parse_number(amount_text)
        receiver = state.directory.find_by_user_name(recipient_text)
        if not validate_transfer(sender, receiver, amount):
            self._usage_logger.warning(
                f"Rejected transfer of {amount} from '{sender.user_name}' "
                f"to '{recipient_text}'"
            )
            self._presenter.notify_failure(TRANSFER_FAILED_MESSAGE)
            return False

        state.directory.apply_transaction(
            LedgerTransaction.transfer(sender, receiver, amount)
        )
        self._logger.info(
            f"Transferred {amount} from '{sender.user_name}' "
            f"to '{receiver.user_name}'"
        )
        publish_ledger_snapshot(sender, self._presenter, state.sort_active)
        return True


__all__ = ["TransferFundsUseCase", "TRANSFER_FAILED_MESSAGE"]
