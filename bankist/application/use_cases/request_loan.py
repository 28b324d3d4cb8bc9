"""Use case granting a loan to the logged-in account."""

from bankist.application.ports.presentation import PresentationPort
from bankist.application.use_cases.ledger_snapshot import (
    publish_ledger_snapshot,
)
from bankist.application.use_cases.session_state import SessionState
from bankist.domain.models import LedgerTransaction
from bankist.domain.services.parsing import parse_number
from bankist.domain.services.validation import validate_loan
from bankist.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


LOAN_REJECTED_MESSAGE = "Requested amount not approved"


class RequestLoanUseCase:
    """Credit a loan when a past deposit covers a tenth of it."""

    def __init__(
        self,
        presenter: PresentationPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        self._presenter = presenter
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(self, state: SessionState, amount_text: str) -> bool:
        """Validate and credit a loan.

        Args:
            state: Session state holding the borrowing account.
            amount_text: Raw amount input.

        Returns:
            bool: True when the loan was credited.
        """
        if not state.is_logged_in:
            self._logger.warning("Loan requested without a logged-in user")
            return False

        account = state.current_account
        amount = parse_number(amount_text)
        if not validate_loan(account, amount):
            self._usage_logger.warning(
                f"Rejected loan of {amount} for '{account.user_name}'"
            )
            self._presenter.notify_failure(LOAN_REJECTED_MESSAGE)
            return False

        state.directory.apply_transaction(
            LedgerTransaction.loan(account, amount)
        )
        self._logger.info(f"Granted loan of {amount} to '{account.user_name}'")
        publish_ledger_snapshot(account, self._presenter, state.sort_active)
        return True


__all__ = ["RequestLoanUseCase", "LOAN_REJECTED_MESSAGE"]
