"""Domain package for ledger rules and core models."""

from .constants import (
    DEFAULT_CURRENCY_CODE,
    INTEREST_PAYOUT_THRESHOLD,
    LOAN_DEPOSIT_RATIO,
)
from .errors import AccountNotFoundError, BankistError
from .models import (
    Account,
    LedgerEntry,
    LedgerSummary,
    LedgerTransaction,
    MovementRow,
)
from .services import (
    assign_user_names,
    compute_ledger_summary,
    compute_user_name,
    display_movements,
    parse_number,
    validate_loan,
    validate_transfer,
)

__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "INTEREST_PAYOUT_THRESHOLD",
    "LOAN_DEPOSIT_RATIO",
    "AccountNotFoundError",
    "BankistError",
    "Account",
    "LedgerEntry",
    "LedgerSummary",
    "LedgerTransaction",
    "MovementRow",
    "assign_user_names",
    "compute_ledger_summary",
    "compute_user_name",
    "display_movements",
    "parse_number",
    "validate_loan",
    "validate_transfer",
]
