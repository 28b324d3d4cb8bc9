"""Domain services package."""

from .ledger import (
    compute_balance,
    compute_income,
    compute_interest,
    compute_ledger_summary,
    compute_outgoing,
    display_movements,
    running_balances,
)
from .parsing import parse_number
from .user_names import assign_user_names, compute_user_name
from .validation import validate_loan, validate_transfer

__all__ = [
    "compute_balance",
    "compute_income",
    "compute_interest",
    "compute_ledger_summary",
    "compute_outgoing",
    "display_movements",
    "running_balances",
    "parse_number",
    "assign_user_names",
    "compute_user_name",
    "validate_loan",
    "validate_transfer",
]
