"""Domain constants for ledger rules."""

DEFAULT_CURRENCY_CODE = "EUR"

# Deposit interest below or equal to this amount is not paid.
INTEREST_PAYOUT_THRESHOLD = 1.0

# A loan needs one movement of at least this share of the requested amount.
LOAN_DEPOSIT_RATIO = 0.1


__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "INTEREST_PAYOUT_THRESHOLD",
    "LOAN_DEPOSIT_RATIO",
]
