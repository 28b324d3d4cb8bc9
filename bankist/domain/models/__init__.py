"""Domain models package."""

from .accounts import Account
from .ledger import (
    DEPOSIT,
    WITHDRAWAL,
    LedgerEntry,
    LedgerSummary,
    LedgerTransaction,
    MovementRow,
)

__all__ = [
    "Account",
    "DEPOSIT",
    "WITHDRAWAL",
    "LedgerEntry",
    "LedgerSummary",
    "LedgerTransaction",
    "MovementRow",
]
