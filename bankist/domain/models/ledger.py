"""Domain models for ledger figures and transactions."""

from dataclasses import dataclass

from bankist.domain.models.accounts import Account


DEPOSIT = "deposit"
WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class LedgerSummary:
    """Figures derived from an account's movements.

    Attributes:
        balance: Sum of every movement.
        income: Sum of deposits.
        outgoing: Sum of withdrawals, kept negative.
        interest: Interest paid on deposits above the payout threshold.
    """

    balance: float
    income: float
    outgoing: float
    interest: float

    @property
    def outgoing_abs(self) -> float:
        """Return the outgoing total as a positive amount."""
        return abs(self.outgoing)


@dataclass(frozen=True)
class MovementRow:
    """Movement prepared for display."""

    number: int
    value: float
    kind: str


@dataclass(frozen=True)
class LedgerEntry:
    """Single movement to append to an account."""

    account: Account
    amount: float


@dataclass(frozen=True)
class LedgerTransaction:
    """Movements that must be committed together."""

    entries: tuple[LedgerEntry, ...]

    @classmethod
    def transfer(
        cls,
        sender: Account,
        receiver: Account,
        amount: float,
    ) -> "LedgerTransaction":
        """Build the debit/credit pair for a transfer."""
        return cls(
            entries=(
                LedgerEntry(account=sender, amount=-amount),
                LedgerEntry(account=receiver, amount=amount),
            )
        )

    @classmethod
    def loan(cls, account: Account, amount: float) -> "LedgerTransaction":
        """Build the credit for a granted loan."""
        return cls(entries=(LedgerEntry(account=account, amount=amount),))


__all__ = [
    "DEPOSIT",
    "WITHDRAWAL",
    "LedgerSummary",
    "MovementRow",
    "LedgerEntry",
    "LedgerTransaction",
]
