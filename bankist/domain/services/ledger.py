"""Domain services computing ledger figures from movements."""

from collections.abc import Sequence
from itertools import accumulate

from bankist.domain.constants import INTEREST_PAYOUT_THRESHOLD
from bankist.domain.models import (
    DEPOSIT,
    WITHDRAWAL,
    Account,
    LedgerSummary,
    MovementRow,
)


def compute_balance(movements: Sequence[float]) -> float:
    """Return the sum of all movements."""
    return sum(movements, 0.0)


def compute_income(movements: Sequence[float]) -> float:
    """Return the sum of deposits."""
    return sum((value for value in movements if value > 0), 0.0)


def compute_outgoing(movements: Sequence[float]) -> float:
    """Return the sum of withdrawals, as a negative amount."""
    return sum((value for value in movements if value < 0), 0.0)


def compute_interest(
    movements: Sequence[float],
    interest_rate: float,
) -> float:
    """Return the interest paid on deposits.

    Interest is computed per deposit; a deposit whose interest does not
    exceed the payout threshold earns nothing.

    Args:
        movements: Signed account movements.
        interest_rate: Interest rate in percent.

    Returns:
        float: Total interest over qualifying deposits.
    """
    interests = (
        deposit * interest_rate / 100
        for deposit in movements
        if deposit > 0
    )
    return sum(
        (value for value in interests if value > INTEREST_PAYOUT_THRESHOLD),
        0.0,
    )


def compute_ledger_summary(account: Account) -> LedgerSummary:
    """Recompute every ledger figure for an account.

    Args:
        account: Account whose current movements are summarized.

    Returns:
        LedgerSummary: Balance, income, outgoing and interest.
    """
    movements = account.movements
    return LedgerSummary(
        balance=compute_balance(movements),
        income=compute_income(movements),
        outgoing=compute_outgoing(movements),
        interest=compute_interest(movements, account.interest_rate),
    )


def display_movements(
    movements: Sequence[float],
    sort: bool = False,
) -> list[MovementRow]:
    """Return movements as numbered display rows.

    Args:
        movements: Signed movements in insertion order.
        sort: When True, rows are ordered by ascending value.

    Returns:
        list[MovementRow]: Rows numbered from 1 in display order.
    """
    ordered = sorted(movements) if sort else list(movements)
    return [
        MovementRow(
            number=index,
            value=value,
            kind=DEPOSIT if value > 0 else WITHDRAWAL,
        )
        for index, value in enumerate(ordered, start=1)
    ]


def running_balances(movements: Sequence[float]) -> list[float]:
    """Return the balance after each movement, in insertion order."""
    return list(accumulate(movements, initial=0.0))[1:]


__all__ = [
    "compute_balance",
    "compute_income",
    "compute_outgoing",
    "compute_interest",
    "compute_ledger_summary",
    "display_movements",
    "running_balances",
]
