"""Domain validation rules for transfers and loans."""

from bankist.domain.constants import LOAN_DEPOSIT_RATIO
from bankist.domain.models.accounts import Account
from bankist.domain.services.ledger import compute_balance


def validate_transfer(
    sender: Account,
    receiver: Account | None,
    amount: float,
) -> bool:
    """Return True when a transfer may proceed.

    Args:
        sender: Account debited by the transfer.
        receiver: Account credited, or None when the lookup failed.
        amount: Requested amount; NaN never validates.

    Returns:
        bool: True when the receiver exists, the amount is positive,
        the sender can cover it and the receiver is another account.
    """
    if receiver is None:
        return False
    return (
        amount > 0
        and compute_balance(sender.movements) >= amount
        and receiver.user_name != sender.user_name
    )


def validate_loan(account: Account, amount: float) -> bool:
    """Return True when a loan may be granted.

    The bank requires one movement of at least a tenth of the requested
    amount; withdrawals are negative and never qualify.

    Args:
        account: Account requesting the loan.
        amount: Requested amount; NaN never validates.

    Returns:
        bool: True when the amount is positive and covered by a deposit.
    """
    return amount > 0 and any(
        movement >= amount * LOAN_DEPOSIT_RATIO
        for movement in account.movements
    )


__all__ = ["validate_transfer", "validate_loan"]
