"""Helper pushing an account's ledger figures to the presentation port."""

from bankist.application.ports.presentation import PresentationPort
from bankist.domain.models import Account, LedgerSummary
from bankist.domain.services.ledger import (
    compute_ledger_summary,
    display_movements,
)


def publish_ledger_snapshot(
    account: Account,
    presenter: PresentationPort,
    sort_active: bool = False,
) -> LedgerSummary:
    """Recompute and present movements, balance and summary.

    Args:
        account: Account to present.
        presenter: Port rendering the figures.
        sort_active: Whether movements are displayed sorted by value.

    Returns:
        LedgerSummary: Figures sent to the presenter.
    """
    summary = compute_ledger_summary(account)
    presenter.present_movements(
        display_movements(account.movements, sort=sort_active),
        sort_active,
    )
    presenter.present_balance(summary.balance)
    presenter.present_summary(
        summary.income,
        summary.outgoing_abs,
        summary.interest,
    )
    return summary


__all__ = ["publish_ledger_snapshot"]
