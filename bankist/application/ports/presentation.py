"""Presentation port fed by the session use cases.

Interface adapters implement this protocol to render ledger data. The
application layer only pushes computed values through it and never
depends on how they are displayed.
"""

from typing import Protocol

from bankist.domain.models import MovementRow


class PresentationPort(Protocol):
    """Port receiving everything the dashboard displays."""

    def present_movements(
        self,
        rows: list[MovementRow],
        sorted_view: bool,
    ) -> None:
        """Render movement rows numbered in display order.

        Args:
            rows: Movement rows to render.
            sorted_view: Whether rows are ordered by value.
        """

    def present_balance(self, value: float) -> None:
        """Render the account balance."""

    def present_summary(
        self,
        income: float,
        outgoing_abs: float,
        interest: float,
    ) -> None:
        """Render income, outgoing and interest totals."""

    def present_welcome(self, owner_first_name: str) -> None:
        """Render the welcome message for the logged-in owner."""

    def set_ui_visibility(self, visible: bool) -> None:
        """Show or hide the account dashboard."""

    def notify_failure(self, message: str) -> None:
        """Tell the user an operation was rejected."""


__all__ = ["PresentationPort"]
