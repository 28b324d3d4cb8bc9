"""Presenter recording what the Streamlit dashboard should display."""

from dataclasses import dataclass, field

from bankist.application.ports.presentation import PresentationPort
from bankist.domain.constants import DEFAULT_CURRENCY_CODE
from bankist.domain.models import MovementRow


@dataclass
class DashboardView:
    """Latest values pushed by the session use cases."""

    visible: bool = False
    welcome: str = "Log in to get started"
    rows: list[MovementRow] = field(default_factory=list)
    sorted_view: bool = False
    balance: float = 0.0
    income: float = 0.0
    outgoing_abs: float = 0.0
    interest: float = 0.0


class DashboardPresenter(PresentationPort):
    """PresentationPort implementation backing the Streamlit page.

    Streamlit reruns the whole script on every interaction, so the
    presenter only records state; the page renders it afterwards.
    """

    def __init__(self, currency_code: str = DEFAULT_CURRENCY_CODE) -> None:
        self.currency_code = currency_code
        self.view = DashboardView()
        self._failures: list[str] = []

    def present_movements(
        self,
        rows: list[MovementRow],
        sorted_view: bool,
    ) -> None:
        self.view.rows = list(rows)
        self.view.sorted_view = sorted_view

    def present_balance(self, value: float) -> None:
        self.view.balance = value

    def present_summary(
        self,
        income: float,
        outgoing_abs: float,
        interest: float,
    ) -> None:
        self.view.income = income
        self.view.outgoing_abs = outgoing_abs
        self.view.interest = interest

    def present_welcome(self, owner_first_name: str) -> None:
        self.view.welcome = f"Welcome back {owner_first_name}"

    def set_ui_visibility(self, visible: bool) -> None:
        if not visible:
            self.view = DashboardView()
        self.view.visible = visible

    def notify_failure(self, message: str) -> None:
        self._failures.append(message)

    def consume_failures(self) -> list[str]:
        """Return pending failure messages and forget them."""
        failures, self._failures = self._failures, []
        return failures


__all__ = ["DashboardView", "DashboardPresenter"]
