"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from bankist.adapters.interface.streamlit.presenter import DashboardPresenter
from bankist.application.use_cases.session_controller import (
    SessionController,
)
from bankist.domain.models import MovementRow
from bankist.domain.services.ledger import running_balances
from bankist.infrastructure.container import build_session_controller
from bankist.infrastructure.settings import BankistSettings


_CONTROLLER_KEY = "bankist_controller"
_PRESENTER_KEY = "bankist_presenter"


def _build_session() -> tuple[SessionController, DashboardPresenter]:
    """Build the presenter and controller for a new browser session."""
    settings = BankistSettings.from_env()
    presenter = DashboardPresenter(currency_code=settings.currency_code)
    controller = build_session_controller(presenter, settings=settings)
    return controller, presenter


def _get_session() -> tuple[SessionController, DashboardPresenter]:
    """Return the session objects stored in Streamlit session state."""
    if _CONTROLLER_KEY not in st.session_state:
        controller, presenter = _build_session()
        st.session_state[_CONTROLLER_KEY] = controller
        st.session_state[_PRESENTER_KEY] = presenter
    return st.session_state[_CONTROLLER_KEY], st.session_state[_PRESENTER_KEY]


def _format_currency(value: float, currency_code: str) -> str:
    """Format currency values for display."""
    return f"{value:,.2f} {currency_code}"


def _movement_table_data(
    rows: Sequence[MovementRow],
    currency_code: str,
) -> list[dict[str, str | int]]:
    """Prepare movement rows for the table, latest row on top."""
    return [
        {
            "#": row.number,
            "Type": row.kind,
            "Amount": _format_currency(row.value, currency_code),
        }
        for row in reversed(rows)
    ]


def _prepare_balance_chart_data(
    movements: Sequence[float],
) -> list[dict[str, float | int]]:
    """Prepare Altair data for the running balance chart."""
    return [
        {"movement": index, "balance": balance}
        for index, balance in enumerate(running_balances(movements), start=1)
    ]


def _render_balance_chart(
    movements: Sequence[float],
    currency_code: str,
) -> None:
    """Render the balance after each movement."""
    data = _prepare_balance_chart_data(movements)
    if not data:
        st.info("No movements to chart yet.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        color="#39b385",
    ).encode(
        x=alt.X("movement:O", title="Movement"),
        y=alt.Y("balance:Q", title=f"Balance ({currency_code})"),
        tooltip=[
            alt.Tooltip("movement:O"),
            alt.Tooltip("balance:Q", format=",.2f"),
        ],
    )
    st.subheader("Balance history")
    st.altair_chart(chart, width="stretch")


def _render_login(controller: SessionController) -> None:
    """Render the login form and handle submissions."""
    with st.sidebar.form("login", clear_on_submit=True):
        st.subheader("Log in")
        user_name = st.text_input("User")
        pin = st.text_input("PIN", type="password")
        if st.form_submit_button("Log in") and controller.login(
            user_name,
            pin,
        ):
            st.rerun()


def _render_operations(controller: SessionController) -> None:
    """Render transfer, loan, close and sort controls."""
    with st.sidebar.form("transfer", clear_on_submit=True):
        st.subheader("Transfer money")
        recipient = st.text_input("Transfer to")
        amount = st.text_input("Amount")
        if st.form_submit_button("Transfer"):
            controller.transfer(amount, recipient)

    with st.sidebar.form("loan", clear_on_submit=True):
        st.subheader("Request loan")
        loan_amount = st.text_input("Loan amount")
        if st.form_submit_button("Request"):
            controller.request_loan(loan_amount)

    with st.sidebar.form("close", clear_on_submit=True):
        st.subheader("Close account")
        close_user = st.text_input("Confirm user")
        close_pin = st.text_input("Confirm PIN", type="password")
        if st.form_submit_button("Close") and controller.close_account(
            close_user,
            close_pin,
        ):
            st.rerun()

    if st.sidebar.button("Sort movements"):
        controller.toggle_sort()


def _render_dashboard(
    controller: SessionController,
    presenter: DashboardPresenter,
) -> None:
    """Render the account dashboard from the presenter view."""
    for message in presenter.consume_failures():
        st.error(message)

    view = presenter.view
    currency_code = presenter.currency_code
    if not view.visible or controller.current_account is None:
        st.info(view.welcome)
        return

    st.subheader(view.welcome)
    st.caption(f"As of {date.today():%d/%m/%Y}")

    balance_col, in_col, out_col, interest_col = st.columns(4)
    balance_col.metric(
        "Current balance",
        _format_currency(view.balance, currency_code),
    )
    in_col.metric("In", _format_currency(view.income, currency_code))
    out_col.metric("Out", _format_currency(view.outgoing_abs, currency_code))
    interest_col.metric(
        "Interest",
        _format_currency(view.interest, currency_code),
    )

    table_col, chart_col = st.columns(2)
    with table_col:
        st.subheader("Movements")
        st.caption("Sorted by amount" if view.sorted_view else "Latest first")
        st.dataframe(
            _movement_table_data(view.rows, currency_code),
            width="stretch",
            hide_index=True,
        )
    with chart_col:
        _render_balance_chart(
            controller.current_account.movements,
            currency_code,
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Bankist", layout="wide")
    st.title("Bankist")

    controller, presenter = _get_session()
    _render_login(controller)
    if controller.current_account is not None:
        _render_operations(controller)
    _render_dashboard(controller, presenter)


if __name__ == "__main__":  # pragma: no cover
    main()
