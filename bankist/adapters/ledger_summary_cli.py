"""CLI adapter printing the ledger summary of every demo account."""

from bankist.domain.services.ledger import compute_ledger_summary
from bankist.infrastructure.container import build_account_directory
from bankist.infrastructure.logging.logger import get_app_logger
from bankist.infrastructure.settings import BankistSettings


def main() -> None:
    """Print balance, income, outgoing and interest per account."""
    logger = get_app_logger()
    settings = BankistSettings.from_env()
    directory = build_account_directory(settings)
    currency = settings.currency_code

    for account in directory.list_accounts():
        summary = compute_ledger_summary(account)
        print(
            f"{account.user_name} ({account.owner}): "
            f"balance={summary.balance:.2f} {currency}, "
            f"in={summary.income:.2f} {currency}, "
            f"out={summary.outgoing_abs:.2f} {currency}, "
            f"interest={summary.interest:.2f} {currency}"
        )

    logger.info(f"Summarized {len(directory)} accounts")


if __name__ == "__main__":  # pragma: no cover
    main()
