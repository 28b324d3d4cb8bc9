"""Composition root for wiring infrastructure adapters."""

from bankist.application.ports.account_directory import AccountDirectoryPort
from bankist.application.ports.presentation import PresentationPort
from bankist.application.use_cases.session_controller import (
    SessionController,
)
from bankist.infrastructure.demo_accounts import build_demo_accounts
from bankist.infrastructure.directory_factory import create_account_directory
from bankist.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from bankist.infrastructure.settings import BankistSettings


def build_account_directory(
    settings: BankistSettings | None = None,
) -> AccountDirectoryPort:
    """Return a directory seeded with fresh demo accounts."""
    return create_account_directory(
        build_demo_accounts(),
        logger=get_app_logger(),
        settings=settings or BankistSettings.from_env(),
    )


def build_session_controller(
    presenter: PresentationPort,
    settings: BankistSettings | None = None,
) -> SessionController:
    """Return a session controller over a new demo directory."""
    return SessionController(
        build_account_directory(settings),
        presenter,
        logger=get_app_logger(),
        usage_logger=get_usage_logger(),
    )


__all__ = ["build_account_directory", "build_session_controller"]
