"""Tests for infrastructure settings."""

from bankist.infrastructure import settings as settings_module
from bankist.infrastructure.settings import BankistSettings


def test_from_env_uses_defaults(monkeypatch) -> None:
    """Missing variables fall back to the memory backend and EUR."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("BANKIST_DIRECTORY_BACKEND", raising=False)
    monkeypatch.delenv("BANKIST_CURRENCY", raising=False)

    settings = BankistSettings.from_env()

    assert settings == BankistSettings(
        directory_backend="memory",
        currency_code="EUR",
    )


def test_from_env_normalizes_values(monkeypatch) -> None:
    """Values are trimmed and case-normalized."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("BANKIST_DIRECTORY_BACKEND", " SQLAlchemy ")
    monkeypatch.setenv("BANKIST_CURRENCY", "usd")

    settings = BankistSettings.from_env()

    assert settings.directory_backend == "sqlalchemy"
    assert settings.currency_code == "USD"


def test_from_env_loads_dotenv(monkeypatch) -> None:
    """The .env file is read before the environment."""
    calls = []
    monkeypatch.setattr(
        settings_module.dotenv,
        "load_dotenv",
        lambda: calls.append(True),
    )

    BankistSettings.from_env()

    assert calls == [True]
