"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from bankist.domain.constants import DEFAULT_CURRENCY_CODE


@dataclass(frozen=True)
class BankistSettings:
    """Settings for the dashboard runtime.

    Attributes:
        directory_backend: Directory backend identifier (memory or sqlalchemy).
        currency_code: Currency code appended to displayed amounts.
    """

    directory_backend: str = "memory"
    currency_code: str = DEFAULT_CURRENCY_CODE

    @classmethod
    def from_env(cls) -> "BankistSettings":
        """Build settings from environment variables and a local .env file.

        Returns:
            BankistSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("BANKIST_DIRECTORY_BACKEND", "memory")
        currency = os.getenv("BANKIST_CURRENCY", DEFAULT_CURRENCY_CODE)
        return cls(
            directory_backend=backend.strip().lower() or "memory",
            currency_code=currency.strip().upper() or DEFAULT_CURRENCY_CODE,
        )


__all__ = ["BankistSettings"]
