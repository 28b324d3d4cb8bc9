"""Domain exceptions."""


class BankistError(Exception):
    """Base exception for bankist errors."""


class AccountNotFoundError(BankistError):
    """Raised when a user name matches no account in the directory."""

    def __init__(self, user_name: str | None) -> None:
        super().__init__(f"No account found for user name: {user_name}")
        self.user_name = user_name


__all__ = ["BankistError", "AccountNotFoundError"]
