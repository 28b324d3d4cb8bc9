"""Domain models for bank accounts."""

from dataclasses import dataclass, field


@dataclass
class Account:
    """Bank account with its movement history.

    Attributes:
        owner: Full display name of the account holder.
        movements: Signed amounts in insertion order; deposits are positive.
        interest_rate: Deposit interest rate, in percent.
        pin: Numeric credential checked on login and closure.
        user_name: Initials-based identifier assigned by the directory.
    """

    owner: str
    movements: list[float] = field(default_factory=list)
    interest_rate: float = 0.0
    pin: int = 0
    user_name: str | None = None

    @property
    def first_name(self) -> str:
        """Return the first token of the owner name."""
        parts = self.owner.split()
        return parts[0] if parts else ""


__all__ = ["Account"]
