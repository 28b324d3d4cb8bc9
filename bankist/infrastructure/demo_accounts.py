"""Demo accounts loaded into every new session."""

from bankist.domain.models import Account


def build_demo_accounts() -> list[Account]:
    """Return fresh copies of the demo accounts.

    Returns:
        list[Account]: Accounts without user names; the directory assigns them.
    """
    return [
        Account(
            owner="Jonas Schmedtmann",
            movements=[200, 450, -400, 3000, -650, -130, 70, 1300],
            interest_rate=1.2,
            pin=1111,
        ),
        Account(
            owner="Jessica Davis",
            movements=[5000, 3400, -150, -790, -3210, -1000, 8500, -30],
            interest_rate=1.5,
            pin=2222,
        ),
        Account(
            owner="Steven Thomas Williams",
            movements=[200, -200, 340, -300, -20, 50, 400, -460],
            interest_rate=0.7,
            pin=3333,
        ),
        Account(
            owner="Sarah Smith",
            movements=[430, 1000, 700, 50, 90],
            interest_rate=1,
            pin=4444,
        ),
    ]


__all__ = ["build_demo_accounts"]
