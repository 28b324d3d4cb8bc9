"""Domain helpers deriving account user names."""

from collections import Counter
from collections.abc import Iterable
from logging import Logger

from bankist.domain.models.accounts import Account


def compute_user_name(owner: str) -> str:
    """Return the lowercase initials of an owner name.

    Args:
        owner: Full display name, tokens separated by whitespace.

    Returns:
        str: Initials of every token, lowercased and concatenated.
    """
    return "".join(token[0] for token in owner.split()).lower()


def assign_user_names(
    accounts: Iterable[Account],
    logger: Logger | None = None,
) -> list[Account]:
    """Assign a user name to every account.

    Duplicated user names are kept; lookups resolve to the first account
    holding the name, so a warning is emitted for each duplicate.

    Args:
        accounts: Accounts entering the directory.
        logger: Optional logger used for duplicate warnings.

    Returns:
        list[Account]: The same accounts, in order, with user names set.
    """
    assigned = []
    for account in accounts:
        account.user_name = compute_user_name(account.owner)
        assigned.append(account)

    counts = Counter(account.user_name for account in assigned)
    if logger is not None:
        for user_name, count in counts.items():
            if count > 1:
                logger.warning(
                    f"User name '{user_name}' is shared by {count} accounts"
                )
    return assigned


__all__ = ["compute_user_name", "assign_user_names"]
