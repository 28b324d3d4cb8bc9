"""Use case switching the movements display order."""

from bankist.application.ports.presentation import PresentationPort
from bankist.application.use_cases.session_state import SessionState
from bankist.domain.services.ledger import display_movements
from bankist.infrastructure.logging.logger import get_app_logger


class ToggleSortUseCase:
    """Flip between insertion order and ascending value order."""

    def __init__(self, presenter: PresentationPort, logger=None) -> None:
        self._presenter = presenter
        self._logger = logger or get_app_logger()

    def execute(self, state: SessionState) -> bool:
        """Toggle sorting and re-render the movements only.

        Args:
            state: Session state holding the sort flag.

        Returns:
            bool: True when the movements were re-rendered.
        """
        if not state.is_logged_in:
            self._logger.warning("Sort requested without a logged-in user")
            return False

        account = state.current_account
        state.sort_active = not state.sort_active
        self._presenter.present_movements(
            display_movements(account.movements, sort=state.sort_active),
            state.sort_active,
        )
        return True


__all__ = ["ToggleSortUseCase"]
