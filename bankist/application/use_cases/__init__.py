"""Application use cases package."""

from .close_account import CloseAccountUseCase
from .ledger_snapshot import publish_ledger_snapshot
from .login import LoginUseCase
from .request_loan import LOAN_REJECTED_MESSAGE, RequestLoanUseCase
from .session_controller import SessionController
from .session_state import SessionState
from .toggle_sort import ToggleSortUseCase
from .transfer_funds import TRANSFER_FAILED_MESSAGE, TransferFundsUseCase

__all__ = [
    "CloseAccountUseCase",
    "publish_ledger_snapshot",
    "LoginUseCase",
    "LOAN_REJECTED_MESSAGE",
    "RequestLoanUseCase",
    "SessionController",
    "SessionState",
    "ToggleSortUseCase",
    "TRANSFER_FAILED_MESSAGE",
    "TransferFundsUseCase",
]
