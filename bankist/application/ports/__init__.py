"""Application ports package."""

from .account_directory import AccountDirectoryPort
from .presentation import PresentationPort

__all__ = [
    "AccountDirectoryPort",
    "PresentationPort",
]
