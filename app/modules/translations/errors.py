"""Errors for the translations module."""

from infrastructure.i18n.errors import (
    ConfigurationError,
    InvalidResourceError,
    LoaderNotFoundError,
)
from infrastructure.persistence.errors import PersistenceError


class ResetError(Exception):
    """Raised when the destructive pre-import reset cannot complete.

    The import must not continue to reconciliation after this error.
    """

    def __init__(self, message: str):
        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "LoaderNotFoundError",
    "InvalidResourceError",
    "PersistenceError",
    "ResetError",
]
