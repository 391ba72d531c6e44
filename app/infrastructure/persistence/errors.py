"""Errors raised by key store backends."""

from typing import Optional

from infrastructure.operations.result import OperationResult


class PersistenceError(Exception):
    """Raised when a key store operation cannot complete.

    Attributes:
        operation: store operation that failed (e.g. "set_message")
        result: the OperationResult returned by the backend, when available
    """

    def __init__(
        self,
        operation: str,
        message: str,
        result: Optional[OperationResult] = None,
    ):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.result = result
