"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of calls made
against the persistence backends.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, throttling)
        PERMANENT_ERROR: Non-retryable error (validation, access denied)
        CONDITION_FAILED: A conditional write was rejected by the backend
        NOT_FOUND: Resource (table, item) not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    CONDITION_FAILED = "condition_failed"
    NOT_FOUND = "not_found"
