"""Error classifier for AWS SDK exceptions.

Maps boto3/botocore exceptions to OperationResult so the key store backends
never handle raw SDK exceptions.

Usage:
    from infrastructure.operations.classifiers import classify_aws_error

    try:
        response = client.update_item(**params)
    except ClientError as e:
        return classify_aws_error(e)
"""

from typing import Dict, Tuple

from botocore.exceptions import ClientError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

THROTTLING_CODES = (
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "ProvisionedThroughputExceededException",
)
THROTTLE_RETRY_AFTER = 60

# AWS error code -> (status, message, error_code)
_CLASSIFICATION: Dict[str, Tuple[OperationStatus, str, str]] = {
    "ConditionalCheckFailedException": (
        OperationStatus.CONDITION_FAILED,
        "Conditional check failed",
        "CONDITION_FAILED",
    ),
    "AccessDeniedException": (
        OperationStatus.PERMANENT_ERROR,
        "AWS API access denied",
        "FORBIDDEN",
    ),
    "ResourceNotFoundException": (
        OperationStatus.NOT_FOUND,
        "AWS resource not found",
        "NOT_FOUND",
    ),
}
_VALIDATION_CODES = (
    "ValidationException",
    "InvalidParameterException",
    "BadRequestException",
)


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify an AWS SDK exception.

    - throttling codes: TRANSIENT_ERROR, retry_after 60s
    - ConditionalCheckFailedException: CONDITION_FAILED
    - AccessDeniedException: PERMANENT_ERROR
    - ResourceNotFoundException: NOT_FOUND
    - validation codes: PERMANENT_ERROR
    - any other ClientError: TRANSIENT_ERROR
    - non-ClientError (connection, endpoint): TRANSIENT_ERROR
    """
    if not isinstance(exc, ClientError):
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {exc}",
            error_code="CONNECTION_ERROR",
        )

    error_code = (exc.response or {}).get("Error", {}).get("Code", "Unknown")

    if error_code in THROTTLING_CODES:
        return OperationResult.transient_error(
            "AWS API throttled",
            error_code="RATE_LIMITED",
            retry_after=THROTTLE_RETRY_AFTER,
        )
    if error_code in _CLASSIFICATION:
        status, message, code = _CLASSIFICATION[error_code]
        return OperationResult.error(status, message, error_code=code)
    if error_code in _VALIDATION_CODES:
        return OperationResult.permanent_error(
            f"AWS validation error: {error_code}", error_code="INVALID_REQUEST"
        )
    return OperationResult.transient_error(
        f"AWS client error: {error_code}", error_code="AWS_CLIENT_ERROR"
    )
