"""
AWS client layer.

Every AWS call made by the key store goes through execute_aws_api_call,
which:
- builds a boto3 client for the configured region (and optional endpoint,
  e.g. DynamoDB Local);
- reads every page of paginated operations;
- retries throttled calls with exponential backoff;
- returns an OperationResult instead of raising.

Usage:
    result = execute_aws_api_call(
        service_name="dynamodb",
        method="scan",
        keys=["Items"],
        force_paginate=True,
        TableName="translation_keys",
    )
    if result.is_success:
        items = result.data
"""

import time
from typing import Any, Callable, Dict, List, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = get_module_logger()

AWS_REGION = settings.aws.AWS_REGION
AWS_ENDPOINT_URL = settings.aws.ENDPOINT_URL
THROTTLING_ERRS = settings.aws.THROTTLING_ERRS

# Conditional writes failing is an expected outcome for these calls
EXPECTED_ERRORS: Dict[str, List[str]] = {
    "dynamodb_put_item": ["ConditionalCheckFailedException"],
    "dynamodb_update_item": ["ConditionalCheckFailedException"],
}
DEFAULT_MAX_RETRIES = 3
BACKOFF_FACTOR = 0.5


def _error_code(error: Exception) -> Optional[str]:
    response = getattr(error, "response", None) or {}
    return response.get("Error", {}).get("Code")


def _is_throttled(error: Exception) -> bool:
    return _error_code(error) in THROTTLING_ERRS


def _retry_delay(attempt: int) -> float:
    return BACKOFF_FACTOR * (2**attempt)


def _classify_final_error(error: Exception, func_name: str) -> OperationResult:
    error_code = _error_code(error)
    if error_code in EXPECTED_ERRORS.get(func_name, []):
        logger.debug("aws_api_expected_error", function=func_name, error_code=error_code)
    else:
        logger.error(
            "aws_api_error_final",
            function=func_name,
            error=str(error),
            error_code=error_code,
        )
    return classify_aws_error(error)


def _can_paginate_method(client: BaseClient, method: str) -> bool:
    """True if the client reports a paginator for the method."""
    try:
        return client.can_paginate(method)
    except (AttributeError, TypeError, ValueError):
        return False


def get_aws_client(
    service_name: str,
    session_config: Optional[dict] = None,
    client_config: Optional[dict] = None,
) -> BaseClient:
    """Create a boto3 client.

    Args:
        service_name: AWS service, e.g. "dynamodb".
        session_config: boto3.Session kwargs; defaults to the configured region.
        client_config: Session.client kwargs; defaults to the configured region
            plus AWS_ENDPOINT_URL when set.
    """
    if session_config is None:
        session_config = {"region_name": AWS_REGION}
    if client_config is None:
        client_config = {"region_name": AWS_REGION}
        if AWS_ENDPOINT_URL:
            client_config["endpoint_url"] = AWS_ENDPOINT_URL
    return boto3.Session(**session_config).client(service_name, **client_config)


def _paginate_all_results(
    client: BaseClient, method: str, keys: Optional[List[str]] = None, **kwargs
) -> List[dict]:
    """Read every page and concatenate the list values.

    With keys, only those page entries are collected; without, every entry
    except ResponseMetadata is.
    """
    results: List[dict] = []
    for page in client.get_paginator(method).paginate(**kwargs):
        wanted = keys if keys is not None else [k for k in page if k != "ResponseMetadata"]
        for key in wanted:
            value = page.get(key)
            if value is None:
                continue
            if isinstance(value, list):
                results.extend(value)
            else:
                results.append(value)
    return results


def execute_api_call(
    func_name: str,
    api_call: Callable[[], Any],
    max_retries: Optional[int] = None,
) -> OperationResult:
    """Run an AWS call, retrying throttling errors.

    Args:
        func_name: Name used in logs and as the success message.
        api_call: Zero-argument callable performing the call.
        max_retries: Retries after the first attempt (default 3).

    Returns:
        OperationResult.success with the call's return value as data, or the
        classified error once retries are exhausted.
    """
    retries = DEFAULT_MAX_RETRIES if max_retries is None else max_retries
    attempt = 0

    while True:
        logger.debug("aws_api_call_start", function=func_name, attempt=attempt + 1)
        try:
            data = api_call()
        except (BotoCoreError, ClientError) as e:
            if _is_throttled(e) and attempt < retries:
                delay = _retry_delay(attempt)
                logger.warning(
                    "aws_api_retrying",
                    function=func_name,
                    attempt=attempt + 1,
                    error=str(e),
                    delay=delay,
                )
                time.sleep(delay)
                attempt += 1
                continue
            return _classify_final_error(e, func_name)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "aws_api_unexpected_error",
                function=func_name,
                error=str(e),
                exc_info=True,
            )
            return OperationResult.error(
                OperationStatus.PERMANENT_ERROR,
                f"Unexpected error in {func_name}: {e}",
                error_code="UNEXPECTED_ERROR",
            )

        if attempt > 0:
            logger.info("aws_api_retry_success", function=func_name, attempt=attempt + 1)
        return OperationResult.success(data=data, message=func_name)


def execute_aws_api_call(
    service_name: str,
    method: str,
    keys: Optional[List[str]] = None,
    session_config: Optional[dict] = None,
    client_config: Optional[dict] = None,
    max_retries: Optional[int] = None,
    force_paginate: bool = False,
    **kwargs,
) -> OperationResult:
    """Call an AWS API method through execute_api_call.

    Args:
        service_name: AWS service, e.g. "dynamodb".
        method: Client method, e.g. "get_item".
        keys: Page keys collected when paginating, e.g. ["Items"].
        session_config: boto3.Session kwargs.
        client_config: Session.client kwargs.
        max_retries: Override of the retry count.
        force_paginate: Paginate even when the client reports no paginator.
        **kwargs: Parameters of the API method.

    Returns:
        OperationResult whose data is a flat item list for paginated calls
        and the raw response dict otherwise.
    """

    def api_call():
        client = get_aws_client(service_name, session_config, client_config)
        if force_paginate or _can_paginate_method(client, method):
            return _paginate_all_results(client, method, keys, **kwargs)
        return getattr(client, method)(**kwargs)

    return execute_api_call(f"{service_name}_{method}", api_call, max_retries)
